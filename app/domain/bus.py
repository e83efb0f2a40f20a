"""Synchronous in-process bus for reservation lifecycle events."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """Delivers each published event to the handlers subscribed to its exact type.

    Handlers run synchronously, in subscription order, on the publisher's thread.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[BaseModel], list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type[BaseModel], handler: Handler) -> None:
        self._subscribers[event_type].append(handler)

    def handlers_for(self, event_type: type[BaseModel]) -> list[Handler]:
        return list(self._subscribers.get(event_type, []))

    def publish(self, event: BaseModel) -> None:
        handlers = self.handlers_for(type(event))
        logger.debug("publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
