"""Domain event handlers: wired up at application startup."""

from __future__ import annotations

import logging

from app.domain.bus import EventBus
from app.domain.events import ReservationCancelled, ReservationCreated

logger = logging.getLogger("app.audit")


class AuditHandlers:
    """Writes one audit line per reservation lifecycle event."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(ReservationCreated, self.on_reservation_created)
        self.bus.subscribe(ReservationCancelled, self.on_reservation_cancelled)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_reservation_created(self, event: ReservationCreated) -> None:
        logger.info(
            "reservation %s created: %s %s - %s by %s",
            event.reservation_id,
            event.resource,
            event.start_time.isoformat(),
            event.end_time.isoformat(),
            event.requested_by,
        )

    def on_reservation_cancelled(self, event: ReservationCancelled) -> None:
        logger.info(
            "reservation %s cancelled: %s at %s",
            event.reservation_id,
            event.resource,
            event.cancelled_at.isoformat(),
        )
