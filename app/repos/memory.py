"""Reservation repository contract and its in-memory implementation."""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager
from datetime import datetime, timedelta, timezone
from typing import Protocol

from app.domain.models import Reservation


class ReservationRepository(Protocol):
    """Storage collaborator consumed by the booking use cases.

    Implementations must serialize callers that hold ``lock_for(resource)``
    for the same resource; reads may run concurrently.
    """

    def list_all(self) -> list[Reservation]: ...

    def get(self, reservation_id: str) -> Reservation | None: ...

    def add(self, reservation: Reservation) -> None: ...

    def remove(self, reservation_id: str) -> bool: ...

    def lock_for(self, resource: str) -> AbstractContextManager: ...


class InMemoryReservationRepository:
    """Dict-backed store for Reservation instances, keyed by id.

    Insertion order is preserved, so ``list_all`` is stable between mutations.
    """

    def __init__(self) -> None:
        self._store: dict[str, Reservation] = {}
        self._guard = threading.Lock()
        self._resource_locks: dict[str, threading.Lock] = {}

    def add(self, reservation: Reservation) -> None:
        with self._guard:
            self._store[reservation.id] = reservation

    def get(self, reservation_id: str) -> Reservation | None:
        with self._guard:
            return self._store.get(reservation_id)

    def list_all(self) -> list[Reservation]:
        with self._guard:
            return list(self._store.values())

    def remove(self, reservation_id: str) -> bool:
        with self._guard:
            return self._store.pop(reservation_id, None) is not None

    def lock_for(self, resource: str) -> threading.Lock:
        """Return the writer lock shared by every caller booking *resource*."""
        with self._guard:
            return self._resource_locks.setdefault(resource, threading.Lock())


# ---------------------------------------------------------------------------
# Seed data – a couple of near-future bookings useful for manual testing
# ---------------------------------------------------------------------------


def _seed_reservations(repo: InMemoryReservationRepository) -> None:
    now = datetime.now(timezone.utc)

    repo.add(
        Reservation(
            resource="Conference Room A",
            start_time=now + timedelta(hours=2),
            end_time=now + timedelta(hours=3),
            requested_by="John Doe",
            created_at=now,
        )
    )
    repo.add(
        Reservation(
            resource="Projector",
            start_time=now + timedelta(days=1),
            end_time=now + timedelta(days=1, hours=2),
            requested_by="Jane Smith",
            created_at=now,
        )
    )


def create_reservation_repository(seed: bool = False) -> InMemoryReservationRepository:
    """Return a fresh repository, optionally pre-loaded with sample data."""
    repo = InMemoryReservationRepository()
    if seed:
        _seed_reservations(repo)
    return repo
