"""Booking use cases: create, cancel, list and availability queries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Callable

from app.domain.bus import EventBus
from app.domain.errors import (
    ConflictError,
    IllegalStateError,
    NotFoundError,
    ValidationError,
)
from app.domain.events import ReservationCancelled, ReservationCreated
from app.domain.models import (
    AvailabilityResult,
    Reservation,
    ReservationRequest,
    ReservationView,
    _new_id,
    _utcnow,
)
from app.repos.memory import ReservationRepository
from app.services.availability import (
    DEFAULT_DURATION_MINUTES,
    MAX_DURATION_MINUTES,
    compute_available_slots,
)
from app.services.conflicts import detect_conflict
from app.services.status import resolve_status
from app.services.validation import parse_instant, validate_request

logger = logging.getLogger(__name__)


class BookingService:
    """Entry point for every reservation operation.

    All collaborators are injected: the repository holding the reservations,
    the clock used for "now", the id factory, the resource catalog and the
    bus that receives lifecycle events.
    """

    def __init__(
        self,
        repo: ReservationRepository,
        resources: Sequence[str],
        bus: EventBus | None = None,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self.repo = repo
        self.resources = list(resources)
        self.bus = bus or EventBus()
        self._clock = clock
        self._id_factory = id_factory

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: ReservationRequest) -> Reservation:
        """Validate *request*, check it against the resource's bookings and store it.

        Raises ValidationError or ConflictError when the request is refused.
        Conflict detection and the write happen under the resource's lock, so
        concurrent requests for one resource are admitted one at a time.
        """
        validation = validate_request(request, now=self._clock(), resources=self.resources)
        if not validation.is_valid:
            logger.warning("rejected booking request: %s", "; ".join(validation.errors))
            raise ValidationError(validation.errors)

        resource = request.resource.strip()
        start_time = parse_instant(request.start_time)
        end_time = parse_instant(request.end_time)

        with self.repo.lock_for(resource):
            existing = self.repo.list_all()
            conflict = detect_conflict(resource, start_time, end_time, existing)
            if conflict.has_conflict:
                logger.warning(
                    "booking conflict on %s for %s - %s (%d clash(es))",
                    resource,
                    start_time.isoformat(),
                    end_time.isoformat(),
                    len(conflict.conflicting_bookings),
                )
                raise ConflictError(conflict)

            reservation = Reservation(
                id=self._id_factory(),
                resource=resource,
                start_time=start_time,
                end_time=end_time,
                requested_by=request.requested_by.strip(),
                created_at=self._clock(),
            )
            self.repo.add(reservation)

        logger.info("admitted reservation %s on %s", reservation.id, resource)
        self.bus.publish(
            ReservationCreated(
                reservation_id=reservation.id,
                resource=reservation.resource,
                start_time=reservation.start_time,
                end_time=reservation.end_time,
                requested_by=reservation.requested_by,
            )
        )
        return reservation

    def cancel(self, reservation_id: str) -> Reservation:
        """Remove a reservation that has not started yet."""
        reservation = self.repo.get(reservation_id)
        if reservation is None:
            raise NotFoundError(reservation_id)

        with self.repo.lock_for(reservation.resource):
            # Re-read under the lock; a concurrent cancel may have won.
            reservation = self.repo.get(reservation_id)
            if reservation is None:
                raise NotFoundError(reservation_id)

            now = self._clock()
            if reservation.start_time < now:
                logger.warning("refused to cancel started reservation %s", reservation_id)
                raise IllegalStateError("Cannot cancel past bookings")

            if not self.repo.remove(reservation_id):
                raise NotFoundError(reservation_id)

        logger.info("cancelled reservation %s on %s", reservation_id, reservation.resource)
        self.bus.publish(
            ReservationCancelled(
                reservation_id=reservation_id,
                resource=reservation.resource,
                cancelled_at=now,
            )
        )
        return reservation

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, reservation_id: str) -> ReservationView:
        reservation = self.repo.get(reservation_id)
        if reservation is None:
            raise NotFoundError(reservation_id)
        return self._view(reservation, self._clock())

    def list_reservations(
        self, resource: str | None = None, day: date | None = None
    ) -> list[ReservationView]:
        """Return reservations, optionally filtered, ordered by start time."""
        reservations = self.repo.list_all()
        if resource:
            reservations = [r for r in reservations if r.resource == resource]
        if day is not None:
            reservations = [
                r for r in reservations
                if r.start_time.astimezone(timezone.utc).date() == day
            ]
        now = self._clock()
        return [
            self._view(r, now)
            for r in sorted(reservations, key=lambda r: r.start_time)
        ]

    def availability(
        self,
        resource: str,
        day: date,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
    ) -> AvailabilityResult:
        if not 0 < duration_minutes <= MAX_DURATION_MINUTES:
            raise ValidationError(
                [f"Duration must be between 1 and {MAX_DURATION_MINUTES} minutes"]
            )
        existing = self.repo.list_all()
        return compute_available_slots(resource, day, duration_minutes, existing)

    @staticmethod
    def _view(reservation: Reservation, now: datetime) -> ReservationView:
        return ReservationView(
            **reservation.model_dump(), status=resolve_status(reservation, now)
        )
