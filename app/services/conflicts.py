"""Service for detecting booking conflicts between reservations."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from app.domain.models import ConflictResult, Reservation
from app.services.intervals import BUFFER_MINUTES, expand_by_buffer, overlaps


def find_conflicts(
    resource: str,
    new_start: datetime,
    new_end: datetime,
    existing: Iterable[Reservation],
    exclude_id: str | None = None,
) -> list[Reservation]:
    """Return existing reservations of *resource* that clash with the given range.

    Each existing reservation is widened by the buffer on both sides before the
    overlap test; the new range itself is not widened. Every clash is returned,
    in the order of *existing*.
    """
    conflicts: list[Reservation] = []
    for reservation in existing:
        if reservation.resource != resource or reservation.id == exclude_id:
            continue
        buffered_start, buffered_end = expand_by_buffer(
            reservation.start_time, reservation.end_time
        )
        if overlaps(new_start, new_end, buffered_start, buffered_end):
            conflicts.append(reservation)
    return conflicts


def detect_conflict(
    resource: str,
    start_time: datetime,
    end_time: datetime,
    existing: Iterable[Reservation],
    exclude_id: str | None = None,
) -> ConflictResult:
    conflicts = find_conflicts(resource, start_time, end_time, existing, exclude_id)
    if not conflicts:
        return ConflictResult(has_conflict=False)

    spans = ", ".join(
        f"{r.start_time.isoformat()} - {r.end_time.isoformat()}" for r in conflicts
    )
    return ConflictResult(
        has_conflict=True,
        conflicting_bookings=conflicts,
        message=(
            "Booking conflicts with existing reservations "
            f"(including {BUFFER_MINUTES}-minute buffer time). "
            f"Conflicting bookings: {spans}"
        ),
    )
