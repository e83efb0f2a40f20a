"""Service for enumerating the free slots of a resource on a given day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone

from app.domain.models import AvailabilityResult, Reservation, TimeSlot
from app.services.intervals import expand_by_buffer, overlaps

OPENING_HOUR = 9
CLOSING_HOUR = 18
SLOT_STEP_MINUTES = 30
DEFAULT_DURATION_MINUTES = 60
MAX_DURATION_MINUTES = (CLOSING_HOUR - OPENING_HOUR) * 60


def reservations_on(
    resource: str, day: date, existing: Iterable[Reservation]
) -> list[Reservation]:
    """Return the reservations of *resource* whose start falls on *day* (UTC)."""
    return [
        r
        for r in existing
        if r.resource == resource
        and r.start_time.astimezone(timezone.utc).date() == day
    ]


def _slot_grid(day: date) -> list[datetime]:
    opening = datetime.combine(day, time(OPENING_HOUR), tzinfo=timezone.utc)
    closing = datetime.combine(day, time(CLOSING_HOUR), tzinfo=timezone.utc)
    step = timedelta(minutes=SLOT_STEP_MINUTES)

    grid: list[datetime] = []
    current = opening
    while current < closing:
        grid.append(current)
        current += step
    return grid


def compute_available_slots(
    resource: str,
    day: date,
    duration_minutes: int,
    existing: Iterable[Reservation],
) -> AvailabilityResult:
    """Scan the day's fixed slot grid and keep slots free of buffered bookings.

    Slot starts run from opening to closing time at a fixed stride; a slot is
    dropped when it would end after closing or when it overlaps any existing
    reservation widened by the buffer. Slots come back in chronological order.
    Raises ValueError unless 0 < duration_minutes <= MAX_DURATION_MINUTES.
    """
    if not 0 < duration_minutes <= MAX_DURATION_MINUTES:
        raise ValueError(
            f"duration_minutes must be between 1 and {MAX_DURATION_MINUTES}"
        )

    booked = reservations_on(resource, day, existing)
    buffered = [expand_by_buffer(r.start_time, r.end_time) for r in booked]
    closing = datetime.combine(day, time(CLOSING_HOUR), tzinfo=timezone.utc)
    duration = timedelta(minutes=duration_minutes)

    slots: list[TimeSlot] = []
    for slot_start in _slot_grid(day):
        slot_end = slot_start + duration
        if slot_end > closing:
            continue
        if any(overlaps(slot_start, slot_end, bs, be) for bs, be in buffered):
            continue
        slots.append(
            TimeSlot(start_time=slot_start, end_time=slot_end, duration=duration_minutes)
        )

    return AvailabilityResult(
        resource=resource,
        day=day,
        duration=duration_minutes,
        available_slots=slots,
        total_slots=len(slots),
        existing_bookings=len(booked),
    )
