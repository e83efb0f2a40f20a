"""Derive a reservation's lifecycle status from the current time."""

from __future__ import annotations

from datetime import datetime

from app.domain.models import Reservation, ReservationStatus


def resolve_status(reservation: Reservation, now: datetime) -> ReservationStatus:
    """Both endpoints count as ongoing: start <= now <= end."""
    if now < reservation.start_time:
        return ReservationStatus.UPCOMING
    if now <= reservation.end_time:
        return ReservationStatus.ONGOING
    return ReservationStatus.PAST
