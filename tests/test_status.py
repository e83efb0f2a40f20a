"""Tests for status derivation."""

from datetime import datetime, timedelta, timezone

from app.domain.models import Reservation, ReservationStatus
from app.services.status import resolve_status

_START = datetime(2026, 6, 1, 14, 0, tzinfo=timezone.utc)
_END = _START + timedelta(hours=1)
_RESERVATION = Reservation(
    resource="Room A", start_time=_START, end_time=_END, requested_by="Al"
)


def test_before_start_is_upcoming():
    now = _START - timedelta(milliseconds=1)
    assert resolve_status(_RESERVATION, now) == ReservationStatus.UPCOMING


def test_at_start_is_ongoing():
    assert resolve_status(_RESERVATION, _START) == ReservationStatus.ONGOING


def test_mid_way_is_ongoing():
    assert resolve_status(_RESERVATION, _START + timedelta(minutes=30)) == "ongoing"


def test_at_end_is_still_ongoing():
    assert resolve_status(_RESERVATION, _END) == ReservationStatus.ONGOING


def test_after_end_is_past():
    now = _END + timedelta(milliseconds=1)
    assert resolve_status(_RESERVATION, now) == ReservationStatus.PAST
