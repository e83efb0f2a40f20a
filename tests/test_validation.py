"""Tests for booking request validation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.domain.models import ReservationRequest
from app.services.validation import parse_instant, validate_request

_NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def _request(**overrides) -> ReservationRequest:
    defaults = dict(
        resource="Room A",
        start_time=(_NOW + timedelta(hours=1)).isoformat(),
        end_time=(_NOW + timedelta(hours=2)).isoformat(),
        requested_by="Al",
    )
    defaults.update(overrides)
    return ReservationRequest(**defaults)


def _minutes_after_start(minutes: int) -> str:
    return (_NOW + timedelta(hours=1, minutes=minutes)).isoformat()


def test_valid_request():
    result = validate_request(_request(), now=_NOW)
    assert result.is_valid is True
    assert result.errors == []


def test_blank_resource_and_owner():
    result = validate_request(_request(resource="   ", requested_by=""), now=_NOW)

    assert result.is_valid is False
    assert "Resource is required" in result.errors
    assert "Requested by is required" in result.errors


def test_duration_too_short():
    result = validate_request(_request(end_time=_minutes_after_start(10)), now=_NOW)

    assert result.is_valid is False
    assert result.errors == ["Booking duration must be at least 15 minutes"]


def test_duration_too_long():
    result = validate_request(_request(end_time=_minutes_after_start(180)), now=_NOW)

    assert result.is_valid is False
    assert result.errors == ["Booking duration cannot exceed 2 hours"]


def test_duration_bounds_are_inclusive():
    for minutes in (15, 120):
        result = validate_request(_request(end_time=_minutes_after_start(minutes)), now=_NOW)
        assert result.is_valid, minutes

    for minutes in (14, 121):
        result = validate_request(_request(end_time=_minutes_after_start(minutes)), now=_NOW)
        assert not result.is_valid, minutes


def test_end_before_start():
    result = validate_request(
        _request(end_time=(_NOW + timedelta(minutes=30)).isoformat()), now=_NOW
    )
    assert "End time must be after start time" in result.errors


def test_start_in_the_past():
    result = validate_request(
        _request(
            start_time=(_NOW - timedelta(minutes=5)).isoformat(),
            end_time=(_NOW + timedelta(minutes=25)).isoformat(),
        ),
        now=_NOW,
    )
    assert result.errors == ["Cannot book time slots in the past"]


def test_start_exactly_now_is_allowed():
    result = validate_request(
        _request(
            start_time=_NOW.isoformat(),
            end_time=(_NOW + timedelta(minutes=30)).isoformat(),
        ),
        now=_NOW,
    )
    assert result.is_valid is True


def test_unparseable_times_are_reported_without_crashing():
    result = validate_request(
        _request(start_time="not a time", end_time="tomorrow-ish"), now=_NOW
    )

    assert result.is_valid is False
    assert result.errors == ["Invalid start time", "Invalid end time"]


def test_one_bad_time_still_checks_the_other_rules():
    result = validate_request(
        _request(start_time="garbage", requested_by=" "), now=_NOW
    )
    assert result.errors == ["Requested by is required", "Invalid start time"]


def test_all_violations_collected():
    result = validate_request(
        ReservationRequest(
            resource="",
            start_time=(_NOW - timedelta(hours=1)).isoformat(),
            end_time=(_NOW - timedelta(hours=1) + timedelta(minutes=5)).isoformat(),
            requested_by="",
        ),
        now=_NOW,
    )
    assert result.errors == [
        "Resource is required",
        "Requested by is required",
        "Booking duration must be at least 15 minutes",
        "Cannot book time slots in the past",
    ]


def test_unknown_resource_against_catalog():
    result = validate_request(
        _request(resource="Hot Tub"), now=_NOW, resources=["Room A", "Projector"]
    )
    assert result.errors == ["Unknown resource: Hot Tub"]


def test_catalog_not_checked_when_absent():
    assert validate_request(_request(resource="Hot Tub"), now=_NOW).is_valid


def test_parse_instant_naive_is_utc():
    assert parse_instant("2026-06-01T09:00:00") == datetime(
        2026, 6, 1, 9, 0, tzinfo=timezone.utc
    )


def test_parse_instant_keeps_offset():
    parsed = parse_instant("2026-06-01T11:00:00+02:00")
    assert parsed == datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)


def test_parse_instant_rejects_garbage():
    assert parse_instant("") is None
    assert parse_instant("31/02/2026") is None
