"""Service for checking that a booking request is well-formed and legal."""

from __future__ import annotations

from collections.abc import Collection
from datetime import datetime, timezone

from dateutil.parser import isoparse

from app.domain.models import ReservationRequest, ValidationResult

MIN_DURATION_MINUTES = 15
MAX_DURATION_MINUTES = 120


def parse_instant(value: str | datetime) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Naive values are read as UTC. Returns None when *value* cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_request(
    request: ReservationRequest,
    now: datetime | None = None,
    resources: Collection[str] | None = None,
) -> ValidationResult:
    """Check every rule and collect all violations.

    A start or end time that fails to parse is reported once and the rules
    that depend on it are skipped.
    """
    now = now or datetime.now(timezone.utc)
    errors: list[str] = []

    resource = request.resource.strip()
    if not resource:
        errors.append("Resource is required")
    elif resources is not None and resource not in resources:
        errors.append(f"Unknown resource: {resource}")

    if not request.requested_by.strip():
        errors.append("Requested by is required")

    start = parse_instant(request.start_time)
    end = parse_instant(request.end_time)

    if start is None:
        errors.append("Invalid start time")
    if end is None:
        errors.append("Invalid end time")

    if start is not None and end is not None:
        if start >= end:
            errors.append("End time must be after start time")

        duration_minutes = (end - start).total_seconds() / 60
        if duration_minutes < MIN_DURATION_MINUTES:
            errors.append(
                f"Booking duration must be at least {MIN_DURATION_MINUTES} minutes"
            )
        if duration_minutes > MAX_DURATION_MINUTES:
            errors.append("Booking duration cannot exceed 2 hours")

    if start is not None and start < now:
        errors.append("Cannot book time slots in the past")

    return ValidationResult(is_valid=not errors, errors=errors)
