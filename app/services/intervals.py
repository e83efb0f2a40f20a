"""Interval arithmetic shared by conflict detection and availability."""

from __future__ import annotations

from datetime import datetime, timedelta

BUFFER_MINUTES = 10


def overlaps(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    """Return True when [a_start, a_end) and [b_start, b_end) intersect.

    Ranges that only touch at an endpoint do not overlap.
    """
    return a_start < b_end and b_start < a_end


def expand_by_buffer(
    start: datetime,
    end: datetime,
    buffer_minutes: int = BUFFER_MINUTES,
) -> tuple[datetime, datetime]:
    buffer = timedelta(minutes=buffer_minutes)
    return start - buffer, end + buffer
