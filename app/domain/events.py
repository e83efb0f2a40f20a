"""Domain events emitted during the reservation lifecycle."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ReservationCreated(BaseModel):
    """Fired after a new Reservation is persisted."""

    reservation_id: str
    resource: str
    start_time: datetime
    end_time: datetime
    requested_by: str


class ReservationCancelled(BaseModel):
    """Fired after a Reservation is removed from the repository."""

    reservation_id: str
    resource: str
    cancelled_at: datetime
