"""Domain models for the resource reservation system."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ReservationStatus(StrEnum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Reservation(BaseModel):
    """A booking of one resource for a half-open time interval.

    Reservations are immutable once created; the only lifecycle operation
    after creation is removal from the repository.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    resource: str
    start_time: datetime
    end_time: datetime
    requested_by: str
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("start_time", "end_time", "created_at")
    @classmethod
    def _naive_as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _end_after_start(self) -> Reservation:
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class ReservationView(Reservation):
    """A reservation together with its status derived at read time."""

    status: ReservationStatus


class TimeSlot(BaseModel):
    start_time: datetime
    end_time: datetime
    duration: int


# ---------------------------------------------------------------------------
# Engine results
# ---------------------------------------------------------------------------


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class ConflictResult(BaseModel):
    has_conflict: bool
    conflicting_bookings: list[Reservation] = Field(default_factory=list)
    message: str = ""


class AvailabilityResult(BaseModel):
    resource: str
    day: date = Field(serialization_alias="date")
    duration: int
    available_slots: list[TimeSlot] = Field(default_factory=list)
    total_slots: int = 0
    existing_bookings: int = 0


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class ReservationRequest(BaseModel):
    """Raw booking request; times stay unparsed until validation."""

    resource: str = ""
    start_time: str | datetime = ""
    end_time: str | datetime = ""
    requested_by: str = ""


class ReservationList(BaseModel):
    data: list[ReservationView]
    count: int
