"""Error taxonomy for the booking use cases."""

from __future__ import annotations

from app.domain.models import ConflictResult


class BookingError(Exception):
    """Base class for recoverable booking failures."""


class ValidationError(BookingError):
    """A request broke one or more validation rules."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class ConflictError(BookingError):
    """A request overlaps (buffer included) with existing reservations."""

    def __init__(self, result: ConflictResult) -> None:
        super().__init__(result.message)
        self.result = result


class NotFoundError(BookingError):
    def __init__(self, reservation_id: str) -> None:
        super().__init__(f"Reservation {reservation_id} not found")
        self.reservation_id = reservation_id


class IllegalStateError(BookingError):
    """The requested operation is not allowed in the reservation's current state."""


class RepositoryError(Exception):
    """Storage collaborator failure; propagated to callers as-is."""
