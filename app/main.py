"""FastAPI application: entry point for the resource reservation service."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from app.config import Settings, load_settings
from app.domain.bus import EventBus
from app.domain.errors import (
    ConflictError,
    IllegalStateError,
    NotFoundError,
    ValidationError,
)
from app.domain.handlers import AuditHandlers
from app.domain.models import (
    AvailabilityResult,
    Reservation,
    ReservationList,
    ReservationRequest,
    ReservationView,
)
from app.repos.memory import create_reservation_repository
from app.services.availability import DEFAULT_DURATION_MINUTES, MAX_DURATION_MINUTES
from app.services.booking import BookingService


def build_service(settings: Settings) -> BookingService:
    """Wire the repository, bus and audit handlers into a BookingService."""
    bus = EventBus()
    AuditHandlers(bus)
    repo = create_reservation_repository(seed=settings.seed_sample_data)
    return BookingService(repo=repo, resources=settings.resources, bus=bus)


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def create_app(
    settings: Settings | None = None, service: BookingService | None = None
) -> FastAPI:
    """Build the application; the service (and its repository) lives on app.state."""
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Resource Reservation Service")
    app.state.booking_service = service or build_service(settings)

    # ── Routes ────────────────────────────────────────────────────────

    @app.get("/resources", response_model=list[str])
    def list_resources(
        service: BookingService = Depends(get_booking_service),
    ) -> list[str]:
        """Return the catalog of bookable resources."""
        return service.resources

    @app.get("/bookings", response_model=ReservationList)
    def list_bookings(
        resource: str | None = None,
        day: date | None = Query(None, alias="date"),
        service: BookingService = Depends(get_booking_service),
    ) -> ReservationList:
        """Return bookings ordered by start time, optionally filtered."""
        bookings = service.list_reservations(resource=resource, day=day)
        return ReservationList(data=bookings, count=len(bookings))

    @app.post("/bookings", response_model=Reservation, status_code=201)
    def create_booking(
        payload: ReservationRequest,
        service: BookingService = Depends(get_booking_service),
    ) -> Reservation:
        """Validate, conflict-check and store a new booking."""
        try:
            return service.create(payload)
        except ValidationError as exc:
            raise HTTPException(
                status_code=400,
                detail={"error": "Validation failed", "details": exc.errors},
            )
        except ConflictError as exc:
            raise HTTPException(
                status_code=409,
                detail={
                    "error": "Booking conflict detected",
                    "message": exc.result.message,
                    "conflicting_bookings": [
                        b.model_dump(mode="json")
                        for b in exc.result.conflicting_bookings
                    ],
                },
            )

    @app.get("/bookings/{booking_id}", response_model=ReservationView)
    def get_booking(
        booking_id: str, service: BookingService = Depends(get_booking_service)
    ) -> ReservationView:
        """Return a single booking by id."""
        try:
            return service.get(booking_id)
        except NotFoundError:
            raise HTTPException(status_code=404, detail="Booking not found")

    @app.delete("/bookings/{booking_id}")
    def cancel_booking(
        booking_id: str, service: BookingService = Depends(get_booking_service)
    ) -> dict:
        """Cancel a booking that has not started yet."""
        try:
            service.cancel(booking_id)
        except NotFoundError:
            raise HTTPException(status_code=404, detail="Booking not found")
        except IllegalStateError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return {"status": "cancelled", "id": booking_id}

    @app.get("/available-slots", response_model=AvailabilityResult)
    def available_slots(
        resource: str,
        day: date = Query(alias="date"),
        duration: int = Query(
            DEFAULT_DURATION_MINUTES, gt=0, le=MAX_DURATION_MINUTES
        ),
        service: BookingService = Depends(get_booking_service),
    ) -> AvailabilityResult:
        """Return free slots for *resource* on *date* for a *duration*-minute booking."""
        try:
            return service.availability(resource, day, duration)
        except ValidationError as exc:
            raise HTTPException(
                status_code=400,
                detail={"error": "Validation failed", "details": exc.errors},
            )

    return app


app = create_app()
