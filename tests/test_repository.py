"""Tests for the in-memory reservation repository."""

from datetime import datetime, timedelta, timezone

from app.domain.models import Reservation
from app.repos.memory import InMemoryReservationRepository, create_reservation_repository

_START = datetime(2026, 6, 2, 10, 0, tzinfo=timezone.utc)


def _make_reservation(offset_hours: int = 0, resource: str = "Projector") -> Reservation:
    start = _START + timedelta(hours=offset_hours)
    return Reservation(
        resource=resource,
        start_time=start,
        end_time=start + timedelta(minutes=30),
        requested_by="Al",
    )


def test_add_get_remove():
    repo = InMemoryReservationRepository()
    reservation = _make_reservation()
    repo.add(reservation)

    assert repo.get(reservation.id) == reservation
    assert repo.remove(reservation.id) is True
    assert repo.get(reservation.id) is None
    assert repo.remove(reservation.id) is False


def test_list_all_is_stable_between_mutations():
    repo = InMemoryReservationRepository()
    for offset in (3, 1, 2):
        repo.add(_make_reservation(offset))

    first = repo.list_all()
    second = repo.list_all()

    assert first == second
    assert [r.start_time for r in first] == [
        _START + timedelta(hours=h) for h in (3, 1, 2)
    ]


def test_list_all_returns_a_snapshot():
    repo = InMemoryReservationRepository()
    repo.add(_make_reservation())

    snapshot = repo.list_all()
    repo.add(_make_reservation(1))

    assert len(snapshot) == 1
    assert len(repo.list_all()) == 2


def test_lock_for_is_shared_per_resource():
    repo = InMemoryReservationRepository()

    assert repo.lock_for("Projector") is repo.lock_for("Projector")
    assert repo.lock_for("Projector") is not repo.lock_for("Laptop Cart")


def test_seeded_repository():
    repo = create_reservation_repository(seed=True)
    resources = {r.resource for r in repo.list_all()}

    assert resources == {"Conference Room A", "Projector"}
    assert create_reservation_repository().list_all() == []
