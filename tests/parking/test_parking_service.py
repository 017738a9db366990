from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.parking_system.parking_system.core.enums import ParkingStatus
from src.parking_system.parking_system.core.exceptions import NotFoundError, ValidationError
from src.parking_system.parking_system.parking.kv_parking_repository import KVParkingRepository
from src.parking_system.parking_system.parking.service import ParkingService, generate_record_id


def _service(store, clock):
    return ParkingService(KVParkingRepository(store), clock=clock)


def test_create_uppercases_plate_and_starts_pending(store, clock, fixed_now):
    svc = _service(store, clock)

    record = svc.create("b 1234 xyz")

    assert record.plate_number == "B 1234 XYZ"
    assert record.status == ParkingStatus.PENDING
    assert record.entry_time == fixed_now
    assert store.get(f"parking:{record.id}")["plateNumber"] == "B 1234 XYZ"


def test_create_strips_surrounding_whitespace(store, clock):
    record = _service(store, clock).create("  d 42 ab ")
    assert record.plate_number == "D 42 AB"


@pytest.mark.parametrize("plate", ["", "   ", None])
def test_create_rejects_empty_plate_and_persists_nothing(store, clock, plate):
    svc = _service(store, clock)

    with pytest.raises(ValidationError):
        svc.create(plate)

    assert store.keys() == []
    assert svc.list_records() == []


def test_list_returns_most_recent_first(store, clock):
    svc = _service(store, clock)
    first = svc.create("B 1")
    second = svc.create("B 2")
    third = svc.create("B 3")

    assert [r.id for r in svc.list_records()] == [third.id, second.id, first.id]


def test_update_status_to_paid_keeps_other_fields(store, clock):
    svc = _service(store, clock)
    created = svc.create("b 1234 xyz")
    svc.create("d 1 a")

    svc.update_status(created.id, "paid")

    listed = {r.id: r for r in svc.list_records()}
    updated = listed[created.id]
    assert updated.status == ParkingStatus.PAID
    assert updated.plate_number == created.plate_number
    assert updated.entry_time == created.entry_time
    assert [r.status for r in listed.values() if r.id != created.id] == [ParkingStatus.PENDING]


def test_update_status_unknown_id_raises_and_creates_nothing(store, clock):
    svc = _service(store, clock)

    with pytest.raises(NotFoundError):
        svc.update_status("missing", "paid")

    assert store.keys() == []


def test_update_status_rejects_unknown_status(store, clock):
    svc = _service(store, clock)
    created = svc.create("B 1")

    with pytest.raises(ValidationError):
        svc.update_status(created.id, "refunded")

    assert svc.list_records()[0].status == ParkingStatus.PENDING


def test_update_status_allows_paid_back_to_pending(store, clock):
    svc = _service(store, clock)
    created = svc.create("B 1")
    svc.update_status(created.id, "paid")

    record = svc.update_status(created.id, "pending")

    assert record.status == ParkingStatus.PENDING


def test_delete_is_idempotent(store, clock):
    svc = _service(store, clock)
    created = svc.create("B 1")

    svc.delete(created.id)
    svc.delete(created.id)

    assert svc.list_records() == []


def test_delete_all_returns_count_and_empties_namespace(store, clock):
    svc = _service(store, clock)
    for plate in ("B 1", "B 2", "B 3"):
        svc.create(plate)
    store.set("session:abc", {"keep": True})

    assert svc.delete_all() == 3
    assert svc.list_records() == []
    assert store.keys() == ["session:abc"]


def test_delete_all_on_empty_store_returns_zero(store, clock):
    assert _service(store, clock).delete_all() == 0


def test_generated_ids_are_unique_within_one_millisecond():
    now = datetime(2026, 10, 17, 8, 30, tzinfo=timezone.utc)
    ids = {generate_record_id(now) for _ in range(200)}

    assert len(ids) == 200
    assert all(i.startswith(str(int(now.timestamp() * 1000))) for i in ids)


def test_ids_sort_with_entry_time(store, fixed_now):
    svc = ParkingService(KVParkingRepository(store), clock=lambda: fixed_now)
    earlier = generate_record_id(fixed_now - timedelta(seconds=5))
    later = svc.create("B 1").id

    assert earlier.split("-")[0] < later.split("-")[0]
