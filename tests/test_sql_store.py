# tests/test_sql_store.py
"""SQL backend against an in-memory SQLite database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date
from rentaldesk.database import create_tables, make_engine, make_session_factory
from rentaldesk.records import Booking, Vehicle
from rentaldesk.repository import RentalRepository
from rentaldesk.storage.sql import SqlStore


@pytest.fixture
def store():
    engine = make_engine("sqlite://")
    create_tables(bind=engine)
    yield SqlStore(make_session_factory(engine))
    engine.dispose()


def make_vehicle(vehicle_id="v1", plate="ABC 1234"):
    return Vehicle(id=vehicle_id, model="Honda City", plate=plate, daily_rate=1800,
                   transmission="auto", color_hex="#10B981", image_url="", status="available")


def make_booking(booking_id="b1", status="confirmed", end=date(2024, 6, 3)):
    return Booking(id=booking_id, vehicle_id="v1", guest_name="Maria Santos", guest_phone="0923",
                   start_date=date(2024, 6, 1), end_date=end, total_price=5400, status=status)


class TestSqlStore:
    def test_starts_empty(self, store):
        assert store.is_empty()
        assert store.ping()

    def test_vehicle_round_trip(self, store):
        store.save_vehicle(make_vehicle())
        assert store.get_vehicle("v1") == make_vehicle()
        assert not store.is_empty()

    def test_save_replaces_whole_record(self, store):
        store.save_vehicle(make_vehicle())
        changed = make_vehicle()
        changed.status = "maintenance"
        changed.daily_rate = 2000
        store.save_vehicle(changed)
        assert store.get_vehicle("v1") == changed
        assert len(store.list_vehicles()) == 1

    def test_delete_vehicle(self, store):
        store.save_vehicle(make_vehicle())
        store.save_booking(make_booking())
        assert store.delete_vehicle("v1") is True
        assert store.get_vehicle("v1") is None
        assert store.delete_vehicle("v1") is False
        assert store.get_booking("b1") is not None

    def test_booking_dates_come_back_as_dates(self, store):
        store.save_booking(make_booking())
        booking = store.get_booking("b1")
        assert booking.start_date == date(2024, 6, 1)
        assert booking.id_image_url is None

    def test_batch_save(self, store):
        store.save_bookings([make_booking("b1"), make_booking("b2", status="pending")])
        assert sorted(b.id for b in store.list_bookings()) == ["b1", "b2"]


class TestRepositoryOnSql:
    def test_sweep_persists(self, store):
        store.save_vehicle(make_vehicle())
        store.save_booking(make_booking())
        repo = RentalRepository(store, today=lambda: date(2024, 6, 20))
        stats = repo.get_stats()
        assert store.get_booking("b1").status == "completed"
        assert stats.monthly_revenue == 5400

    def test_update_and_range_listing(self, store):
        repo = RentalRepository(store, today=lambda: date(2024, 6, 2))
        vehicle = repo.create_vehicle({"model": "Suzuki Ertiga", "plate": "JKL 7890", "daily_rate": 2200,
                                       "transmission": "auto", "color_hex": "#EF4444"})
        repo.create_booking({"vehicle_id": vehicle.id, "guest_name": "Pedro", "guest_phone": "0934",
                             "start_date": "2024-06-05", "end_date": "2024-06-08", "total_price": 6600})
        view = repo.list_vehicles("2024-06-08", "2024-06-10")[0]
        assert view.status == "booked"
        assert view.next_available_date == date(2024, 6, 9)
