# tests/test_expiry_service.py
"""Unit tests for the lazy expiry sweep."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date
from rentaldesk.records import Booking
from rentaldesk.repository import RentalRepository
from rentaldesk.services.expiry_service import expired_bookings, is_expired
from rentaldesk.storage.memory import MemoryStore

TODAY = date(2024, 6, 10)


def make_booking(booking_id="b1", end=date(2024, 6, 9), status="confirmed"):
    return Booking(
        id=booking_id,
        vehicle_id="v1",
        guest_name="Maria Santos",
        guest_phone="+63 923 456 7890",
        start_date=date(2024, 6, 1),
        end_date=end,
        total_price=5400,
        status=status,
    )


class TestExpiryRule:
    def test_confirmed_past_end_expires(self):
        assert is_expired(make_booking(), TODAY)

    def test_ending_today_is_not_expired(self):
        assert not is_expired(make_booking(end=TODAY), TODAY)

    def test_pending_past_end_is_left_alone(self):
        # Unapproved bookings are never auto-completed, even long after their window
        assert not is_expired(make_booking(status="pending"), TODAY)
        assert not is_expired(make_booking(status="pending_id_missing"), TODAY)

    def test_terminal_statuses_untouched(self):
        for status in ("cancelled", "archived", "completed"):
            assert not is_expired(make_booking(status=status), TODAY)

    def test_returns_completed_copies(self):
        original = make_booking()
        result = expired_bookings([original, make_booking("b2", end=TODAY)], TODAY)
        assert [b.id for b in result] == ["b1"]
        assert result[0].status == "completed"
        assert original.status == "confirmed"


class TestRepositorySweep:
    def make_repo(self, *bookings):
        store = MemoryStore()
        for b in bookings:
            store.save_booking(b)
        return RentalRepository(store, today=lambda: TODAY)

    def test_read_completes_expired_booking(self):
        repo = self.make_repo(make_booking())
        bookings = repo.list_bookings()
        assert bookings[0].status == "completed"
        assert repo.store.get_booking("b1").status == "completed"

    def test_sweep_is_idempotent(self):
        repo = self.make_repo(make_booking(), make_booking("b2", status="pending"))
        assert repo.sweep_expired() == 1
        first = repo.store.list_bookings()
        assert repo.sweep_expired() == 0
        assert repo.store.list_bookings() == first

    def test_pending_stays_pending_after_read(self):
        repo = self.make_repo(make_booking(status="pending"))
        assert repo.list_bookings()[0].status == "pending"

    def test_stats_read_triggers_sweep(self):
        repo = self.make_repo(make_booking())
        repo.get_stats()
        assert repo.store.get_booking("b1").status == "completed"
