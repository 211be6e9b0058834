# tests/test_customer_service.py
"""Unit tests for the customer directory and bulk rename."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date
from rentaldesk.records import Booking
from rentaldesk.services.customer_service import rename_customer, roll_up_customers


def make_booking(booking_id, name, start, status="confirmed", phone="0912", id_image_url=None):
    return Booking(id=booking_id, vehicle_id="v1", guest_name=name, guest_phone=phone,
                   start_date=start, end_date=start, total_price=1500, status=status,
                   id_image_url=id_image_url)


class TestCustomerRollUp:
    def test_names_merge_across_case_and_whitespace(self):
        bookings = [
            make_booking("b1", "Juan Dela Cruz", date(2024, 3, 1)),
            make_booking("b2", "juan dela cruz ", date(2024, 4, 1), status="completed"),
        ]
        customers = roll_up_customers(bookings)
        assert len(customers) == 1
        assert customers[0].total_bookings == 2

    def test_latest_booking_wins(self):
        bookings = [
            make_booking("b2", "juan dela cruz", date(2024, 4, 1), phone="0999"),
            make_booking("b1", "Juan Dela Cruz", date(2024, 3, 1), phone="0912"),
        ]
        customer = roll_up_customers(bookings)[0]
        assert customer.name == "juan dela cruz"
        assert customer.phone == "0999"
        assert customer.last_booking == date(2024, 4, 1)

    def test_id_image_only_replaced_when_present(self):
        bookings = [
            make_booking("b1", "Ana", date(2024, 3, 1), id_image_url="data:image/png;base64,AAA"),
            make_booking("b2", "Ana", date(2024, 4, 1), id_image_url=""),
            make_booking("b3", "Ana", date(2024, 5, 1)),
        ]
        assert roll_up_customers(bookings)[0].id_image_url == "data:image/png;base64,AAA"

    def test_only_confirmed_and_completed_count(self):
        bookings = [
            make_booking(f"b{i}", "Pedro", date(2024, 3, i + 1), status=s)
            for i, s in enumerate(("pending", "pending_id_missing", "cancelled", "archived"))
        ]
        assert roll_up_customers(bookings) == []

    def test_sorted_by_last_booking_descending(self):
        bookings = [
            make_booking("b1", "Ana", date(2024, 3, 1)),
            make_booking("b2", "Pedro", date(2024, 5, 1)),
            make_booking("b3", "Maria", date(2024, 4, 1)),
        ]
        assert [c.name for c in roll_up_customers(bookings)] == ["Pedro", "Maria", "Ana"]

    def test_search_by_name_or_phone(self):
        bookings = [
            make_booking("b1", "Ana Reyes", date(2024, 3, 1), phone="+63 912"),
            make_booking("b2", "Pedro", date(2024, 5, 1), phone="+63 934"),
        ]
        assert [c.name for c in roll_up_customers(bookings, search="reyes")] == ["Ana Reyes"]
        assert [c.name for c in roll_up_customers(bookings, search="934")] == ["Pedro"]


class TestRenameCustomer:
    def test_rewrites_every_matching_booking(self):
        bookings = [
            make_booking("b1", "Juan Dela Cruz", date(2024, 3, 1)),
            make_booking("b2", " juan dela cruz", date(2024, 4, 1), status="cancelled"),
            make_booking("b3", "Maria", date(2024, 4, 1)),
        ]
        rewritten = rename_customer(bookings, "Juan Dela Cruz", "Juan de la Cruz", "0917")
        assert [b.id for b in rewritten] == ["b1", "b2"]
        assert all(b.guest_name == "Juan de la Cruz" and b.guest_phone == "0917" for b in rewritten)
        assert bookings[0].guest_name == "Juan Dela Cruz"

    def test_id_image_kept_unless_replaced(self):
        bookings = [make_booking("b1", "Ana", date(2024, 3, 1), id_image_url="old.png")]
        assert rename_customer(bookings, "Ana", "Ana", "1")[0].id_image_url == "old.png"
        replaced = rename_customer(bookings, "Ana", "Ana", "1", id_image_url="new.png", replace_id_image=True)
        assert replaced[0].id_image_url == "new.png"
