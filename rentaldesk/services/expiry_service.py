# rentaldesk/services/expiry_service.py
"""
Lazy expiry sweep, run before every read that returns bookings or stats.
A confirmed booking whose end date is strictly before today becomes completed.
Pending bookings are left alone even when their window has passed: an
unapproved rental never turns into revenue on its own.
"""

from dataclasses import replace
from datetime import date
from typing import Iterable

from rentaldesk.records import Booking


def is_expired(booking: Booking, today: date) -> bool:
    return booking.status == "confirmed" and booking.end_date < today


def expired_bookings(bookings: Iterable[Booking], today: date) -> list[Booking]:
    """Completed copies of every booking the sweep should transition."""
    return [replace(b, status="completed") for b in bookings if is_expired(b, today)]
