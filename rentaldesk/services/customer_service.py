# rentaldesk/services/customer_service.py
"""
Customer directory derived from booking history.
There is no Customer table: a customer is every confirmed or completed
booking sharing a guest name (trimmed, case-insensitive). Renaming a
customer rewrites the guest fields on each of their bookings.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Optional

from rentaldesk.records import Booking

ROLLUP_STATUSES = frozenset({"confirmed", "completed"})


@dataclass
class Customer:
    name: str
    phone: str
    id_image_url: Optional[str]
    total_bookings: int
    last_booking: date


def normalize_name(name: str) -> str:
    return name.strip().lower()


def roll_up_customers(bookings: Iterable[Booking], search: Optional[str] = None) -> list[Customer]:
    """
    One entry per normalized guest name. Later bookings (by start date)
    overwrite name, phone and, when present, the ID image.
    """
    directory: dict[str, Customer] = {}
    eligible = [b for b in bookings if b.status in ROLLUP_STATUSES]

    # sorted() is stable, so same-day bookings keep their input order
    for booking in sorted(eligible, key=lambda b: b.start_date):
        key = normalize_name(booking.guest_name)
        entry = directory.get(key)
        if entry is None:
            directory[key] = Customer(
                name=booking.guest_name,
                phone=booking.guest_phone,
                id_image_url=booking.id_image_url or None,
                total_bookings=1,
                last_booking=booking.start_date,
            )
            continue
        entry.total_bookings += 1
        entry.last_booking = booking.start_date
        entry.phone = booking.guest_phone
        entry.name = booking.guest_name
        if booking.id_image_url:
            entry.id_image_url = booking.id_image_url

    customers = sorted(directory.values(), key=lambda c: c.last_booking, reverse=True)
    if search:
        customers = [c for c in customers if matches_search(c, search)]
    return customers


def matches_search(customer: Customer, search: str) -> bool:
    needle = search.strip()
    if not needle:
        return True
    return needle.lower() in customer.name.lower() or needle in customer.phone


def rename_customer(
    bookings: Iterable[Booking],
    old_name: str,
    name: str,
    phone: str,
    id_image_url: Optional[str] = None,
    replace_id_image: bool = False,
) -> list[Booking]:
    """
    Rewritten copies of every booking whose guest name matches `old_name`
    (normalized). The ID image is only touched when `replace_id_image` is set.
    """
    key = normalize_name(old_name)
    rewritten = []
    for booking in bookings:
        if normalize_name(booking.guest_name) != key:
            continue
        changes = {"guest_name": name, "guest_phone": phone}
        if replace_id_image:
            changes["id_image_url"] = id_image_url
        rewritten.append(replace(booking, **changes))
    return rewritten
