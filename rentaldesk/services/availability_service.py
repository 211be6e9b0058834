# rentaldesk/services/availability_service.py
"""
Per-query vehicle status.

Without a date range a vehicle is either "maintenance" (operator flag) or
"available"; current occupancy is not considered. With a range, a vehicle that
has any live booking overlapping [start, end] is "booked" and carries the day
after its last live booking as next_available_date.
"""

from dataclasses import replace
from datetime import date
from typing import Iterable

from rentaldesk.records import Booking, Vehicle, is_active
from rentaldesk.utils.dates import next_day, parse_date


def intervals_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Closed-interval overlap: touching endpoints count as a conflict."""
    return a_start <= b_end and b_start <= a_end


def resolve_vehicle_availability(
    vehicles: Iterable[Vehicle],
    bookings: Iterable[Booking],
    start=None,
    end=None,
) -> list[Vehicle]:
    """
    Returns new Vehicle views with status (and next_available_date) computed.
    `start`/`end` may be dates or YYYY-MM-DD strings; a range is only applied
    when both are given. Raises InvalidDateError on unparsable input.
    """
    if start is None or end is None:
        return [_unscoped_view(v) for v in vehicles]

    range_start = parse_date(start, "start")
    range_end = parse_date(end, "end")

    by_vehicle: dict[str, list[Booking]] = {}
    for booking in bookings:
        if is_active(booking):
            by_vehicle.setdefault(booking.vehicle_id, []).append(booking)

    return [
        _scoped_view(v, by_vehicle.get(v.id, []), range_start, range_end)
        for v in vehicles
    ]


def _unscoped_view(vehicle: Vehicle) -> Vehicle:
    status = "maintenance" if vehicle.status == "maintenance" else "available"
    return replace(vehicle, status=status, next_available_date=None)


def _scoped_view(vehicle: Vehicle, live: list[Booking], start: date, end: date) -> Vehicle:
    if vehicle.status == "maintenance":
        return replace(vehicle, status="maintenance", next_available_date=None)

    conflict = any(intervals_overlap(b.start_date, b.end_date, start, end) for b in live)
    if not conflict:
        return replace(vehicle, status="available", next_available_date=None)

    # Every live commitment counts, not only the one that clashed with this query
    last_end = max(b.end_date for b in live)
    return replace(vehicle, status="booked", next_available_date=next_day(last_end))
