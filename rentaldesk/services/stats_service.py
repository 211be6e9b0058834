# rentaldesk/services/stats_service.py
"""
Dashboard snapshot: fleet size, today's rentals and revenue, and revenue
from bookings completed within the current calendar month.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from rentaldesk.records import Booking, Vehicle
from rentaldesk.utils.dates import month_bounds

# Not rented "today" even when the window covers it
NOT_RENTED_STATUSES = frozenset({"cancelled", "completed", "archived"})


@dataclass(frozen=True)
class DashboardStats:
    total_cars: int
    rented_today: int
    revenue_today: int
    monthly_revenue: int


def rented_on(bookings: Iterable[Booking], day: date) -> list[Booking]:
    """Bookings in progress on `day`, both ends inclusive."""
    return [
        b for b in bookings
        if b.status not in NOT_RENTED_STATUSES and b.start_date <= day <= b.end_date
    ]


def completed_in_month(bookings: Iterable[Booking], day: date) -> list[Booking]:
    """Completed bookings whose end date falls inside the month of `day`."""
    first, last = month_bounds(day)
    return [b for b in bookings if b.status == "completed" and first <= b.end_date <= last]


def compute_dashboard_stats(
    vehicles: Sequence[Vehicle], bookings: Sequence[Booking], today: date
) -> DashboardStats:
    active = rented_on(bookings, today)
    return DashboardStats(
        total_cars=len(vehicles),
        rented_today=len(active),
        revenue_today=sum(b.total_price for b in active),
        monthly_revenue=sum(b.total_price for b in completed_in_month(bookings, today)),
    )
