# rentaldesk/services/pricing_service.py
"""
Rental price quote shown to the client before it submits a booking.
The store never recomputes or checks a booking's total_price against this.
"""

from datetime import date

from rentaldesk.utils.dates import days_between


def rental_days(start: date, end: date) -> int:
    """Billable periods for [start, end]; same-day rentals bill one period."""
    return max(1, days_between(start, end))


def quote_price(daily_rate: int, start: date, end: date) -> int:
    return daily_rate * rental_days(start, end)
