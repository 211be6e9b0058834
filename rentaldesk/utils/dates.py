# rentaldesk/utils/dates.py
"""Calendar-date helpers. Dates are date-only values, no time component."""

from datetime import date, datetime, timedelta
from typing import Optional

from rentaldesk.errors import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value, field: Optional[str] = None) -> date:
    """
    Accepts a date, a datetime (time is dropped) or a YYYY-MM-DD string.
    Anything else raises InvalidDateError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError:
            raise InvalidDateError(value, field) from None
    raise InvalidDateError(value, field)


def next_day(value: date) -> date:
    return value + timedelta(days=1)


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing `day`."""
    first = day.replace(day=1)
    if first.month == 12:
        following = first.replace(year=first.year + 1, month=1)
    else:
        following = first.replace(month=first.month + 1)
    return first, following - timedelta(days=1)


def days_between(start: date, end: date) -> int:
    return (end - start).days
