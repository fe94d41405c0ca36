"""
Calendar-day utilities.

Every datetime that enters the stores is naive local time. Aware values (for
example ISO strings ending in "Z" from older documents) are converted to the
local zone and stripped of their tzinfo, so naive and aware datetimes never
meet in a comparison.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[date, datetime]


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time. Naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def as_datetime(value: DateLike) -> datetime:
    """
    Promote a date to a datetime at midnight. Datetimes come back as naive local time.

    Args:
        value: date or datetime

    Returns:
        naive datetime
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    return datetime(value.year, value.month, value.day)


def start_of_day(value: DateLike) -> datetime:
    """
    Drop the time-of-day, keeping the local calendar date.

    Args:
        value: date or datetime

    Returns:
        Midnight of the same calendar day
    """
    return as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def is_same_day(left: DateLike, right: DateLike) -> bool:
    return as_datetime(left).date() == as_datetime(right).date()


def add_days(value: DateLike, days: int) -> datetime:
    return as_datetime(value) + timedelta(days=days)


def difference_in_calendar_days(left: DateLike, right: DateLike) -> int:
    """Signed number of calendar days from `right` to `left`, ignoring time-of-day."""
    return (as_datetime(left).date() - as_datetime(right).date()).days


def set_year(value: DateLike, year: int) -> datetime:
    """
    Re-stamp the year, keeping month, day and time.

    A February 29 landing in a non-leap year is clamped to February 28.

    Args:
        value: date or datetime
        year: Target year

    Returns:
        datetime in the target year
    """
    moment = as_datetime(value)
    day = min(moment.day, calendar.monthrange(year, moment.month)[1])
    return moment.replace(year=year, day=day)
