"""
Date helpers for the layout engine.

All functions work on naive local wall-clock datetimes (see
calendar_data.timezone_utils for converting aware datetimes). A "period"
is the visible part of a day on the grid, from min_hour to max_hour.
"""

from datetime import datetime, date, timedelta, time as dt_time


# Smallest step the engine uses when moving an instant off a boundary
ONE_MILLISECOND = timedelta(milliseconds=1)


def with_time_at_start_of_period(dt: datetime, hour: int) -> datetime:
    """Return dt's day at hour:00:00.000."""
    return datetime.combine(dt.date(), dt_time(0), tzinfo=dt.tzinfo) + timedelta(hours=hour)


def with_time_at_end_of_period(dt: datetime, hour: int) -> datetime:
    """
    Return the last representable instant before hour on dt's day.

    For hour=24 this is 23:59:59.999 of the same day.
    """
    return with_time_at_start_of_period(dt, hour) - ONE_MILLISECOND


def is_at_start_of_period(dt: datetime, hour: int) -> bool:
    return dt == with_time_at_start_of_period(dt, hour)


def day_start(day: date, tzinfo=None) -> datetime:
    """Midnight of a calendar date (naive unless tzinfo is given)."""
    return datetime.combine(day, dt_time(0), tzinfo=tzinfo)


def minutes_until(later: datetime, earlier: datetime) -> int:
    """Whole minutes from earlier to later, truncated toward zero."""
    return int((later - earlier).total_seconds() / 60)


def days_between(start: datetime, end: datetime) -> list[date]:
    """All calendar dates touched by [start, end], both ends inclusive."""
    first = start.date()
    count = (end.date() - first).days
    return [first + timedelta(days=offset) for offset in range(count + 1)]
