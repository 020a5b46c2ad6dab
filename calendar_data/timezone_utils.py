"""
Timezone utilities for weekgrid.

The layout engine works on naive local wall-clock datetimes. Imported
calendar data usually carries UTC or zone-aware times, so it is converted
here before it reaches the engine.
"""

from datetime import datetime
import pytz


# Default timezone - can be overridden by config
_local_timezone_name: str = "Europe/Amsterdam"


def set_timezone(timezone_name: str):
    """
    Set the local timezone used for conversions.

    Raises:
        pytz.UnknownTimeZoneError: if the name is not a known timezone.
    """
    global _local_timezone_name
    pytz.timezone(timezone_name)
    _local_timezone_name = timezone_name


def get_local_timezone():
    """Get the configured local timezone as a pytz timezone object."""
    return pytz.timezone(_local_timezone_name)


def to_local_datetime(dt: datetime) -> datetime:
    """
    Convert an aware datetime to the local timezone.

    Naive datetimes are assumed to be local already and returned unchanged.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(get_local_timezone())
    return dt


def utc_to_local_naive(dt: datetime) -> datetime:
    """
    Convert an aware datetime to a naive local datetime.

    This is the form the layout engine expects: day boundaries are taken
    from the wall clock, not from UTC.
    """
    if dt.tzinfo is not None:
        return to_local_datetime(dt).replace(tzinfo=None)
    return dt
