"""
Time helpers for schedule timestamps.

All generated flight times are timezone-aware. Naive inputs are read as local
time in the request's timezone.
"""

from datetime import datetime

import pytz


def parse_iso_datetime(dt_str: str) -> datetime:
    """Parse ISO datetime string (e.g., "2026-01-15T09:45" or with offset)."""
    return datetime.fromisoformat(dt_str)


def localize(dt: datetime, tz_name: str) -> datetime:
    """Attach tz_name to a naive datetime; aware datetimes are returned unchanged."""
    if dt.tzinfo is not None:
        return dt
    return pytz.timezone(tz_name).localize(dt)


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Seconds and microseconds are dropped so schedules start on a whole minute.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current aware datetime in the specified timezone
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    return now_utc.astimezone(tz).replace(second=0, microsecond=0)


def format_iso(dt: datetime) -> str:
    """Format as ISO 8601 with minute precision and offset."""
    return dt.isoformat(timespec="minutes")
