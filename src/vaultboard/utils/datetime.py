"""Utilities for datetime handling.

All instants are naive local datetimes; task dates have day resolution and
are normalized to the last second of the day.
"""

from datetime import date, datetime, time, timedelta

END_OF_DAY = time(23, 59, 59)


def now_local() -> datetime:
    """Get current local datetime."""
    return datetime.now()


def end_of_day(day: date) -> datetime:
    """Return 23:59:59 local time on the given day."""
    return datetime.combine(day, END_OF_DAY)


def parse_iso_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string, returning None for impossible dates."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def to_iso_date(day: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return day.isoformat()


def skip_weekend(day: date) -> date:
    """Shift Saturday and Sunday forward to the following Monday."""
    weekday = day.weekday()
    if weekday == 5:
        return day + timedelta(days=2)
    if weekday == 6:
        return day + timedelta(days=1)
    return day


def days_between(start: datetime, end: datetime) -> float:
    """Fractional days from start to end (negative when end is earlier)."""
    return (end - start).total_seconds() / 86400
