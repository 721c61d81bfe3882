"""Clock helpers.

Request handlers and jobs read the time through this module so tests can pin it.
"""
import re
from datetime import date, datetime, time, timedelta

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
_TIME_RE = re.compile(TIME_PATTERN)


def local_now() -> datetime:
    return datetime.now()


def local_today() -> date:
    return local_now().date()


def parse_hhmm(value: str) -> time:
    """Parse "H:MM"/"HH:MM" (24h) into a time."""
    if not isinstance(value, str) or not _TIME_RE.match(value):
        raise ValueError(f"Invalid time of day: {value!r}")
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def day_bounds(day: date):
    """[start, end) datetimes covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def date_range(start: date, end: date):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)
