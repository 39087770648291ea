"""
Date and time helpers for restaurant operations.

Every function works in UTC; naive datetimes are taken to be UTC.
"""

from datetime import datetime, timedelta, timezone

from babel.dates import format_date

from seatkit.schemas.common import ensure_utc

DISPLAY_FORMATS = {
    "short": "M/d/yyyy",  # 1/15/2025
    "long": "long",  # January 15, 2025
}


def parse_datetime(text: str) -> datetime:
    """Parse an ISO 8601 string into an aware UTC datetime"""
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date string: {text}") from None
    return ensure_utc(parsed)


def format_datetime(value: datetime) -> str:
    """ISO 8601 in UTC with milliseconds, e.g. 2025-01-15T14:30:00.000Z"""
    return ensure_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_date_for_display(value: datetime, format: str = "short", locale: str = "en-US") -> str:
    if format not in DISPLAY_FORMATS:
        raise ValueError(f"Unknown display format: {format}")
    return format_date(
        ensure_utc(value).date(),
        format=DISPLAY_FORMATS[format],
        locale=locale.replace("-", "_"),
    )


def add_minutes(value: datetime, minutes: int) -> datetime:
    """Return a new datetime shifted by minutes (may be negative)"""
    return value + timedelta(minutes=minutes)


def is_same_day(first: datetime, second: datetime) -> bool:
    """Compare calendar days in UTC"""
    return ensure_utc(first).date() == ensure_utc(second).date()


def is_today(value: datetime) -> bool:
    return is_same_day(value, datetime.now(timezone.utc))


def is_between(value: datetime, start: datetime, end: datetime) -> bool:
    """Inclusive at both ends"""
    return ensure_utc(start) <= ensure_utc(value) <= ensure_utc(end)
