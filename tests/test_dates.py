"""Tests for date helpers"""

from datetime import datetime, timedelta, timezone

import pytest

from seatkit.utils.dates import (
    add_minutes,
    format_date_for_display,
    format_datetime,
    is_between,
    is_same_day,
    is_today,
    parse_datetime,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def test_parse_and_format_datetime():
    value = parse_datetime("2025-01-15T14:30:00.000Z")

    assert value == utc(2025, 1, 15, 14, 30)
    assert format_datetime(value) == "2025-01-15T14:30:00.000Z"


def test_parse_converts_offsets_to_utc():
    assert parse_datetime("2025-01-15T14:30:00+01:00") == utc(2025, 1, 15, 13, 30)


def test_parse_rejects_invalid_strings():
    with pytest.raises(ValueError, match="Invalid date string: tomorrow"):
        parse_datetime("tomorrow")


def test_format_date_for_display():
    value = utc(2025, 1, 15, 14, 30)

    assert format_date_for_display(value, "short") == "1/15/2025"
    assert format_date_for_display(value, "long") == "January 15, 2025"


def test_add_minutes_returns_new_value():
    start = utc(2025, 1, 15, 14, 30)

    assert add_minutes(start, 30) == utc(2025, 1, 15, 15, 0)
    assert start == utc(2025, 1, 15, 14, 30)
    assert add_minutes(start, -30) == utc(2025, 1, 15, 14, 0)
    assert add_minutes(utc(2025, 1, 15, 23, 45), 30) == utc(2025, 1, 16, 0, 15)


def test_is_same_day_uses_utc():
    assert is_same_day(utc(2025, 1, 15, 0, 0), utc(2025, 1, 15, 23, 59))
    assert not is_same_day(utc(2025, 1, 15, 23, 59), utc(2025, 1, 16, 0, 0))

    # 23:30 at -05:00 is already the 16th in UTC
    eastern = timezone(timedelta(hours=-5))
    assert is_same_day(datetime(2025, 1, 15, 23, 30, tzinfo=eastern), utc(2025, 1, 16, 4, 30))


def test_is_today():
    assert is_today(datetime.now(timezone.utc))
    assert not is_today(datetime.now(timezone.utc) - timedelta(days=2))


def test_is_between_is_inclusive():
    start = utc(2025, 1, 15, 12, 0)
    end = utc(2025, 1, 15, 14, 0)

    assert is_between(utc(2025, 1, 15, 13, 0), start, end)
    assert is_between(start, start, end)
    assert is_between(end, start, end)
    assert not is_between(utc(2025, 1, 15, 11, 59), start, end)
    assert not is_between(utc(2025, 1, 15, 14, 1), start, end)
