"""
Formatting and date utilities
"""

from seatkit.utils.dates import (
    add_minutes,
    format_date_for_display,
    format_datetime,
    is_between,
    is_same_day,
    is_today,
    parse_datetime,
)
from seatkit.utils.format import format_money, parse_money

__all__ = [
    "add_minutes",
    "format_date_for_display",
    "format_datetime",
    "format_money",
    "is_between",
    "is_same_day",
    "is_today",
    "parse_datetime",
    "parse_money",
]
