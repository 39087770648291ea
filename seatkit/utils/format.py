"""
Money formatting for display.

Amounts are always integers in the currency's smallest unit (cents for USD).
Locales are BCP 47 tags ("en-US", "de-DE").
"""

from decimal import ROUND_HALF_UP, Decimal

from babel import Locale
from babel.numbers import format_currency, get_currency_precision, get_currency_symbol, parse_decimal

MINOR_UNITS = 100

# Characters Babel places between the symbol and the number
_SPACES = (" ", "\u00a0", "\u202f")


def _locale(tag: str) -> Locale:
    return Locale.parse(tag.replace("-", "_"))


def format_money(cents: int, currency: str, locale: str = "en-US") -> str:
    """
    Format an amount in minor units, e.g. format_money(1050, "USD") -> "$10.50".

    Zero-decimal currencies round half up: format_money(1050, "JPY") -> "¥11".
    """
    precision = get_currency_precision(currency)
    amount = (Decimal(cents) / MINOR_UNITS).quantize(
        Decimal(1).scaleb(-precision),
        rounding=ROUND_HALF_UP,
    )
    return format_currency(amount, currency, locale=_locale(locale))


def parse_money(text: str, currency: str, locale: str = "en-US") -> int:
    """
    Parse a string produced by format_money back into minor units.

    Raises babel.numbers.NumberFormatError (a ValueError) for text that is not
    a number once the currency symbol is removed.
    """
    loc = _locale(locale)
    cleaned = text.replace(get_currency_symbol(currency, locale=loc), "").replace(currency, "")
    for space in _SPACES:
        cleaned = cleaned.replace(space, "")

    amount = parse_decimal(cleaned, locale=loc)
    return int((amount * MINOR_UNITS).quantize(Decimal(1), rounding=ROUND_HALF_UP))
