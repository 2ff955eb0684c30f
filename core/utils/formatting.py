"""
Price formatting for display strings.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from app.config import settings

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_decimal(amount: Number) -> Decimal:
    """Coerce a numeric amount to Decimal without float noise."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def format_value(
    amount: Number,
    symbol: Optional[str] = None,
    decimal_sep: Optional[str] = None,
    thousands_sep: Optional[str] = None,
) -> str:
    """Format a money amount, e.g. 1234.5 -> '$1,234.50'.

    Separators and symbol default to the configured settings.
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    decimal_sep = settings.decimal_separator if decimal_sep is None else decimal_sep
    thousands_sep = settings.thousands_separator if thousands_sep is None else thousands_sep

    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, cents = f"{abs(value):f}".partition(".")

    groups = []
    while len(integer) > 3:
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)

    return f"{sign}{symbol}{thousands_sep.join(groups)}{decimal_sep}{cents}"
