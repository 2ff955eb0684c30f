"""
Tests for the price formatter.
"""

from decimal import Decimal

import pytest

from app.config import settings
from core.utils.formatting import format_value, to_decimal


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("10"), "10.00"),
        (Decimal("14.5"), "14.50"),
        (28, "28.00"),
        (0, "0.00"),
        (21.9, "21.90"),
        ("3.25", "3.25"),
        (Decimal("1234567.891"), "1,234,567.89"),
        (Decimal("999.995"), "1,000.00"),
        (Decimal("-5"), "-5.00"),
    ],
)
def test_format_value_plain(amount, expected):
    assert format_value(amount, symbol="", decimal_sep=".", thousands_sep=",") == expected


def test_format_value_brazilian_style():
    """Real style: 'R$' prefix with comma decimals and dot thousands."""
    formatted = format_value(Decimal("1234.5"), symbol="R$ ", decimal_sep=",", thousands_sep=".")
    assert formatted == "R$ 1.234,50"


def test_format_value_uses_settings(monkeypatch):
    monkeypatch.setattr(settings, "currency_symbol", "€")
    monkeypatch.setattr(settings, "decimal_separator", ",")
    monkeypatch.setattr(settings, "thousands_separator", " ")

    assert format_value(Decimal("2500")) == "€2 500,00"


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")
    assert to_decimal(Decimal("1.10")) == Decimal("1.10")
