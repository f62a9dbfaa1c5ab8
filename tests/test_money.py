"""Money codec tests."""

from decimal import Decimal

import pytest

from marketplace.core.money import to_display_string, to_minor_units


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("49.99", 4999),
        (19.99, 1999),
        (Decimal("0.01"), 1),
        (10, 1000),
        ("10.5", 1050),
        (0.1 + 0.2, 30),
    ],
)
def test_to_minor_units(amount, expected):
    assert to_minor_units(amount) == expected


def test_to_minor_units_rounds_half_away_from_zero():
    assert to_minor_units("0.005") == 1
    assert to_minor_units("1.234") == 123
    assert to_minor_units("1.235") == 124
    assert to_minor_units("-1.235") == -124


@pytest.mark.parametrize(
    "minor, expected",
    [
        (1999, "19.99"),
        (5, "0.05"),
        (100, "1.00"),
        (123456789, "1234567.89"),
    ],
)
def test_to_display_string(minor, expected):
    assert to_display_string(minor) == expected


@pytest.mark.parametrize("minor", [1, 7, 99, 100, 101, 4999, 1000000, 987654321])
def test_display_string_converts_back_to_same_minor_units(minor):
    assert to_minor_units(to_display_string(minor)) == minor


@pytest.mark.parametrize("price", ["0.01", "0.10", "3.50", "19.99", "49.99", "1250.00"])
def test_two_decimal_prices_display_unchanged(price):
    assert to_display_string(to_minor_units(Decimal(price))) == format(Decimal(price), ".2f")
