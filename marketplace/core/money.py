"""
Money codec: prices are stored as integer minor units (pence)
and shown to clients as decimal strings with two fractional digits.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

MINOR_UNITS_PER_MAJOR = 100

Amount = Union[Decimal, int, float, str]


def to_minor_units(amount: Amount) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Floats are converted through ``str`` so that 19.99 maps to exactly 1999
    instead of carrying binary rounding noise. Halves round away from zero.

    Example:
        >>> to_minor_units("49.99")
        4999
    """
    if isinstance(amount, float):
        amount = str(amount)
    scaled = Decimal(amount) * MINOR_UNITS_PER_MAJOR
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_display_string(minor_units: int) -> str:
    """
    Format minor units as a plain two-decimal string.

    No thousands separator, "." as decimal point: 1999 -> "19.99".
    """
    major = Decimal(int(minor_units)) / MINOR_UNITS_PER_MAJOR
    return f"{major:.2f}"
