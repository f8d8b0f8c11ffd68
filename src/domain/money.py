"""Money arithmetic helpers

All amounts are Decimal. Computation keeps full precision; rounding happens
only for display (2 places) or when a snapshot is frozen for storage (6 places,
matching the Numeric(18, 6) columns).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float, str]

CURRENCY_QUANT = Decimal("0.01")
STORAGE_QUANT = Decimal("0.000001")
ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """Convert user input to Decimal; floats go through str to avoid binary noise"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(value)


def round_currency(value: Number) -> Decimal:
    return to_decimal(value).quantize(CURRENCY_QUANT, rounding=ROUND_HALF_UP)


def quantize_storage(value: Number) -> Decimal:
    return to_decimal(value).quantize(STORAGE_QUANT, rounding=ROUND_HALF_UP)


def round_whole(value: Number) -> Decimal:
    return to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def percent_of(base: Number, pct: Number) -> Decimal:
    """base * pct / 100. pct is not clamped to [0, 100]."""
    return to_decimal(base) * to_decimal(pct) / Decimal(100)
