"""Inflation-discounted ("real") purchasing power of a nominal amount."""

from __future__ import annotations

from decimal import Decimal

from core.errors import ProjectionInputError
from core.utils import Number, to_decimal

_ONE = Decimal("1")
_TWELVE = Decimal("12")


def to_real(nominal: Number, inflation_rate_annual: Number, month_index: int) -> Decimal:
    """real = nominal / (1 + inflation)^(month_index / 12); month 0 is today, no discount."""
    if month_index < 0:
        raise ProjectionInputError([f"month_index must be >= 0, got {month_index}."])
    rate = to_decimal(inflation_rate_annual)
    if rate <= -_ONE:
        raise ProjectionInputError([f"Inflation rate must be greater than -100%, got {rate}."])

    value = to_decimal(nominal)
    if month_index == 0:
        return value
    return value / (_ONE + rate) ** (Decimal(month_index) / _TWELVE)
