from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from dateutil.relativedelta import relativedelta

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """Coerce to Decimal going through str so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    """Half away from zero, like the formatters in the surrounding app."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def window_start(as_of: date, window_months: int) -> date:
    """First excluded day of a trailing window of calendar months ending at as_of."""
    return as_of - relativedelta(months=window_months)


def month_label(as_of: date, month_index: int) -> str:
    """Calendar label ('Nov 2026') for projection month ``month_index`` after as_of."""
    target = date(as_of.year, as_of.month, 1) + relativedelta(months=month_index)
    return target.strftime("%b %Y")
