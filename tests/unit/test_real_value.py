"""Unit tests for inflation adjustment"""

from decimal import Decimal

import pytest

from core.errors import ProjectionInputError
from engine.real_value import to_real


def test_month_zero_is_nominal():
    assert to_real(Decimal("1234.56"), 0.05, 0) == Decimal("1234.56")


def test_one_year_divides_by_one_plus_rate():
    assert to_real(1030, "0.03", 12) == Decimal("1000")


def test_discount_grows_with_time():
    """Positive inflation shrinks real value month after month"""
    values = [to_real(Decimal("1000000"), 0.04, m) for m in range(0, 61, 6)]

    assert all(later < earlier for earlier, later in zip(values, values[1:]))


def test_zero_inflation_is_identity():
    assert to_real(Decimal("500"), 0, 48) == Decimal("500")


def test_negative_amounts_scale_toward_zero():
    """Debt also loses real weight"""
    real = to_real(Decimal("-1000"), 0.1, 12)

    assert Decimal("-1000") < real < 0


@pytest.mark.parametrize("rate, month", [(0.03, -1), (-1, 12), (-1.5, 12)])
def test_invalid_arguments(rate, month):
    with pytest.raises(ProjectionInputError):
        to_real(Decimal("100"), rate, month)
