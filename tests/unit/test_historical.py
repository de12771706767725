"""Unit tests for the historical aggregator"""

from datetime import date
from decimal import Decimal

import pytest

from baseline.historical import BaselineAverages, aggregate
from core.errors import ProjectionInputError
from core.models import Transaction


def test_aggregate_averages_by_category_type(sample_transactions, categories, as_of):
    """Income, fixed, variable and savings are averaged over active months"""
    result = aggregate(sample_transactions, categories, 6, as_of=as_of)

    assert result.months_observed == 3
    assert result.average_monthly_income == Decimal("1000000")
    assert result.average_monthly_fixed_expense == Decimal("400000")
    # 3 x 200,000 groceries + 30,000 uncategorised, over 3 months
    assert result.average_monthly_variable_expense == Decimal("210000")
    assert result.average_monthly_savings == Decimal("50000")


def test_aggregate_skips_transfers(categories, as_of):
    """Transfers move money between own accounts and never count as income"""
    txs = [
        Transaction("t1", date(2026, 6, 1), Decimal("500000"), None, destination_account_id="acc-2"),
        Transaction("t2", date(2026, 6, 2), Decimal("-100000"), "c-food"),
    ]
    result = aggregate(txs, categories, 6, as_of=as_of)

    assert result.average_monthly_income == Decimal("0")
    assert result.average_monthly_variable_expense == Decimal("100000")


def test_aggregate_zero_transactions_returns_zeros(categories, as_of):
    """No history yields an all-zero baseline without division errors"""
    result = aggregate([], categories, 6, as_of=as_of)

    assert result == BaselineAverages()
    assert result.average_monthly_income == Decimal("0")
    assert result.average_monthly_net == Decimal("0")


def test_aggregate_only_transfers_uses_month_floor(categories, as_of):
    """A window with only transfers still divides by at least one month"""
    txs = [Transaction("t1", date(2026, 6, 1), Decimal("1000"), None, destination_account_id="x")]
    result = aggregate(txs, categories, 3, as_of=as_of)

    assert result.months_observed == 1
    assert result.average_monthly_income == Decimal("0")


def test_aggregate_window_is_calendar_months(categories, as_of):
    """Only transactions after as_of minus the window are included"""
    txs = [
        Transaction("old", date(2026, 5, 15), Decimal("-999"), "c-food"),  # boundary, excluded
        Transaction("in", date(2026, 5, 16), Decimal("-100"), "c-food"),
        Transaction("future", date(2026, 6, 16), Decimal("-777"), "c-food"),
    ]
    result = aggregate(txs, categories, 1, as_of=as_of)

    assert result.months_observed == 1
    assert result.average_monthly_variable_expense == Decimal("100")


def test_aggregate_counts_distinct_calendar_months(categories, as_of):
    """Two transactions in one month and one in another make two months"""
    txs = [
        Transaction("t1", date(2026, 3, 1), Decimal("-100"), "c-food"),
        Transaction("t2", date(2026, 3, 31), Decimal("-100"), "c-food"),
        Transaction("t3", date(2026, 6, 2), Decimal("-100"), "c-food"),
    ]
    result = aggregate(txs, categories, 6, as_of=as_of)

    assert result.months_observed == 2
    assert result.average_monthly_variable_expense == Decimal("150")


def test_aggregate_unknown_category_is_variable(categories, as_of):
    """An outflow pointing at a deleted category is treated as variable spend"""
    txs = [Transaction("t1", date(2026, 6, 3), Decimal("-4000"), "c-deleted")]
    result = aggregate(txs, categories, 6, as_of=as_of)

    assert result.average_monthly_variable_expense == Decimal("4000")
    assert result.average_monthly_fixed_expense == Decimal("0")


def test_aggregate_rejects_empty_window(sample_transactions, categories, as_of):
    """window_months must be at least one"""
    with pytest.raises(ProjectionInputError):
        aggregate(sample_transactions, categories, 0, as_of=as_of)


def test_baseline_derived_totals(baseline):
    """Expenses and net come from the three averages"""
    assert baseline.average_monthly_expenses == Decimal("600000")
    assert baseline.average_monthly_net == Decimal("400000")
