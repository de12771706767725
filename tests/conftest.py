"""Pytest fixtures for testing"""

import logging
from datetime import date
from decimal import Decimal

import pytest

from baseline.historical import BaselineAverages
from core.models import Account, Category, Transaction
from core.schema import AccountType, CategoryType


@pytest.fixture
def as_of() -> date:
    return date(2026, 6, 15)


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="c-salary", type=CategoryType.INCOME, name="Sueldo"),
        Category(id="c-rent", type=CategoryType.FIXED_EXPENSE, name="Arriendo"),
        Category(id="c-food", type=CategoryType.VARIABLE_EXPENSE, name="Supermercado"),
        Category(id="c-save", type=CategoryType.SAVINGS, name="Ahorro"),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Three months (Apr-Jun 2026) of salary, rent, groceries and savings"""
    transactions = []
    for month in (4, 5, 6):
        transactions += [
            Transaction(f"salary-{month}", date(2026, month, 1), Decimal("1000000"), "c-salary"),
            Transaction(f"rent-{month}", date(2026, month, 5), Decimal("-400000"), "c-rent"),
            Transaction(f"food-{month}", date(2026, month, 10), Decimal("-200000"), "c-food"),
            Transaction(f"save-{month}", date(2026, month, 11), Decimal("-50000"), "c-save"),
            # transfer between own accounts: ignored by the baseline
            Transaction(
                f"transfer-{month}",
                date(2026, month, 12),
                Decimal("300000"),
                None,
                destination_account_id="acc-savings",
            ),
        ]
    # uncategorised outflow counts as variable spend
    transactions.append(Transaction("misc", date(2026, 5, 20), Decimal("-30000"), None))
    return transactions


@pytest.fixture
def sample_accounts() -> list[Account]:
    return [
        Account("acc-checking", Decimal("500000"), AccountType.CHECKING, "Cuenta Corriente"),
        Account("acc-savings", Decimal("1000000"), AccountType.SAVINGS, "Ahorro"),
        Account("acc-invest", Decimal("2000000"), AccountType.INVESTMENT, "Fondo"),
        Account("acc-receivable", Decimal("300000"), AccountType.RECEIVABLE, "Préstamo a Juan"),
        # stored positive by the app, still debt
        Account("acc-credit-line", Decimal("200000"), AccountType.CREDIT_LINE, "Línea de Crédito"),
    ]


@pytest.fixture
def baseline() -> BaselineAverages:
    """Income 1,000,000; fixed 400,000; variable 200,000"""
    return BaselineAverages(
        average_monthly_income=Decimal("1000000"),
        average_monthly_fixed_expense=Decimal("400000"),
        average_monthly_variable_expense=Decimal("200000"),
        months_observed=6,
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
