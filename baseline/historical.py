"""
Compute baseline monthly averages from actual transaction history.

Input:  Transactions + categories from the data-access collaborator
Output: BaselineAverages — the steady-state month the engine repeats

We:
  1. Keep transactions dated inside the trailing window (calendar months)
  2. Drop transfers (destination account set): they move money, not net worth
  3. Bucket by YYYY-MM and count the months that saw any activity (floor 1)
  4. Split inflows as income; outflows by category type into fixed,
     variable and savings (unknown category → variable)
  5. Divide each total by the month count
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Optional

import pandas as pd

from core.errors import ProjectionInputError
from core.models import Category, Transaction
from core.schema import CategoryType
from core.utils import ZERO, month_key, window_start
from data_prep.loader import transactions_to_frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaselineAverages:
    """Average month derived from history. Held fixed for a whole projection run."""

    average_monthly_income: Decimal = ZERO
    average_monthly_fixed_expense: Decimal = ZERO
    average_monthly_variable_expense: Decimal = ZERO
    # savings capacity: outflows into savings categories, not an expense
    average_monthly_savings: Decimal = ZERO
    months_observed: int = 0

    @property
    def average_monthly_expenses(self) -> Decimal:
        return self.average_monthly_fixed_expense + self.average_monthly_variable_expense

    @property
    def average_monthly_net(self) -> Decimal:
        return self.average_monthly_income - self.average_monthly_expenses

    def __repr__(self) -> str:
        return (
            f"BaselineAverages(income={self.average_monthly_income:.2f}, "
            f"fixed={self.average_monthly_fixed_expense:.2f}, "
            f"variable={self.average_monthly_variable_expense:.2f}, "
            f"savings={self.average_monthly_savings:.2f}, "
            f"months={self.months_observed})"
        )


def _bucket(row_amount: Decimal, category_type: Optional[CategoryType]) -> str:
    if row_amount > 0:
        return "income"
    if category_type == CategoryType.FIXED_EXPENSE:
        return "fixed"
    if category_type == CategoryType.SAVINGS:
        return "savings"
    return "variable"


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def aggregate(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    window_months: int,
    *,
    as_of: Optional[date] = None,
) -> BaselineAverages:
    """
    Main entry point: reduce a trailing window of transactions to monthly averages.

    Parameters
    ----------
    transactions : iterable of Transaction
        Read-only snapshot; may be empty (all-zero result).
    categories : iterable of Category
        Used to tell fixed from variable/savings outflows.
    window_months : int
        Trailing calendar months to consider, >= 1.
    as_of : date, optional
        "Now". Defaults to today; pass it explicitly for reproducible runs.
    """
    if int(window_months) < 1:
        raise ProjectionInputError([f"window_months must be >= 1, got {window_months}."])

    as_of = as_of or date.today()
    start = window_start(as_of, int(window_months))

    df = transactions_to_frame(transactions)
    if df.empty:
        return BaselineAverages()

    in_window = (df["date"] > pd.Timestamp(start)) & (df["date"] <= pd.Timestamp(as_of))
    df = df.loc[in_window].copy()
    if df.empty:
        return BaselineAverages()

    months_observed = max(len({month_key(d) for d in df["date"].dt.date}), 1)

    flows = df.loc[~df["is_transfer"] & (df["amount"] != ZERO)].copy()
    category_types: Dict[str, CategoryType] = {c.id: c.type for c in categories}
    flows["bucket"] = [
        _bucket(amount, category_types.get(cat_id) if cat_id else None)
        for amount, cat_id in zip(flows["amount"], flows["category_id"])
    ]
    flows["magnitude"] = [abs(a) for a in flows["amount"]]

    totals = {
        name: _sum(flows.loc[flows["bucket"] == name, "magnitude"])
        for name in ("income", "fixed", "variable", "savings")
    }
    n = Decimal(months_observed)

    result = BaselineAverages(
        average_monthly_income=totals["income"] / n,
        average_monthly_fixed_expense=totals["fixed"] / n,
        average_monthly_variable_expense=totals["variable"] / n,
        average_monthly_savings=totals["savings"] / n,
        months_observed=months_observed,
    )
    logger.debug(
        "Baseline aggregated",
        extra={
            "window_months": int(window_months),
            "months_observed": months_observed,
            "n_transactions": int(len(df)),
            "n_transfers_skipped": int(df["is_transfer"].sum()),
        },
    )
    return result
