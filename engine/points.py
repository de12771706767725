"""
One row of a projection — what the charts and milestone cards consume.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class ProjectionPoint:
    """State of both tracks after month `month` has been simulated."""
    index: int  # month number, or year number in year resolution
    label: str
    month: int  # always the absolute month since today

    base_wealth: Decimal
    base_liquidity: Decimal
    simulated_wealth: Decimal
    simulated_liquidity: Decimal

    # flow of the month that produced this point
    income: Decimal
    expenses: Decimal
    installment_payments: Decimal
    simulated_income: Decimal
    simulated_expenses: Decimal

    # None when no inflation rate was supplied
    real_wealth: Optional[Decimal] = None
    real_simulated_wealth: Optional[Decimal] = None

    @property
    def scenario_impact(self) -> Decimal:
        return self.simulated_wealth - self.base_wealth
