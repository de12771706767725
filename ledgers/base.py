"""
Base classes for scenario events.
Just the interface and the effect record; the concrete kinds live in scenario.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from core.utils import ZERO


class ScenarioKind(str, Enum):
    ONE_TIME_PURCHASE = "one_time_purchase"
    INCOME_CHANGE = "income_change"
    EXTRA_SAVINGS = "extra_savings"
    LIQUIDATION = "liquidation"


@dataclass(frozen=True)
class ScenarioEffect:
    """
    What a scenario does to the simulated track in one month.

    income_delta / expense_delta feed the monthly flow; wealth_delta /
    liquidity_delta are point events added on top of it.
    """

    wealth_delta: Decimal = ZERO
    liquidity_delta: Decimal = ZERO
    income_delta: Decimal = ZERO
    expense_delta: Decimal = ZERO

    def __add__(self, other: "ScenarioEffect") -> "ScenarioEffect":
        return ScenarioEffect(
            wealth_delta=self.wealth_delta + other.wealth_delta,
            liquidity_delta=self.liquidity_delta + other.liquidity_delta,
            income_delta=self.income_delta + other.income_delta,
            expense_delta=self.expense_delta + other.expense_delta,
        )


NO_EFFECT = ScenarioEffect()


class ScenarioEvent:
    """Interface for a hypothetical event layered on top of the baseline."""

    kind: ClassVar[ScenarioKind]

    id: str
    label: str
    amount: Decimal
    start_month: int

    @property
    def effective_duration(self) -> int:
        """Months the event stays active; 0 means permanent."""
        raise NotImplementedError

    def is_active(self, month: int) -> bool:
        if month < self.start_month:
            return False
        duration = self.effective_duration
        return duration == 0 or month < self.start_month + duration

    def effect(self, month: int) -> ScenarioEffect:
        raise NotImplementedError
