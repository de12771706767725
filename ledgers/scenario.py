"""
Scenario kinds — user-authored "what if" events for the simulated track.

Each kind is its own frozen dataclass carrying only the fields it needs, so
the engine never has to sniff labels or optional attributes:

  OneTimePurchase: wealth and cash drop once, at start_month
  IncomeChange:    income moves by `amount` every active month
  ExtraSavings:    expenses shrink by `amount` every active month
  Liquidation:     a receivable is collected (or a payable settled) at
                   start_month; cash moves, net worth does not

Point events (purchase, liquidation) have an effective duration of one month.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Iterable, Iterator, List, Optional, Tuple, Union

from core.errors import ProjectionInputError
from core.models import Account
from core.schema import SETTLEABLE_ACCOUNT_TYPES
from core.utils import Number, to_decimal

from .base import NO_EFFECT, ScenarioEffect, ScenarioEvent, ScenarioKind


@dataclass(frozen=True)
class OneTimePurchase(ScenarioEvent):
    kind: ClassVar[ScenarioKind] = ScenarioKind.ONE_TIME_PURCHASE

    id: str
    label: str
    amount: Decimal
    start_month: int = 1

    @property
    def effective_duration(self) -> int:
        return 1

    def effect(self, month: int) -> ScenarioEffect:
        if month != self.start_month:
            return NO_EFFECT
        return ScenarioEffect(wealth_delta=-self.amount, liquidity_delta=-self.amount)


@dataclass(frozen=True)
class IncomeChange(ScenarioEvent):
    """Raise (positive amount) or cut (negative amount) of monthly income."""

    kind: ClassVar[ScenarioKind] = ScenarioKind.INCOME_CHANGE

    id: str
    label: str
    amount: Decimal
    start_month: int = 1
    duration: int = 0

    @property
    def effective_duration(self) -> int:
        return self.duration

    def effect(self, month: int) -> ScenarioEffect:
        if not self.is_active(month):
            return NO_EFFECT
        return ScenarioEffect(income_delta=self.amount)


@dataclass(frozen=True)
class ExtraSavings(ScenarioEvent):
    kind: ClassVar[ScenarioKind] = ScenarioKind.EXTRA_SAVINGS

    id: str
    label: str
    amount: Decimal
    start_month: int = 1
    duration: int = 0

    @property
    def effective_duration(self) -> int:
        return self.duration

    def effect(self, month: int) -> ScenarioEffect:
        if not self.is_active(month):
            return NO_EFFECT
        return ScenarioEffect(expense_delta=-self.amount)


@dataclass(frozen=True)
class Liquidation(ScenarioEvent):
    """Receivable turned into cash (amount > 0) or payable paid off (amount < 0)."""

    kind: ClassVar[ScenarioKind] = ScenarioKind.LIQUIDATION

    id: str
    label: str
    amount: Decimal
    start_month: int = 1
    account_id: Optional[str] = None

    @property
    def effective_duration(self) -> int:
        return 1

    def effect(self, month: int) -> ScenarioEffect:
        if month != self.start_month:
            return NO_EFFECT
        return ScenarioEffect(liquidity_delta=self.amount)


Scenario = Union[OneTimePurchase, IncomeChange, ExtraSavings, Liquidation]


def is_active(scenario: Scenario, month: int) -> bool:
    return scenario.is_active(month)


def apply(scenario: Scenario, month: int, state: object = None) -> ScenarioEffect:
    """
    Effect of one scenario in `month`.

    `state` is accepted for callers that thread the running totals through;
    none of the current kinds depend on it.
    """
    return scenario.effect(month)


def combined_effect(scenarios: Iterable[Scenario], month: int) -> ScenarioEffect:
    total = NO_EFFECT
    for s in scenarios:
        total = total + s.effect(month)
    return total


def liquidation_for(account: Account, start_month: int, *, scenario_id: str) -> Liquidation:
    """Build the "settle this account" scenario for a receivable or payable."""
    if account.type not in SETTLEABLE_ACCOUNT_TYPES:
        raise ProjectionInputError(
            [f"Account {account.id!r} of type {account.type.value!r} cannot be liquidated."]
        )
    return Liquidation(
        id=scenario_id,
        label=f"Liquidate {account.name or account.id}",
        amount=account.signed_balance,
        start_month=int(start_month),
        account_id=account.id,
    )


class ScenarioLedger:
    """
    Session-scoped list of scenarios edited by the user.

    Ids come from a monotonic counter and are never reused after removal.
    Entries are validated on the way in so bad input is reported next to the
    control that produced it.
    """

    def __init__(self, prefix: str = "scn") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)
        self._entries: List[Scenario] = []

    def _next_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"

    @staticmethod
    def _check(label: str, start_month: int, duration: int = 0) -> None:
        errors = []
        if int(start_month) < 1:
            errors.append(f"Scenario {label!r}: start month must be 1 or later.")
        if int(duration) < 0:
            errors.append(f"Scenario {label!r}: duration cannot be negative.")
        if errors:
            raise ProjectionInputError(errors)

    def _append(self, scenario: Scenario) -> Scenario:
        self._entries.append(scenario)
        return scenario

    def add_purchase(self, label: str, amount: Number, start_month: int = 1) -> OneTimePurchase:
        self._check(label, start_month)
        return self._append(
            OneTimePurchase(self._next_id(), label, to_decimal(amount), int(start_month))
        )

    def add_income_change(
        self, label: str, amount: Number, start_month: int = 1, duration: int = 0
    ) -> IncomeChange:
        self._check(label, start_month, duration)
        return self._append(
            IncomeChange(self._next_id(), label, to_decimal(amount), int(start_month), int(duration))
        )

    def add_extra_savings(
        self, label: str, amount: Number, start_month: int = 1, duration: int = 0
    ) -> ExtraSavings:
        self._check(label, start_month, duration)
        return self._append(
            ExtraSavings(self._next_id(), label, to_decimal(amount), int(start_month), int(duration))
        )

    def add_liquidation(self, account: Account, start_month: int = 1) -> Liquidation:
        self._check(account.name or account.id, start_month)
        return self._append(liquidation_for(account, start_month, scenario_id=self._next_id()))

    def remove(self, scenario_id: str) -> Scenario:
        for pos, entry in enumerate(self._entries):
            if entry.id == scenario_id:
                return self._entries.pop(pos)
        raise KeyError(scenario_id)

    @property
    def entries(self) -> Tuple[Scenario, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)
