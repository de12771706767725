"""Recurring fixed obligations with a known number of remaining payments."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, List, Tuple

from core.errors import ProjectionInputError
from core.utils import ZERO, Number, to_decimal


@dataclass(frozen=True)
class Installment:
    """One debt payment plan (e.g. a purchase split into 12 card payments)."""

    id: str
    label: str
    monthly_amount: Decimal
    remaining_months: int


def is_active(installment: Installment, month: int) -> bool:
    """Month is 1-indexed from today; month == remaining_months is the last payment."""
    return month <= installment.remaining_months


def active_total(installments: Iterable[Installment], month: int) -> Decimal:
    return sum(
        (i.monthly_amount for i in installments if is_active(i, month)),
        ZERO,
    )


def configured_total(installments: Iterable[Installment]) -> Decimal:
    """Monthly burden of every configured installment, active or not."""
    return sum((i.monthly_amount for i in installments), ZERO)


def core_fixed_expense(baseline_fixed: Decimal, installments: Iterable[Installment]) -> Decimal:
    """
    Fixed spend without installments (rent, utilities, ...).

    The historical fixed average is assumed to already include today's
    installments, so they are taken out once and added back month by month
    only while they are still running. Not clamped: a negative result means
    the installments were never part of the history.
    """
    return baseline_fixed - configured_total(installments)


class InstallmentLedger:
    """
    Session-scoped list of installments edited by the user.

    Ids come from a monotonic counter and are never reused after removal.
    """

    def __init__(self, prefix: str = "inst") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)
        self._entries: List[Installment] = []

    def add(self, label: str, monthly_amount: Number, remaining_months: int) -> Installment:
        amount = to_decimal(monthly_amount)
        errors = []
        if amount <= 0:
            errors.append(f"Installment {label!r}: monthly amount must be positive.")
        if int(remaining_months) < 0:
            errors.append(f"Installment {label!r}: remaining months cannot be negative.")
        if errors:
            raise ProjectionInputError(errors)

        installment = Installment(
            id=f"{self._prefix}-{next(self._counter)}",
            label=label,
            monthly_amount=amount,
            remaining_months=int(remaining_months),
        )
        self._entries.append(installment)
        return installment

    def remove(self, installment_id: str) -> Installment:
        for pos, entry in enumerate(self._entries):
            if entry.id == installment_id:
                return self._entries.pop(pos)
        raise KeyError(installment_id)

    @property
    def entries(self) -> Tuple[Installment, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Installment]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)
