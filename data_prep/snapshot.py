"""
Current balance position built from the account snapshot.

Net worth and liquidity are classified by account type, never by sign:
a credit line stored with a positive balance is still debt.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from core.models import Account
from core.schema import AccountType
from core.utils import ZERO


@dataclass(frozen=True)
class BalanceSnapshot:
    """Starting point of a projection plus the net-worth breakdown."""

    liquid: Decimal = ZERO
    receivable: Decimal = ZERO
    illiquid_assets: Decimal = ZERO  # investments and other non-cash assets
    debt: Decimal = ZERO  # <= 0

    @property
    def net_worth(self) -> Decimal:
        return self.liquid + self.receivable + self.illiquid_assets + self.debt

    @property
    def initial_wealth(self) -> Decimal:
        return self.net_worth

    @property
    def initial_liquidity(self) -> Decimal:
        return self.liquid


def balance_snapshot(accounts: Iterable[Account]) -> BalanceSnapshot:
    liquid = receivable = illiquid = debt = ZERO
    for acc in accounts:
        value = acc.signed_balance
        if acc.is_liability:
            debt += value
        elif acc.is_liquid:
            liquid += value
        elif acc.type == AccountType.RECEIVABLE:
            receivable += value
        else:
            illiquid += value
    return BalanceSnapshot(
        liquid=liquid,
        receivable=receivable,
        illiquid_assets=illiquid,
        debt=debt,
    )
