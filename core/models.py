"""
Read-only snapshots handed over by the data-access collaborator.
The engine never mutates these; balance side effects belong to the app.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from .schema import (
    LIABILITY_ACCOUNT_TYPES,
    LIQUID_ACCOUNT_TYPES,
    AccountType,
    CategoryType,
)


@dataclass(frozen=True)
class Account:
    id: str
    balance: Decimal
    type: AccountType
    name: str = ""

    @property
    def is_liquid(self) -> bool:
        return self.type in LIQUID_ACCOUNT_TYPES

    @property
    def is_liability(self) -> bool:
        return self.type in LIABILITY_ACCOUNT_TYPES

    @property
    def signed_balance(self) -> Decimal:
        """Contribution to net worth; liabilities always count as debt."""
        if self.is_liability:
            return -abs(self.balance)
        return self.balance


@dataclass(frozen=True)
class Transaction:
    id: str
    date: date
    amount: Decimal  # + inflow, - outflow
    category_id: Optional[str] = None
    destination_account_id: Optional[str] = None

    @property
    def is_transfer(self) -> bool:
        return bool(self.destination_account_id)


@dataclass(frozen=True)
class Category:
    id: str
    type: CategoryType
    name: str = ""
