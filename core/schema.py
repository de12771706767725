from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class AccountType(str, Enum):
    CHECKING = "checking"
    VISTA = "vista"
    SAVINGS = "savings"
    CASH = "cash"
    INVESTMENT = "investment"
    RECEIVABLE = "receivable"
    ASSET = "asset"
    CREDIT_CARD = "credit_card"
    CREDIT_LINE = "credit_line"
    PAYABLE = "payable"


class CategoryType(str, Enum):
    INCOME = "income"
    FIXED_EXPENSE = "fixed_expense"
    VARIABLE_EXPENSE = "variable_expense"
    SAVINGS = "savings"


# Immediately spendable balances ("liquidity").
LIQUID_ACCOUNT_TYPES: FrozenSet[AccountType] = frozenset(
    {
        AccountType.CHECKING,
        AccountType.VISTA,
        AccountType.SAVINGS,
        AccountType.CASH,
    }
)

# Balances that represent debt, whatever sign the collaborator stored.
LIABILITY_ACCOUNT_TYPES: FrozenSet[AccountType] = frozenset(
    {
        AccountType.CREDIT_CARD,
        AccountType.CREDIT_LINE,
        AccountType.PAYABLE,
    }
)

# Accounts a Liquidation scenario can be built from.
SETTLEABLE_ACCOUNT_TYPES: FrozenSet[AccountType] = frozenset(
    {AccountType.RECEIVABLE, AccountType.PAYABLE}
)

# Longest projection the engine accepts (30 years).
MAX_HORIZON_MONTHS = 360
