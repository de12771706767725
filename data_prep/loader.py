"""
Turn rows from the hosted backend into domain snapshots.

The collaborator returns plain dicts (e.g. `destination_account_id`,
Spanish category labels like "Gastos Fijos", account types like
"CreditLine"). Records are validated with pydantic, aliases normalized,
then converted to the frozen dataclasses in core.models.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from core.errors import RecordFormatError
from core.models import Account, Category, Transaction
from core.schema import AccountType, CategoryType


_ACCOUNT_TYPE_ALIASES: Dict[str, AccountType] = {
    "checking": AccountType.CHECKING,
    "debit": AccountType.CHECKING,
    "vista": AccountType.VISTA,
    "savings": AccountType.SAVINGS,
    "cash": AccountType.CASH,
    "investment": AccountType.INVESTMENT,
    "receivable": AccountType.RECEIVABLE,
    "asset": AccountType.ASSET,
    "credit": AccountType.CREDIT_CARD,
    "credit_card": AccountType.CREDIT_CARD,
    "creditcard": AccountType.CREDIT_CARD,
    "creditline": AccountType.CREDIT_LINE,
    "credit_line": AccountType.CREDIT_LINE,
    "payable": AccountType.PAYABLE,
}

_CATEGORY_TYPE_ALIASES: Dict[str, CategoryType] = {
    "income": CategoryType.INCOME,
    "ingresos": CategoryType.INCOME,
    "fixed_expense": CategoryType.FIXED_EXPENSE,
    "gastos fijos": CategoryType.FIXED_EXPENSE,
    "variable_expense": CategoryType.VARIABLE_EXPENSE,
    "gastos variables": CategoryType.VARIABLE_EXPENSE,
    "savings": CategoryType.SAVINGS,
    "ahorro": CategoryType.SAVINGS,
}

_TRANSACTION_COLUMNS = ["id", "date", "amount", "category_id", "destination_account_id"]


def _normalize_key(value: str) -> str:
    return str(value).strip().lower()


class AccountRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    type: AccountType
    balance: Decimal = Decimal("0")

    @field_validator("type", mode="before")
    @classmethod
    def _alias_type(cls, v: Any) -> Any:
        if isinstance(v, AccountType):
            return v
        key = _normalize_key(v)
        if key not in _ACCOUNT_TYPE_ALIASES:
            raise ValueError(f"unknown account type {v!r}")
        return _ACCOUNT_TYPE_ALIASES[key]


class CategoryRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    type: CategoryType

    @field_validator("type", mode="before")
    @classmethod
    def _alias_type(cls, v: Any) -> Any:
        if isinstance(v, CategoryType):
            return v
        key = _normalize_key(v)
        if key not in _CATEGORY_TYPE_ALIASES:
            raise ValueError(f"unknown category type {v!r}")
        return _CATEGORY_TYPE_ALIASES[key]


class TransactionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    date: dt.date
    amount: Decimal
    category_id: Optional[str] = None
    destination_account_id: Optional[str] = None

    @field_validator("category_id", "destination_account_id", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return str(v)


def _parse(model: type, records: Iterable[Mapping[str, Any]], what: str) -> List[Any]:
    out = []
    for pos, raw in enumerate(records):
        try:
            out.append(model.model_validate(dict(raw)))
        except ValidationError as exc:
            raise RecordFormatError(f"Malformed {what} record at position {pos}: {exc}") from exc
    return out


def load_accounts(records: Iterable[Mapping[str, Any]]) -> List[Account]:
    return [
        Account(id=r.id, balance=r.balance, type=r.type, name=r.name)
        for r in _parse(AccountRecord, records, "account")
    ]


def load_categories(records: Iterable[Mapping[str, Any]]) -> List[Category]:
    return [
        Category(id=r.id, type=r.type, name=r.name)
        for r in _parse(CategoryRecord, records, "category")
    ]


def load_transactions(records: Iterable[Mapping[str, Any]]) -> List[Transaction]:
    return [
        Transaction(
            id=r.id,
            date=r.date,
            amount=r.amount,
            category_id=r.category_id,
            destination_account_id=r.destination_account_id,
        )
        for r in _parse(TransactionRecord, records, "transaction")
    ]


def transactions_to_frame(
    transactions: Iterable[Union[Transaction, Mapping[str, Any]]],
) -> pd.DataFrame:
    """
    One row per transaction with a datetime `date`, Decimal `amount`
    (object dtype, exact) and an `is_transfer` flag.
    """
    rows = []
    for t in transactions:
        if not isinstance(t, Transaction):
            t = load_transactions([t])[0]
        rows.append(
            {
                "id": t.id,
                "date": t.date,
                "amount": t.amount,
                "category_id": t.category_id,
                "destination_account_id": t.destination_account_id,
            }
        )

    df = pd.DataFrame(rows, columns=_TRANSACTION_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["amount"] = df["amount"].astype(object)
    df["is_transfer"] = pd.Series(
        [isinstance(d, str) and bool(d) for d in df["destination_account_id"]],
        index=df.index,
        dtype=bool,
    )
    return df
