"""
Core package — schema definitions, configuration, settings, errors and shared utilities.
No business logic lives here.
"""

from .schema import (
    AccountType,
    CategoryType,
    LIQUID_ACCOUNT_TYPES,
    LIABILITY_ACCOUNT_TYPES,
)
from .config import ProjectionConfig
from .errors import ProjectionError, ProjectionInputError, RecordFormatError
from .models import Account, Category, Transaction
from .settings import Settings, get_settings
from .utils import to_decimal, round_cents, month_key

__all__ = [
    "AccountType",
    "CategoryType",
    "LIQUID_ACCOUNT_TYPES",
    "LIABILITY_ACCOUNT_TYPES",
    "ProjectionConfig",
    "Account",
    "Category",
    "Transaction",
    "ProjectionError",
    "ProjectionInputError",
    "RecordFormatError",
    "Settings",
    "get_settings",
    "to_decimal",
    "round_cents",
    "month_key",
]
