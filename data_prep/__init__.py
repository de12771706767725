"""
Data preparation — loading collaborator records, balance snapshots, input validation.
"""

from .loader import (
    load_accounts,
    load_categories,
    load_transactions,
    transactions_to_frame,
)
from .snapshot import BalanceSnapshot, balance_snapshot
from .validators import ValidationResult, ensure_valid, validate_projection_inputs

__all__ = [
    "load_accounts",
    "load_categories",
    "load_transactions",
    "transactions_to_frame",
    "BalanceSnapshot",
    "balance_snapshot",
    "ValidationResult",
    "ensure_valid",
    "validate_projection_inputs",
]
