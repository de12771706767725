"""
Ledgers — installments and scenarios the user layers on top of the baseline.
"""

from .base import ScenarioEffect, ScenarioEvent, ScenarioKind
from .installments import Installment, InstallmentLedger
from .scenario import (
    ExtraSavings,
    IncomeChange,
    Liquidation,
    OneTimePurchase,
    Scenario,
    ScenarioLedger,
)

__all__ = [
    "ScenarioEffect",
    "ScenarioEvent",
    "ScenarioKind",
    "Installment",
    "InstallmentLedger",
    "ExtraSavings",
    "IncomeChange",
    "Liquidation",
    "OneTimePurchase",
    "Scenario",
    "ScenarioLedger",
]
