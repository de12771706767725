"""
Input validation for a projection run before it enters the engine.

Catches caller contract violations early:
- Horizon outside 1..max_horizon_months (360 unless the caller says otherwise)
- Negative remaining months / durations, start months before month 1
- Negative installment amounts
and flags suspicious-but-legal entries as warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.errors import ProjectionInputError
from core.schema import MAX_HORIZON_MONTHS
from ledgers.installments import Installment
from ledgers.scenario import Scenario

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a projection request."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_projection_inputs(
    installments: Iterable[Installment],
    scenarios: Iterable[Scenario],
    horizon_months: int,
    *,
    max_horizon_months: Optional[int] = None,
    resolution: str = "month",
) -> ValidationResult:
    """
    Run all checks on the ledgers and horizon.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    max_h = MAX_HORIZON_MONTHS if max_horizon_months is None else max_horizon_months

    # --- Horizon ---
    if horizon_months <= 0:
        result.errors.append(f"Horizon must be at least 1 month, got {horizon_months}.")
    elif horizon_months > max_h:
        result.errors.append(f"Horizon of {horizon_months} months exceeds the {max_h}-month limit.")
    elif resolution == "year" and horizon_months % 12 != 0:
        result.warnings.append(
            f"Horizon of {horizon_months} months is not a whole number of years; "
            f"the last {horizon_months % 12} month(s) are not recorded in year resolution."
        )

    # --- Installments ---
    for inst in installments:
        if inst.remaining_months < 0:
            result.errors.append(
                f"Installment {inst.label!r} has negative remaining months ({inst.remaining_months})."
            )
        elif inst.remaining_months == 0:
            result.warnings.append(f"Installment {inst.label!r} is already paid off.")
        if inst.monthly_amount < 0:
            result.errors.append(f"Installment {inst.label!r} has a negative monthly amount.")
        elif inst.monthly_amount == 0:
            result.warnings.append(f"Installment {inst.label!r} has a zero monthly amount.")

    # --- Scenarios ---
    for scn in scenarios:
        if scn.start_month < 1:
            result.errors.append(
                f"Scenario {scn.label!r} starts at month {scn.start_month}; months start at 1."
            )
        elif horizon_months > 0 and scn.start_month > horizon_months:
            result.warnings.append(
                f"Scenario {scn.label!r} starts after the {horizon_months}-month horizon."
            )
        if scn.effective_duration < 0:
            result.errors.append(f"Scenario {scn.label!r} has a negative duration.")
        if scn.amount == 0:
            result.warnings.append(f"Scenario {scn.label!r} has a zero amount.")

    return result


def ensure_valid(result: ValidationResult) -> ValidationResult:
    """Raise ProjectionInputError if the result carries blocking errors."""
    for w in result.warnings:
        logger.info("Projection input warning", extra={"warning": w})
    if not result.is_valid:
        logger.warning("Projection input rejected", extra={"errors": result.errors})
        raise ProjectionInputError(result.errors)
    return result
