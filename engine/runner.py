"""
Projection runner — folds the baseline month over the horizon, twice.

Two tracks are carried side by side from the same starting balances:
  1. Base:      the historical average month repeated, installments expiring
  2. Simulated: the same month with every active scenario layered on top

Per month:
  fixed     = core fixed + installments still running
  net       = income - (fixed + variable)
  base      += net                      (wealth and liquidity)
  simulated += net adjusted by scenario income/expense deltas,
               plus point events (purchases hit both, liquidations cash only)
  wealth    *= 1 + return/12 when positive, 1 + credit rate when negative

Liquidity never compounds. Everything is Decimal; rounding happens in reports.
Compute on demand: callers re-run when inputs settle and drop stale results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from datetime import date
from typing import Iterable, List, Optional, Sequence

from baseline.historical import BaselineAverages, aggregate
from core.config import ProjectionConfig, Resolution
from core.errors import ProjectionInputError
from core.models import Account, Category, Transaction
from core.schema import MAX_HORIZON_MONTHS
from core.utils import ZERO, Number, month_label, to_decimal
from data_prep.snapshot import BalanceSnapshot, balance_snapshot
from data_prep.validators import ensure_valid, validate_projection_inputs
from ledgers.installments import Installment, active_total, core_fixed_expense
from ledgers.scenario import Scenario, combined_effect

from .points import ProjectionPoint
from .real_value import to_real

logger = logging.getLogger(__name__)

_ONE = Decimal("1")
_TWELVE = Decimal("12")


def _grow(wealth: Decimal, monthly_return: Decimal, monthly_credit: Decimal) -> Decimal:
    """Positive wealth earns the investment return, debt accrues credit interest."""
    if wealth > 0:
        return wealth * (_ONE + monthly_return)
    if wealth < 0:
        return wealth * (_ONE + monthly_credit)
    return wealth


def project(
    initial_wealth: Number,
    initial_liquidity: Number,
    baseline: BaselineAverages,
    installments: Sequence[Installment],
    scenarios: Sequence[Scenario],
    horizon_months: int,
    return_rate: Number,
    inflation_rate: Optional[Number],
    credit_interest_rate: Number,
    *,
    resolution: Resolution = "month",
    as_of: Optional[date] = None,
    max_horizon_months: int = MAX_HORIZON_MONTHS,
) -> List[ProjectionPoint]:
    """
    Simulate months 1..horizon_months and return the recorded points.

    Parameters
    ----------
    initial_wealth, initial_liquidity : number
        Net worth and liquid balances today (see data_prep.snapshot).
    baseline : BaselineAverages
        Average month from history.
    installments, scenarios : sequences
        Snapshots of the ledgers; not mutated.
    horizon_months : int
        1..max_horizon_months.
    return_rate : number
        Annual investment return as a fraction, applied monthly as rate/12.
    inflation_rate : number or None
        Annual inflation; None skips the real-value columns.
    credit_interest_rate : number
        Monthly rate charged while wealth is negative.
    resolution : "month" | "year"
        "year" records only every 12th month and indexes points by year; trailing
        months of a horizon that is not a multiple of 12 are simulated but not
        recorded (the validator warns about it).
    as_of : date, optional
        Only used to give monthly points calendar labels.
    max_horizon_months : int
        Longest accepted horizon; ProjectionConfig carries the deployment value.

    Raises
    ------
    ProjectionInputError
        Before any output is produced, if the horizon or a ledger entry is invalid.
    """
    installments = tuple(installments)
    scenarios = tuple(scenarios)
    if resolution not in ("month", "year"):
        raise ProjectionInputError([f"Unknown resolution {resolution!r}."])
    ensure_valid(
        validate_projection_inputs(
            installments,
            scenarios,
            int(horizon_months),
            max_horizon_months=int(max_horizon_months),
            resolution=resolution,
        )
    )

    monthly_return = to_decimal(return_rate) / _TWELVE
    monthly_credit = to_decimal(credit_interest_rate)
    inflation = to_decimal(inflation_rate) if inflation_rate is not None else None

    income = baseline.average_monthly_income
    variable = baseline.average_monthly_variable_expense
    core_fixed = core_fixed_expense(baseline.average_monthly_fixed_expense, installments)

    base_wealth = to_decimal(initial_wealth)
    base_liquidity = to_decimal(initial_liquidity)
    sim_wealth = base_wealth
    sim_liquidity = base_liquidity

    logger.debug(
        "Projection started",
        extra={
            "horizon_months": int(horizon_months),
            "resolution": resolution,
            "n_installments": len(installments),
            "n_scenarios": len(scenarios),
        },
    )

    points: List[ProjectionPoint] = []
    for m in range(1, int(horizon_months) + 1):
        running_installments = active_total(installments, m)
        expenses = core_fixed + running_installments + variable
        net = income - expenses

        # Base track
        base_wealth += net
        base_liquidity += net

        # Simulated track
        effect = combined_effect(scenarios, m)
        sim_income = income + effect.income_delta
        sim_expenses = expenses + effect.expense_delta
        sim_net = sim_income - sim_expenses
        sim_wealth += sim_net + effect.wealth_delta
        sim_liquidity += sim_net + effect.liquidity_delta

        # Growth / interest, each track by its own sign
        base_wealth = _grow(base_wealth, monthly_return, monthly_credit)
        sim_wealth = _grow(sim_wealth, monthly_return, monthly_credit)

        if resolution == "year":
            if m % 12 != 0:
                continue
            index, label = m // 12, f"Year {m // 12}"
        else:
            index = m
            label = month_label(as_of, m) if as_of is not None else f"Month {m}"

        points.append(
            ProjectionPoint(
                index=index,
                label=label,
                month=m,
                base_wealth=base_wealth,
                base_liquidity=base_liquidity,
                simulated_wealth=sim_wealth,
                simulated_liquidity=sim_liquidity,
                income=income,
                expenses=expenses,
                installment_payments=running_installments,
                simulated_income=sim_income,
                simulated_expenses=sim_expenses,
                real_wealth=to_real(base_wealth, inflation, m) if inflation is not None else None,
                real_simulated_wealth=(
                    to_real(sim_wealth, inflation, m) if inflation is not None else None
                ),
            )
        )

    logger.debug(
        "Projection completed",
        extra={
            "n_points": len(points),
            "final_base_wealth": str(base_wealth),
            "final_simulated_wealth": str(sim_wealth),
        },
    )
    return points


@dataclass(frozen=True)
class ProjectionRun:
    """Everything one end-to-end run produced, for reports and charts."""
    config: ProjectionConfig
    baseline: BaselineAverages
    snapshot: BalanceSnapshot
    series: List[ProjectionPoint] = field(default_factory=list)


def run_projection(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    *,
    installments: Sequence[Installment] = (),
    scenarios: Sequence[Scenario] = (),
    config: Optional[ProjectionConfig] = None,
    baseline: Optional[BaselineAverages] = None,
) -> ProjectionRun:
    """
    Aggregate history, snapshot balances and project in one call.

    Pass `baseline` to reuse a previously aggregated (or user-edited)
    baseline instead of recomputing it from transactions.
    """
    cfg = config or ProjectionConfig.from_settings()

    if baseline is None:
        baseline = aggregate(transactions, categories, cfg.window_months, as_of=cfg.as_of)
    snapshot = balance_snapshot(accounts)

    series = project(
        snapshot.initial_wealth,
        snapshot.initial_liquidity,
        baseline,
        installments,
        scenarios,
        cfg.horizon_months,
        cfg.return_rate,
        cfg.inflation_rate,
        cfg.credit_interest_rate,
        resolution=cfg.resolution,
        as_of=cfg.as_of,
        max_horizon_months=cfg.max_horizon_months,
    )
    logger.info(
        "Projection run finished",
        extra={
            "horizon_months": cfg.horizon_months,
            "resolution": cfg.resolution,
            "months_observed": baseline.months_observed,
            "n_points": len(series),
        },
    )
    return ProjectionRun(config=cfg, baseline=baseline, snapshot=snapshot, series=series)
