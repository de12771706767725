"""
Tabular views of a projection series — what the charts and exports consume.

Values are rounded to cents here and only here; the engine keeps full
Decimal precision.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from core.utils import round_cents
from engine.points import ProjectionPoint

from .milestones import DEFAULT_CHECKPOINTS, sample

_MONEY_COLUMNS: List[str] = [
    "base_wealth",
    "base_liquidity",
    "simulated_wealth",
    "simulated_liquidity",
    "real_wealth",
    "real_simulated_wealth",
    "income",
    "expenses",
    "installment_payments",
    "simulated_income",
    "simulated_expenses",
]


def series_to_frame(series: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """
    One row per point with cent-rounded Decimal money columns.

    Columns: index, label, month, the money columns above, scenario_impact.
    """
    rows = []
    for p in series:
        row = {"index": p.index, "label": p.label, "month": p.month}
        for col in _MONEY_COLUMNS:
            value = getattr(p, col)
            row[col] = round_cents(value) if value is not None else None
        row["scenario_impact"] = round_cents(p.scenario_impact)
        rows.append(row)
    return pd.DataFrame(rows, columns=["index", "label", "month", *_MONEY_COLUMNS, "scenario_impact"])


def milestone_table(
    series: Sequence[ProjectionPoint],
    checkpoints: Optional[Iterable[int]] = None,
    *,
    resolution: str = "month",
) -> pd.DataFrame:
    """Summary-card rows: nominal vs inflation-adjusted wealth at each checkpoint."""
    if checkpoints is None:
        checkpoints = DEFAULT_CHECKPOINTS[resolution]
    picked = sample(series, checkpoints)
    frame = series_to_frame(picked)
    return frame.loc[
        :,
        ["index", "label", "base_wealth", "real_wealth", "simulated_wealth", "real_simulated_wealth"],
    ].reset_index(drop=True)
