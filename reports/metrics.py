"""
Projection summary — the numbers the forecast header shows, plus warning flags.

Answers the questions the projections view is opened for:
  "Where do I end up?"            → final wealth per track, nominal and real
  "What does my plan cost me?"    → scenario impact at the end of the horizon
  "Do I run out of cash?"         → lowest simulated liquidity and when it turns negative
  "How long can I last today?"    → runway: liquid funds / monthly expenses
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from baseline.historical import BaselineAverages
from core.utils import round_cents
from data_prep.snapshot import BalanceSnapshot
from engine.points import ProjectionPoint


@dataclass
class ProjectionSummary:
    """Structured summary of one projection series."""
    n_points: int
    final_index: int

    final_base_wealth: Decimal
    final_simulated_wealth: Decimal
    final_real_wealth: Optional[Decimal]
    scenario_impact: Decimal

    lowest_simulated_liquidity: Decimal
    first_negative_liquidity_index: Optional[int]  # None: cash never runs out

    runway_months: Optional[Decimal]  # None: no snapshot, or no burn

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Final Base Wealth", "Value": f"{self.final_base_wealth:,.2f}"},
            {"Metric": "Final Simulated Wealth", "Value": f"{self.final_simulated_wealth:,.2f}"},
            {"Metric": "Scenario Impact", "Value": f"{self.scenario_impact:,.2f}"},
            {"Metric": "Lowest Simulated Liquidity", "Value": f"{self.lowest_simulated_liquidity:,.2f}"},
        ]
        if self.final_real_wealth is not None:
            rows.insert(1, {"Metric": "Final Real Wealth", "Value": f"{self.final_real_wealth:,.2f}"})
        if self.first_negative_liquidity_index is not None:
            rows.append({"Metric": "Cash Runs Out At", "Value": str(self.first_negative_liquidity_index)})
        if self.runway_months is not None:
            rows.append({"Metric": "Runway (months)", "Value": f"{self.runway_months:.1f}"})
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def runway_months(snapshot: BalanceSnapshot, baseline: BaselineAverages) -> Optional[Decimal]:
    """Months the liquid balance covers at the current average spend."""
    burn = baseline.average_monthly_expenses
    if burn <= 0:
        return None
    return max(snapshot.liquid, Decimal("0")) / burn


def summarize_projection(
    series: Sequence[ProjectionPoint],
    *,
    snapshot: Optional[BalanceSnapshot] = None,
    baseline: Optional[BaselineAverages] = None,
) -> ProjectionSummary:
    """
    Build a ProjectionSummary from a projection series.

    Parameters
    ----------
    series : sequence of ProjectionPoint
        Output of engine.project(); must not be empty.
    snapshot, baseline : optional
        When both are given, the current runway is included.
    """
    if not series:
        raise ValueError("No projection points to summarize.")

    last = series[-1]
    liquidity = np.array([float(p.simulated_liquidity) for p in series], dtype=float)
    negative = np.flatnonzero(liquidity < 0)
    lowest = min(p.simulated_liquidity for p in series)

    runway = None
    if snapshot is not None and baseline is not None:
        runway = runway_months(snapshot, baseline)

    flags = []
    if negative.size > 0:
        flags.append(f"CASH_SHORTFALL: simulated liquidity negative from {series[int(negative[0])].label}")
    if last.simulated_wealth < 0:
        flags.append("NEGATIVE_NET_WORTH: simulated wealth ends in debt")
    if last.simulated_wealth < last.base_wealth:
        flags.append("SCENARIOS_REDUCE_WEALTH: plan ends below the base track")
    if runway is not None and runway < 3:
        flags.append("LOW_RUNWAY: liquid funds cover less than 3 months")

    return ProjectionSummary(
        n_points=len(series),
        final_index=last.index,
        final_base_wealth=round_cents(last.base_wealth),
        final_simulated_wealth=round_cents(last.simulated_wealth),
        final_real_wealth=round_cents(last.real_wealth) if last.real_wealth is not None else None,
        scenario_impact=round_cents(last.scenario_impact),
        lowest_simulated_liquidity=round_cents(lowest),
        first_negative_liquidity_index=int(series[int(negative[0])].index) if negative.size > 0 else None,
        runway_months=runway,
        flags=flags,
    )
