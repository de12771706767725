"""
Projection configuration.
Market assumptions and horizon for one simulation run; defaults come from
core.settings so deployments can tune them through the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

from .schema import MAX_HORIZON_MONTHS
from .settings import Settings, get_settings

Resolution = Literal["month", "year"]


@dataclass(frozen=True)
class ProjectionConfig:
    as_of: date = field(default_factory=date.today)
    horizon_months: int = 60
    window_months: int = 6
    max_horizon_months: int = MAX_HORIZON_MONTHS

    # annual fractions (0.07 == 7%)
    return_rate: float = 0.07
    inflation_rate: Optional[float] = 0.03
    # monthly fraction charged on negative wealth
    credit_interest_rate: float = 0.025

    # "year" keeps only the 12th, 24th, ... month (long-horizon charts)
    resolution: Resolution = "month"

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        **overrides,
    ) -> "ProjectionConfig":
        s = settings or get_settings()
        values = dict(
            horizon_months=s.horizon_months,
            window_months=s.window_months,
            max_horizon_months=s.max_horizon_months,
            return_rate=s.return_rate,
            inflation_rate=s.inflation_rate,
            credit_interest_rate=s.credit_interest_rate,
        )
        values.update(overrides)
        return cls(**values)

    @classmethod
    def long_horizon(cls, **overrides) -> "ProjectionConfig":
        """30-year, year-resolution preset used by the long-term view."""
        values = dict(horizon_months=360, resolution="year")
        values.update(overrides)
        return cls.from_settings(**values)
