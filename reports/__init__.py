"""
Reports — milestones, tabular views and summary metrics over a projection series.
"""

from .milestones import DEFAULT_CHECKPOINTS, sample
from .aggregator import milestone_table, series_to_frame
from .metrics import ProjectionSummary, runway_months, summarize_projection

__all__ = [
    "DEFAULT_CHECKPOINTS",
    "sample",
    "milestone_table",
    "series_to_frame",
    "ProjectionSummary",
    "runway_months",
    "summarize_projection",
]
