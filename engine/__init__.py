"""
Projection engine — deterministic month-by-month wealth/liquidity simulation.
"""

from .points import ProjectionPoint
from .real_value import to_real
from .runner import ProjectionRun, project, run_projection

__all__ = ["ProjectionPoint", "ProjectionRun", "project", "run_projection", "to_real"]
