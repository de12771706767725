"""
Milestone extraction — sample the series at fixed checkpoints for the summary cards.

Checkpoints are in the series' own unit: months for a monthly series,
years for a year-resolution one. Out-of-range checkpoints are skipped.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from engine.points import ProjectionPoint

DEFAULT_CHECKPOINTS: Dict[str, Tuple[int, ...]] = {
    "month": (12, 24, 48, 60),
    "year": (5, 10, 20, 30),
}


def sample(series: Sequence[ProjectionPoint], checkpoints: Iterable[int]) -> List[ProjectionPoint]:
    by_index = {p.index: p for p in series}
    return [by_index[c] for c in checkpoints if c in by_index]
