"""
Baseline package — derive the steady-state month from real transaction history.
"""

from .historical import BaselineAverages, aggregate

__all__ = [
    "BaselineAverages",
    "aggregate",
]
