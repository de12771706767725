"""Exceptions raised at the boundary of the projection core."""

from __future__ import annotations

from typing import Iterable, List


class ProjectionError(Exception):
    """Base exception for the projection core."""


class ProjectionInputError(ProjectionError, ValueError):
    """A caller passed inputs that violate the engine contract.

    Carries every problem found so the UI can show them next to the
    offending installment/scenario controls in one go.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid projection input.")


class RecordFormatError(ProjectionError, ValueError):
    """A raw record from the data-access collaborator could not be parsed."""
