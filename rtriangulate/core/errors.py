"""Exceptions raised by rtriangulate."""
from __future__ import annotations

from .constants import MIN_POINTS


class TriangulationError(ValueError):
    """Base class for triangulation failures."""


class NotEnoughPoints(TriangulationError):
    """Raised when fewer than three points are given to the engine."""

    def __init__(self, count: int, minimum: int = MIN_POINTS):
        self.count = int(count)
        self.minimum = int(minimum)
        super().__init__(
            f"Can't triangulate less than {self.minimum} points (got {self.count})")


__all__ = ['TriangulationError', 'NotEnoughPoints']
