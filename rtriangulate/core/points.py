"""Point capability, the concrete Point type and input ordering helpers.

The engine is written against :class:`PointLike`: anything exposing ``x`` and
``y`` works, so callers never have to copy their own coordinate objects into
:class:`Point`. The ordering helpers exist only so callers can satisfy the
engine's precondition (ascending x, ties broken by ascending y).
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List, NamedTuple, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

__all__ = [
    'PointLike',
    'Point',
    'sort_points',
    'sorted_points',
    'sort_coordinates',
    'as_points',
    'first_unsorted_index',
]


@runtime_checkable
class PointLike(Protocol):
    """Anything with ``x`` and ``y`` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


class Point(NamedTuple):
    """An immutable 2D point."""
    x: float
    y: float


def sort_points(a: PointLike, b: PointLike) -> int:
    """Comparator ordering points by ascending x, then ascending y.

    Returns -1, 0 or 1. When a comparison is undefined (NaN coordinate) the
    pair is reported as greater, never equal.
    """
    if a.x < b.x:
        return -1
    if a.x > b.x:
        return 1
    if a.x == b.x:
        if a.y < b.y:
            return -1
        if a.y > b.y:
            return 1
        if a.y == b.y:
            return 0
    return 1


def sorted_points(points: Iterable[PointLike]) -> List[PointLike]:
    """Return a new list of ``points`` in the order the engine expects."""
    return sorted(points, key=cmp_to_key(sort_points))


def sort_coordinates(coords) -> Tuple[np.ndarray, np.ndarray]:
    """Sort an (N, 2) coordinate array by x then y.

    Returns ``(sorted_coords, order)`` where ``sorted_coords = coords[order]``;
    ``order[i]`` is the caller's row for sorted row ``i``. NaN sorts last.
    """
    arr = np.asarray(coords)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords must be (N, 2), got shape {arr.shape}")
    order = np.lexsort((arr[:, 1], arr[:, 0]))
    return arr[order], order


def as_points(coords) -> List[Point]:
    """Convert an (N, 2) array-like into a list of :class:`Point`."""
    arr = np.asarray(coords, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords must be (N, 2), got shape {arr.shape}")
    return [Point(float(x), float(y)) for x, y in arr]


def first_unsorted_index(points: Sequence[PointLike]) -> int:
    """Index of the first point that sorts before its predecessor, or -1."""
    for i in range(1, len(points)):
        if sort_points(points[i - 1], points[i]) > 0:
            return i
    return -1
