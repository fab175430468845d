"""Bowyer-Watson incremental Delaunay triangulation.

Points are inserted one at a time, left to right. Every triangle whose
circumcircle contains the new point is removed; the edges of the removed
triangles that are not shared between two of them outline a polygonal hole,
and the hole is re-triangulated by joining each outline edge to the new
point. A synthetic supertriangle enclosing all inputs bootstraps the process
and every triangle still touching it is dropped at the end.

Input must be sorted by ascending x, ties by ascending y (see
:func:`rtriangulate.core.points.sorted_points`). Unsorted input does not
fail but yields an unspecified triangulation.
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from .config import TriangulationConfig
from .constants import MIN_POINTS, SUPERTRIANGLE_MARGIN, resolve_dtype, machine_epsilon
from .errors import NotEnoughPoints
from .geometry import _in_circumcircle
from .logging_utils import get_logger
from .points import Point, PointLike, first_unsorted_index

logger = get_logger('rtriangulate.triangulation')

__all__ = [
    'Triangle',
    'Edge',
    'supertriangle',
    'hole_boundary',
    'triangulate',
    'triangulate_array',
]


class Triangle(NamedTuple):
    """Three indices into the caller's point sequence."""
    a: int
    b: int
    c: int


class Edge:
    """Undirected edge between two point indices: Edge(a, b) == Edge(b, a)."""
    __slots__ = ('a', 'b')

    def __init__(self, a: int, b: int):
        object.__setattr__(self, 'a', a)
        object.__setattr__(self, 'b', b)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self.a == other.a and self.b == other.b)
                or (self.a == other.b and self.b == other.a))

    def __hash__(self):
        return hash((min(self.a, self.b), max(self.a, self.b)))

    def __repr__(self):
        return f'Edge({self.a}, {self.b})'


class _PointView:
    """Caller points followed by the supertriangle, indexed as one sequence."""
    __slots__ = ('_points', '_extra', '_n')

    def __init__(self, points: Sequence[PointLike], extra: Sequence[PointLike]):
        self._points = points
        self._extra = extra
        self._n = len(points)

    def __len__(self):
        return self._n + len(self._extra)

    def __getitem__(self, i: int) -> PointLike:
        if i < self._n:
            return self._points[i]
        return self._extra[i - self._n]


def supertriangle(points: Sequence[PointLike], dtype=None) -> List[Point]:
    """Three points enclosing the bounding box of ``points`` with margin.

    With ``delta_max`` the larger bounding box side and ``mid`` its center,
    the vertices are ``mid + (-2d, -d)``, ``mid + (0, 2d)`` and ``mid + (2d, -d)``.
    Coordinates are numpy scalars of ``dtype``.
    """
    f = resolve_dtype(dtype)
    min_x = max_x = f(points[0].x)
    min_y = max_y = f(points[0].y)
    for p in points:
        x = f(p.x)
        y = f(p.y)
        if x > max_x:
            max_x = x
        if y > max_y:
            max_y = y
        if x < min_x:
            min_x = x
        if y < min_y:
            min_y = y
    dx = max_x - min_x
    dy = max_y - min_y
    delta_max = dx if dx > dy else dy
    half = f(0.5)
    mid_x = (max_x + min_x) * half
    mid_y = (max_y + min_y) * half
    margin = f(SUPERTRIANGLE_MARGIN) * delta_max
    return [
        Point(mid_x - margin, mid_y - delta_max),
        Point(mid_x, mid_y + margin),
        Point(mid_x + margin, mid_y - delta_max),
    ]


def hole_boundary(edges: Sequence[Edge]) -> List[Edge]:
    """Drop every pair of matching edges, keeping the rest in order.

    Edges collected from the removed triangles appear twice when shared by
    two of them (interior of the hole) and once on its outline.
    """
    kept = list(edges)
    j = len(kept) - 2
    while j >= 0:
        k = len(kept) - 1
        while k > j:
            if kept[j] == kept[k]:
                del kept[k]
                del kept[j]
                k -= 2
            else:
                k -= 1
        j -= 1
    return kept


def triangulate(points: Sequence[PointLike], config: Optional[TriangulationConfig] = None,
                *, dtype=None) -> List[Triangle]:
    """Delaunay triangulation of ``points``.

    Parameters
    ----------
    points : sequence of PointLike
        At least three points sorted by x, then y. Coincident points are
        allowed. The sequence is only read.
    config : TriangulationConfig, optional
        Precision and precondition-check options.
    dtype : numpy floating type, optional
        Overrides ``config.dtype``.

    Returns
    -------
    list of Triangle
        Indices into ``points``, in creation order. Empty when every
        candidate triangle is degenerate.

    Raises
    ------
    NotEnoughPoints
        If fewer than three points are given.
    ValueError
        If the coordinates are non-finite, or spread so wide that squared
        distances overflow ``dtype``.
    """
    cfg = config if config is not None else TriangulationConfig()
    f = resolve_dtype(dtype if dtype is not None else cfg.dtype)
    n = len(points)
    if n < MIN_POINTS:
        raise NotEnoughPoints(n)
    if cfg.check_sorted:
        idx = first_unsorted_index(points)
        if idx >= 0:
            logger.warning("input not sorted by x then y: point %d sorts before point %d; "
                           "the triangulation is unspecified", idx, idx - 1)

    eps = machine_epsilon(f)
    with np.errstate(over='ignore', invalid='ignore'):
        super_pts = supertriangle(points, f)
        # Squared distances inside the supertriangle stay below its base squared
        span = super_pts[2].x - super_pts[0].x
        span_sqr = span * span
    if not np.isfinite(span_sqr):
        raise ValueError(
            f"point coordinates are non-finite or too large for {np.dtype(f).name}: "
            f"supertriangle base {float(span)!r} overflows when squared")
    view = _PointView(points, super_pts)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("triangulating %d points (dtype=%s, supertriangle=%s)",
                     n, np.dtype(f).name, [(float(p.x), float(p.y)) for p in super_pts])

    triangles = [Triangle(n, n + 1, n + 2)]
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for i in range(n):
            p = view[i]
            kept = []
            edges = []
            for tri in triangles:
                if _in_circumcircle(p, view[tri.a], view[tri.b], view[tri.c], f, eps):
                    edges.append(Edge(tri.a, tri.b))
                    edges.append(Edge(tri.b, tri.c))
                    edges.append(Edge(tri.c, tri.a))
                else:
                    kept.append(tri)
            # Outline edges keep the winding of the triangles they came from
            for edge in hole_boundary(edges):
                kept.append(Triangle(edge.a, edge.b, i))
            triangles = kept

    result = [t for t in triangles if t.a < n and t.b < n and t.c < n]
    if cfg.log_summary:
        logger.debug("triangulated %d points into %d triangles (%d touching the supertriangle dropped)",
                     n, len(result), len(triangles) - len(result))
    return result


def triangulate_array(coords, config: Optional[TriangulationConfig] = None,
                      *, dtype=None) -> np.ndarray:
    """Triangulate an (N, 2) coordinate array.

    Rows must already be sorted by x then y; use
    :func:`rtriangulate.core.points.sort_coordinates` and map the result
    through the returned ``order`` otherwise.

    Returns
    -------
    (M, 3) ndarray of int32
    """
    arr = np.asarray(coords)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords must be (N, 2), got shape {arr.shape}")
    if arr.dtype.kind != 'f':
        arr = arr.astype(np.float64)
    pts = [Point(x, y) for x, y in arr]
    tris = triangulate(pts, config, dtype=dtype)
    return np.asarray(tris, dtype=np.int32).reshape(-1, 3)
