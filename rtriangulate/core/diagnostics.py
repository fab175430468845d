"""Diagnostics for triangulation results.

Functions operate on raw numpy arrays (or sequences convertible to them):
points as (N, 2) floats, triangles as (M, 3) ints.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np
from scipy.spatial import ConvexHull

from .constants import DELAUNAY_CHECK_RTOL
from .geometry import triangulation_area
from .logging_utils import get_logger

logger = get_logger('rtriangulate.diagnostics')

__all__ = [
    'validate_indices',
    'circumcircles',
    'delaunay_violations',
    'convex_hull_area',
    'check_triangulation',
]


def validate_indices(triangles, n_points: int) -> List[int]:
    """Rows of ``triangles`` with repeated or out-of-range indices."""
    T = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if T.size == 0:
        return []
    out_of_range = np.any((T < 0) | (T >= int(n_points)), axis=1)
    repeated = (T[:, 0] == T[:, 1]) | (T[:, 1] == T[:, 2]) | (T[:, 0] == T[:, 2])
    return np.nonzero(out_of_range | repeated)[0].tolist()


def circumcircles(points, triangles) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized circumcenters and squared radii.

    Returns ``(centers, r2)`` of shapes (M, 2) and (M,). Rows for collinear
    triangles are NaN.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if T.size == 0:
        return np.empty((0, 2), dtype=np.float64), np.empty((0,), dtype=np.float64)
    a = pts[T[:, 0]]; b = pts[T[:, 1]]; c = pts[T[:, 2]]
    d = 2.0 * (a[:, 0] * (b[:, 1] - c[:, 1])
               + b[:, 0] * (c[:, 1] - a[:, 1])
               + c[:, 0] * (a[:, 1] - b[:, 1]))
    a2 = np.sum(a * a, axis=1); b2 = np.sum(b * b, axis=1); c2 = np.sum(c * c, axis=1)
    with np.errstate(divide='ignore', invalid='ignore'):
        ux = (a2 * (b[:, 1] - c[:, 1]) + b2 * (c[:, 1] - a[:, 1]) + c2 * (a[:, 1] - b[:, 1])) / d
        uy = (a2 * (c[:, 0] - b[:, 0]) + b2 * (a[:, 0] - c[:, 0]) + c2 * (b[:, 0] - a[:, 0])) / d
    centers = np.column_stack([ux, uy])
    centers[d == 0.0] = np.nan
    r2 = np.sum((centers - a) ** 2, axis=1)
    return centers, r2


def delaunay_violations(points, triangles, rtol: float = DELAUNAY_CHECK_RTOL) -> List[Tuple[int, int]]:
    """Pairs ``(triangle_row, point_index)`` where a point that is not a vertex
    of the triangle lies strictly inside its circumcircle.

    A point counts as inside when its squared distance to the center is below
    ``r2 * (1 - rtol)``, so co-circular points are not reported. Degenerate
    (collinear) triangles are skipped.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    centers, r2 = circumcircles(pts, T)
    violations: List[Tuple[int, int]] = []
    for row in range(T.shape[0]):
        if not np.isfinite(r2[row]):
            continue
        d2 = np.sum((pts - centers[row]) ** 2, axis=1)
        inside = d2 < r2[row] * (1.0 - rtol)
        inside[T[row]] = False
        for idx in np.nonzero(inside)[0]:
            violations.append((row, int(idx)))
    if violations:
        logger.debug("%d empty-circumcircle violations found", len(violations))
    return violations


def convex_hull_area(points) -> float:
    """Area of the convex hull of ``points`` (scipy.spatial.ConvexHull)."""
    pts = np.asarray(points, dtype=np.float64)
    # In 2D, ConvexHull.volume is the enclosed area
    return float(ConvexHull(pts).volume)


def check_triangulation(points, triangles) -> Dict[str, Any]:
    """Summarize a triangulation: counts, index problems, Delaunay violations
    and covered area against the convex hull area."""
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    bad_rows = validate_indices(T, len(pts))
    summary: Dict[str, Any] = {
        'n_points': int(pts.shape[0]),
        'n_triangles': int(T.shape[0]),
        'invalid_rows': bad_rows,
        'violations': [] if bad_rows else delaunay_violations(pts, T),
        'area': triangulation_area(pts, T) if not bad_rows else float('nan'),
        'hull_area': convex_hull_area(pts),
    }
    summary['ok'] = not summary['invalid_rows'] and not summary['violations']
    logger.debug("triangulation check: %s", {k: v for k, v in summary.items() if k != 'violations'})
    return summary
