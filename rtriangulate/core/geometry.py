"""Geometric predicates and area helpers.

The circumcircle predicate locates the circumcenter by intersecting the
perpendicular bisectors of two triangle edges, branching around near
horizontal edges so no slope is computed from a near-zero rise. All
arithmetic runs in numpy scalars of the requested precision and the
near-zero threshold is that precision's machine epsilon.
"""
from __future__ import annotations

import numpy as np

from .constants import machine_epsilon, resolve_dtype
from .points import PointLike

__all__ = [
    'in_circumcircle',
    'triangle_area',
    'triangles_signed_areas',
    'triangulation_area',
]


def _in_circumcircle(p: PointLike, t0: PointLike, t1: PointLike, t2: PointLike, f, eps) -> bool:
    """Predicate kernel; the caller owns the numpy error state."""
    x0 = f(t0.x); y0 = f(t0.y)
    x1 = f(t1.x); y1 = f(t1.y)
    x2 = f(t2.x); y2 = f(t2.y)

    # All three vertices on one horizontal line: no finite circumcircle
    if abs(y0 - y1) < eps and abs(y1 - y2) < eps:
        return False

    zero = f(0.0)
    half = f(0.5)
    if abs(y1 - y0) < eps:
        m2 = zero - (x2 - x1) / (y2 - y1)
        mx2 = (x1 + x2) * half
        my2 = (y1 + y2) * half
        xc = (x1 + x0) * half
        yc = m2 * (xc - mx2) + my2
    elif abs(y2 - y1) < eps:
        m1 = zero - (x1 - x0) / (y1 - y0)
        mx1 = (x0 + x1) * half
        my1 = (y0 + y1) * half
        xc = (x2 + x1) * half
        yc = m1 * (xc - mx1) + my1
    else:
        m1 = zero - (x1 - x0) / (y1 - y0)
        m2 = zero - (x2 - x1) / (y2 - y1)
        mx1 = (x0 + x1) * half
        mx2 = (x1 + x2) * half
        my1 = (y0 + y1) * half
        my2 = (y1 + y2) * half
        xc = (m1 * mx1 - m2 * mx2 + my2 - my1) / (m1 - m2)
        yc = m1 * (xc - mx1) + my1

    dx = x1 - xc
    dy = y1 - yc
    rsqr = dx * dx + dy * dy
    dx = f(p.x) - xc
    dy = f(p.y) - yc
    drsqr = dx * dx + dy * dy
    # Points on the circle count as inside
    return bool(drsqr <= rsqr)


def in_circumcircle(point: PointLike, t0: PointLike, t1: PointLike, t2: PointLike,
                    dtype=None) -> bool:
    """Return True if ``point`` lies inside or on the circumcircle of (t0, t1, t2).

    Parameters
    ----------
    point : PointLike
        Point tested against the circle.
    t0, t1, t2 : PointLike
        Triangle vertices defining the circle.
    dtype : numpy floating type, optional
        Precision of the computation (default float64). Also selects the
        epsilon used to detect horizontal edges.

    Returns
    -------
    bool
        False unconditionally when all three vertices share a y coordinate.
        Collinear, non horizontal triples follow IEEE arithmetic (infinite or
        NaN centers) and never raise.
    """
    f = resolve_dtype(dtype)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return _in_circumcircle(point, t0, t1, t2, f, machine_epsilon(f))


def triangle_area(p0, p1, p2) -> float:
    """Signed area of (p0, p1, p2); positive when counter-clockwise."""
    p0 = np.asarray(p0, dtype=np.float64); p1 = np.asarray(p1, dtype=np.float64); p2 = np.asarray(p2, dtype=np.float64)
    return 0.5 * float((p1[0] - p0[0]) * (p2[1] - p0[1]) - (p1[1] - p0[1]) * (p2[0] - p0[0]))


def triangles_signed_areas(points, tris) -> np.ndarray:
    """Vectorized signed area for a batch of triangles.

    points: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,) float64 array of signed areas.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int64).reshape(-1, 3)
    if T.size == 0:
        return np.empty((0,), dtype=np.float64)
    p0 = pts[T[:, 0]]; p1 = pts[T[:, 1]]; p2 = pts[T[:, 2]]
    e1 = p1 - p0
    e2 = p2 - p0
    return 0.5 * (e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0])


def triangulation_area(points, tris) -> float:
    """Total unsigned area covered by ``tris``."""
    return float(np.sum(np.abs(triangles_signed_areas(points, tris))))
