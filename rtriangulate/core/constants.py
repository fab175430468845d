"""Central numerical constants for the triangulation engine.

Tolerances are never written as literals elsewhere in the package: the
degenerate-case epsilon always scales with the floating-point type selected
by the caller, so the same algorithm behaves consistently in 32 and 64 bit.
"""
from __future__ import annotations

import numpy as np

# Smallest input accepted by the engine
MIN_POINTS: int = 3

# Supertriangle vertices sit SUPERTRIANGLE_MARGIN * delta_max (and delta_max)
# away from the bounding box midpoint
SUPERTRIANGLE_MARGIN: float = 2.0

DEFAULT_DTYPE = np.float64

# Relative slack for the vectorized empty-circumcircle audit in diagnostics
DELAUNAY_CHECK_RTOL: float = 1e-9

# Supported widths for TriangulationConfig.for_precision. Half precision is
# left out: squared radii overflow float16 once coordinates reach the hundreds
PRECISION_DTYPES = {
    32: np.float32,
    64: np.float64,
}


def resolve_dtype(dtype=None):
    """Return a numpy floating scalar type for ``dtype`` (default float64)."""
    if dtype is None:
        return DEFAULT_DTYPE
    resolved = np.dtype(dtype)
    if resolved.kind != 'f':
        raise ValueError(f"dtype must be a floating-point type, got {resolved}")
    return resolved.type


def machine_epsilon(dtype=None):
    """Machine epsilon of ``dtype`` as a scalar of that same type."""
    scalar = resolve_dtype(dtype)
    return scalar(np.finfo(scalar).eps)


__all__ = [
    'MIN_POINTS',
    'SUPERTRIANGLE_MARGIN',
    'DEFAULT_DTYPE',
    'DELAUNAY_CHECK_RTOL',
    'PRECISION_DTYPES',
    'resolve_dtype',
    'machine_epsilon',
]
