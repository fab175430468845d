"""Configuration for a triangulation call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_DTYPE, PRECISION_DTYPES, resolve_dtype


@dataclass
class TriangulationConfig:
    """Per-call options for :func:`rtriangulate.core.triangulation.triangulate`.

    Attributes
    ----------
    dtype : numpy floating type
        Precision used by the circumcircle predicate and the supertriangle.
        The degenerate-case epsilon is this type's machine epsilon.
    check_sorted : bool
        Verify the x-then-y ordering precondition and log a warning naming the
        first out-of-order index. Never raises.
    log_summary : bool
        Emit a DEBUG summary line once the triangulation is complete.
    """
    dtype: Any = DEFAULT_DTYPE
    check_sorted: bool = False
    log_summary: bool = True

    def __post_init__(self):
        self.dtype = resolve_dtype(self.dtype)

    @classmethod
    def for_precision(cls, bits: int, **overrides) -> 'TriangulationConfig':
        if bits not in PRECISION_DTYPES:
            raise ValueError(
                f"unsupported precision {bits}; expected one of {sorted(PRECISION_DTYPES)}")
        return cls(dtype=PRECISION_DTYPES[bits], **overrides)


__all__ = ['TriangulationConfig']
