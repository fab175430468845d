"""Lightweight file I/O for point sets and triangulations.

- load_points: read an x y text file (whitespace or comma separated)
- write_vtk: export legacy ASCII VTK for ParaView/VisIt

Arrays follow the package's canonical format:
    points: (N, 2) float64 array
    triangles: (M, 3) int32 array
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .logging_utils import get_logger

logger = get_logger('rtriangulate.io')

__all__ = ['load_points', 'write_vtk']


def load_points(filepath: str, delimiter: Optional[str] = None) -> np.ndarray:
    """Read 2D points from a text file, one ``x y`` (or ``x,y``) pair per line.

    Lines starting with ``#`` are ignored. When ``delimiter`` is None, a comma
    on the first data line selects comma separation, otherwise whitespace.

    Raises
    ------
    ValueError
        If the file has no points or rows do not hold exactly two values.
    FileNotFoundError
        If the file doesn't exist.
    """
    with open(filepath, 'r') as f:
        lines = [line.strip() for line in f]
    data = [line for line in lines if line and not line.startswith('#')]
    if not data:
        raise ValueError(f"No points in file: {filepath}")
    if delimiter is None and ',' in data[0]:
        delimiter = ','
    arr = np.loadtxt(data, dtype=np.float64, delimiter=delimiter, ndmin=2)
    if arr.shape[1] != 2:
        raise ValueError(f"expected 2 columns in {filepath}, got {arr.shape[1]}")
    logger.debug("loaded %d points from %s", arr.shape[0], filepath)
    return arr


def write_vtk(filepath: str, points, triangles, title: str = "rtriangulate triangulation") -> None:
    """Write a triangulation to legacy VTK format (ASCII).

    Parameters
    ----------
    filepath : str
        Output .vtk file path
    points : (N, 2) ndarray
        Vertex coordinates; z=0 is added.
    triangles : (M, 3) ndarray
        Triangle connectivity (0-indexed)
    title : str
        Dataset title line

    Examples
    --------
    >>> tris = triangulate_array(points)
    >>> write_vtk('out.vtk', points, tris)
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {points.shape}")

    points_3d = np.column_stack([points, np.zeros(len(points))])
    num_points = len(points_3d)
    num_triangles = len(triangles)

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {num_points} double\n")
        for pt in points_3d:
            f.write(f"{pt[0]:.16e} {pt[1]:.16e} {pt[2]:.16e}\n")

        # Format: numIndices v0 v1 v2
        f.write(f"\nCELLS {num_triangles} {num_triangles * 4}\n")
        for tri in triangles:
            f.write(f"3 {tri[0]} {tri[1]} {tri[2]}\n")

        # VTK_TRIANGLE = 5
        f.write(f"\nCELL_TYPES {num_triangles}\n")
        for _ in range(num_triangles):
            f.write("5\n")
    logger.debug("wrote %d points / %d triangles to %s", num_points, num_triangles, filepath)
