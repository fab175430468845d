"""Plotting helpers for triangulation results."""
from __future__ import annotations

import os as _os
from typing import Optional

import matplotlib as _mpl
# Non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .logging_utils import get_logger

logger = get_logger('rtriangulate.viz')

__all__ = ['plot_triangulation']


def plot_triangulation(points, triangles, outname: str = "triangulation.png",
                       annotate_points: bool = False, title: Optional[str] = None) -> str:
    """Draw the triangle edges and input points and save the figure.

    Args:
        points: (N, 2) coordinates
        triangles: (M, 3) indices into ``points``
        outname: output image path
        annotate_points: label every point with its index
        title: figure title; defaults to the point/triangle counts

    Returns the output path.
    """
    pts = np.asarray(points, dtype=np.float64)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    fig, ax = plt.subplots(figsize=(6, 6))
    if tris.size:
        ax.triplot(pts[:, 0], pts[:, 1], tris, color=(0.2, 0.3, 0.7), linewidth=0.8)
    # Scale marker size down for dense point sets
    s = max(0.6, min(12.0, 200.0 / float(max(1, pts.shape[0]))))
    ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black', zorder=3)
    if annotate_points:
        for i, (x, y) in enumerate(pts):
            ax.annotate(str(i), (x, y), fontsize=7, xytext=(2, 2), textcoords='offset points')
    ax.set_title(title if title is not None else f'{pts.shape[0]} points, {tris.shape[0]} triangles')
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("saved triangulation plot to %s", outname)
    return outname
