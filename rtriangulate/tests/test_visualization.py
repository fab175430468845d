import numpy as np

from rtriangulate.core.triangulation import triangulate_array
from rtriangulate.core.visualization import plot_triangulation


def test_plot_triangulation_writes_png(tmp_path):
    coords = np.array([[10, 10], [15, 25], [25, 15], [30, 25], [40, 15]], dtype=float)
    tris = triangulate_array(coords)
    out = tmp_path / "tri.png"
    result = plot_triangulation(coords, tris, outname=str(out), annotate_points=True)
    assert result == str(out)
    assert out.exists() and out.stat().st_size > 0


def test_plot_empty_triangulation(tmp_path):
    coords = np.array([[10, 10], [10, 10], [11, 10], [11, 10]], dtype=float)
    out = tmp_path / "empty.png"
    plot_triangulation(coords, triangulate_array(coords), outname=str(out), title="degenerate")
    assert out.exists()
