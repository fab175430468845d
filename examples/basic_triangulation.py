"""
rtriangulate Example: Basic Triangulation

This example walks through a typical run:
1. Generate random points and sort them into engine order
2. Triangulate in 64-bit and 32-bit precision
3. Check the result (indices, empty circumcircles, hull coverage)
4. Map triangles back to the unsorted input and export/plot them
"""

import numpy as np

from rtriangulate import (
    NotEnoughPoints, TriangulationConfig, configure_logging, sort_coordinates,
    triangulate_array, write_vtk,
)
from rtriangulate.core.diagnostics import check_triangulation
from rtriangulate.core.visualization import plot_triangulation


def main():
    configure_logging('DEBUG')
    print("=" * 60)
    print("rtriangulate Example: Basic Triangulation")
    print("=" * 60)

    # Step 1: random input, sorted by x then y
    print("\n[1] Generating points...")
    rng = np.random.default_rng(42)
    raw = rng.random((200, 2)) * 100.0
    coords, order = sort_coordinates(raw)
    print(f"  {len(coords)} points")

    # Step 2: triangulate at two precisions
    print("\n[2] Triangulating...")
    tris64 = triangulate_array(coords)
    tris32 = triangulate_array(coords, TriangulationConfig.for_precision(32))
    print(f"  float64: {len(tris64)} triangles")
    print(f"  float32: {len(tris32)} triangles")

    # Step 3: check
    print("\n[3] Checking result...")
    summary = check_triangulation(coords, tris64)
    print(f"  valid indices: {not summary['invalid_rows']}")
    print(f"  Delaunay violations: {len(summary['violations'])}")
    print(f"  covered area: {summary['area']:.2f} of hull {summary['hull_area']:.2f}")

    # Step 4: back to the caller's indexing
    print("\n[4] Exporting...")
    original_tris = order[tris64]
    write_vtk('basic_triangulation.vtk', raw, original_tris)
    plot_triangulation(raw, original_tris, outname='basic_triangulation.png')
    print("  Saved 'basic_triangulation.vtk' and 'basic_triangulation.png'")

    try:
        triangulate_array(coords[:2])
    except NotEnoughPoints as exc:
        print(f"\n  Two points are rejected: {exc}")

    print("\n" + "=" * 60)
    print(" Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
