"""Benchmark triangulation time on growing prefixes of a fixed point set.

The 100 benchmark points are sorted by x then y, so every prefix is a valid
engine input. Each size is timed in float64 and float32.
"""
import argparse
import time

import numpy as np

from rtriangulate.core.config import TriangulationConfig
from rtriangulate.core.diagnostics import check_triangulation
from rtriangulate.core.points import Point
from rtriangulate.core.triangulation import triangulate

BENCH_POINTS = [
    (1.0, 117.0), (3.0, 438.0), (3.0, 524.0), (10.0, 253.0), (10.0, 515.0),
    (14.0, 479.0), (27.0, 257.0), (28.0, 16.0), (34.0, 452.0), (48.0, 201.0),
    (55.0, 501.0), (71.0, 216.0), (83.0, 304.0), (85.0, 657.0), (93.0, 57.0),
    (104.0, 564.0), (123.0, 163.0), (145.0, 460.0), (147.0, 343.0), (149.0, 624.0),
    (151.0, 550.0), (169.0, 480.0), (177.0, 397.0), (188.0, 18.0), (192.0, 358.0),
    (196.0, 270.0), (208.0, 392.0), (216.0, 315.0), (230.0, 616.0), (269.0, 76.0),
    (273.0, 333.0), (278.0, 644.0), (286.0, 420.0), (321.0, 161.0), (349.0, 365.0),
    (354.0, 51.0), (362.0, 123.0), (376.0, 660.0), (385.0, 352.0), (391.0, 160.0),
    (392.0, 413.0), (400.0, 611.0), (409.0, 380.0), (420.0, 354.0), (442.0, 545.0),
    (449.0, 209.0), (459.0, 327.0), (463.0, 458.0), (467.0, 593.0), (474.0, 254.0),
    (478.0, 469.0), (478.0, 602.0), (491.0, 221.0), (491.0, 493.0), (503.0, 142.0),
    (503.0, 635.0), (521.0, 488.0), (527.0, 335.0), (534.0, 269.0), (535.0, 423.0),
    (556.0, 570.0), (574.0, 410.0), (579.0, 393.0), (591.0, 439.0), (607.0, 266.0),
    (620.0, 18.0), (631.0, 221.0), (635.0, 206.0), (637.0, 598.0), (650.0, 243.0),
    (662.0, 598.0), (662.0, 622.0), (681.0, 230.0), (686.0, 241.0), (699.0, 576.0),
    (702.0, 647.0), (703.0, 14.0), (706.0, 383.0), (712.0, 70.0), (717.0, 443.0),
    (726.0, 349.0), (745.0, 616.0), (749.0, 282.0), (756.0, 310.0), (761.0, 88.0),
    (791.0, 4.0), (800.0, 72.0), (813.0, 565.0), (817.0, 100.0), (834.0, 196.0),
    (844.0, 247.0), (847.0, 4.0), (856.0, 299.0), (867.0, 94.0), (871.0, 509.0),
    (873.0, 111.0), (875.0, 468.0), (877.0, 86.0), (878.0, 301.0), (891.0, 23.0),
]

SIZES = [3, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]


def benchmark_function(func, *args, n_runs=20):
    """Benchmark a function with multiple runs."""
    # Warmup
    for _ in range(2):
        func(*args)

    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        result = func(*args)
        end = time.perf_counter()
        times.append(end - start)

    return np.median(times) * 1000, np.mean(times) * 1000, np.std(times) * 1000, result


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--runs', type=int, default=20, help='timed runs per size')
    parser.add_argument('--check', action='store_true', help='validate each result')
    args = parser.parse_args()

    points = [Point(x, y) for x, y in BENCH_POINTS]

    print("=" * 80)
    print("TRIANGULATION BENCHMARK")
    print("=" * 80)
    for bits in (64, 32):
        cfg = TriangulationConfig.for_precision(bits, log_summary=False)
        print(f"\nfloat{bits}")
        print("-" * 80)
        for n in SIZES:
            subset = points[:n]
            median_ms, mean_ms, std_ms, tris = benchmark_function(triangulate, subset, cfg, n_runs=args.runs)
            line = f"  {n:4d} points: {median_ms:8.3f} ms  (mean: {mean_ms:6.3f} ± {std_ms:5.3f}, {len(tris)} triangles)"
            if args.check and n > 3:
                summary = check_triangulation(BENCH_POINTS[:n], tris)
                line += f"  ok={summary['ok']} area={summary['area']:.1f}/{summary['hull_area']:.1f}"
            print(line)


if __name__ == "__main__":
    main()
