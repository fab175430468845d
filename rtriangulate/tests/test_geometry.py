"""Unit tests for the circumcircle predicate and area helpers."""
import warnings

import numpy as np
import pytest

from rtriangulate.core.constants import machine_epsilon
from rtriangulate.core.geometry import (
    in_circumcircle, triangle_area, triangles_signed_areas, triangulation_area,
)
from rtriangulate.core.points import Point


A = Point(0.0, 0.0)
B = Point(2.0, 0.0)
C = Point(0.0, 2.0)


class TestInCircumcircle:
    """Circle through (0,0), (2,0), (0,2): center (1,1), radius^2 = 2."""

    def test_center_inside(self):
        assert in_circumcircle(Point(1.0, 1.0), A, B, C) is True

    def test_far_point_outside(self):
        assert in_circumcircle(Point(3.0, 3.0), A, B, C) is False

    def test_point_on_circle_counts_as_inside(self):
        assert in_circumcircle(Point(2.0, 2.0), A, B, C) is True

    def test_vertex_counts_as_inside(self):
        assert in_circumcircle(B, A, B, C) is True

    def test_vertex_order_irrelevant(self):
        p = Point(1.5, 1.9)
        expected = in_circumcircle(p, A, B, C)
        for tri in [(A, C, B), (B, A, C), (B, C, A), (C, A, B), (C, B, A)]:
            assert in_circumcircle(p, *tri) == expected

    def test_second_edge_horizontal(self):
        # (t1, t2) horizontal branch
        t0 = Point(0.0, 2.0); t1 = Point(0.0, 0.0); t2 = Point(2.0, 0.0)
        assert in_circumcircle(Point(1.0, 1.0), t0, t1, t2) is True
        assert in_circumcircle(Point(-1.0, -1.0), t0, t1, t2) is False

    def test_general_position(self):
        t0 = Point(10.0, 10.0); t1 = Point(15.0, 25.0); t2 = Point(25.0, 15.0)
        assert in_circumcircle(Point(16.0, 16.0), t0, t1, t2) is True
        assert in_circumcircle(Point(40.0, 15.0), t0, t1, t2) is False

    def test_horizontal_collinear_is_false(self):
        row = [Point(0.0, 5.0), Point(1.0, 5.0), Point(2.0, 5.0)]
        assert in_circumcircle(Point(1.0, 5.0), *row) is False
        assert in_circumcircle(Point(100.0, -3.0), *row) is False

    def test_coincident_vertices_is_false(self):
        p = Point(10.0, 10.0)
        assert in_circumcircle(Point(10.0, 10.0), p, p, p) is False

    def test_epsilon_scales_with_precision(self):
        # A rise of 1e-8 is below float32 epsilon but well above float64 epsilon
        t0 = Point(0.0, 0.0); t1 = Point(1.0, 1e-8); t2 = Point(2.0, 0.0)
        probe = Point(1.0, -1000.0)
        assert in_circumcircle(probe, t0, t1, t2, dtype=np.float64) is True
        assert in_circumcircle(probe, t0, t1, t2, dtype=np.float32) is False

    def test_collinear_sloped_never_raises(self):
        t0 = Point(0.0, 0.0); t1 = Point(1.0, 1.0); t2 = Point(2.0, 2.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = in_circumcircle(Point(5.0, 0.0), t0, t1, t2)
        assert isinstance(result, bool)

    @pytest.mark.parametrize("dtype", [np.float32, np.float64, np.longdouble])
    def test_precisions_agree_on_clear_cases(self, dtype):
        assert in_circumcircle(Point(1.0, 1.0), A, B, C, dtype=dtype) is True
        assert in_circumcircle(Point(3.0, 3.0), A, B, C, dtype=dtype) is False

    def test_accepts_numpy_scalars(self):
        t = [Point(np.float32(0), np.float32(0)), Point(np.float32(2), np.float32(0)),
             Point(np.float32(0), np.float32(2))]
        assert in_circumcircle(Point(np.float32(1), np.float32(1)), *t) is True

    def test_rejects_integer_dtype(self):
        with pytest.raises(ValueError):
            in_circumcircle(Point(1.0, 1.0), A, B, C, dtype=np.int32)


class TestMachineEpsilon:

    def test_matches_finfo(self):
        assert machine_epsilon(np.float64) == np.finfo(np.float64).eps
        assert machine_epsilon(np.float32) == np.finfo(np.float32).eps

    def test_returns_same_type(self):
        assert isinstance(machine_epsilon(np.float32), np.float32)

    def test_default_is_float64(self):
        assert machine_epsilon() == np.finfo(np.float64).eps


class TestAreas:

    def test_triangle_area_sign(self):
        assert abs(triangle_area((0, 0), (1, 0), (0, 1)) - 0.5) < 1e-12
        assert abs(triangle_area((0, 0), (0, 1), (1, 0)) + 0.5) < 1e-12

    def test_signed_areas_batch(self):
        points = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        areas = triangles_signed_areas(points, [[0, 1, 2], [0, 3, 2]])
        assert np.allclose(areas, [0.5, -0.5])

    def test_signed_areas_empty(self):
        assert triangles_signed_areas(np.zeros((3, 2)), np.empty((0, 3), dtype=int)).shape == (0,)

    def test_triangulation_area_unsigned(self):
        points = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert abs(triangulation_area(points, [[0, 1, 2], [0, 3, 2]]) - 1.0) < 1e-12

    def test_triangulation_area_accepts_triangle_list(self):
        from rtriangulate.core.triangulation import Triangle
        points = [Point(0.0, 0.0), Point(2.0, 0.0), Point(0.0, 2.0)]
        assert abs(triangulation_area(points, [Triangle(0, 1, 2)]) - 2.0) < 1e-12
