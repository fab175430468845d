"""Smoke test for the flat API layer (`rtriangulate/__init__.py`)."""


def test_import_rtriangulate_smoke():
    import rtriangulate
    for name in ('triangulate', 'triangulate_array', 'in_circumcircle', 'sort_points',
                 'sorted_points', 'Point', 'Triangle', 'Edge', 'NotEnoughPoints',
                 'TriangulationConfig', '__version__'):
        assert hasattr(rtriangulate, name)
    assert rtriangulate.triangulate([rtriangulate.Point(10, 10), rtriangulate.Point(15, 25),
                                     rtriangulate.Point(25, 15)]) == [(0, 1, 2)]


def test_lazy_visualization_resolves():
    import rtriangulate
    assert callable(rtriangulate.visualization.plot_triangulation)
    assert 'plot_triangulation' in dir(rtriangulate.visualization)
