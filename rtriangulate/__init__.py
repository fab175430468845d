"""Public package API for rtriangulate, a 2D Delaunay triangulation library.

This facade provides a stable, flat import surface on top of the internal
implementation package ``rtriangulate.core``, deferring the matplotlib backed
plotting module until first use so ``import rtriangulate`` stays light.

Example
-------
    from rtriangulate import Point, sorted_points, triangulate

    pts = sorted_points([Point(10, 7.5), Point(5, 5), Point(10, 5)])
    tris = triangulate(pts)

The deeper modules (``rtriangulate.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("rtriangulate")
except _NotFound:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('rtriangulate.core.constants')
_errors = _imp('rtriangulate.core.errors')
_config = _imp('rtriangulate.core.config')
_points = _imp('rtriangulate.core.points')
_geom = _imp('rtriangulate.core.geometry')
_tri = _imp('rtriangulate.core.triangulation')
_diag = _imp('rtriangulate.core.diagnostics')
_io = _imp('rtriangulate.core.io')
_log = _imp('rtriangulate.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            # Unset slot lookups land here too
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-dependent module
visualization = _lazy_module('rtriangulate.core.visualization')

# Core types and entry points
Point = _points.Point
PointLike = _points.PointLike
Triangle = _tri.Triangle
Edge = _tri.Edge
triangulate = _tri.triangulate
triangulate_array = _tri.triangulate_array
supertriangle = _tri.supertriangle
in_circumcircle = _geom.in_circumcircle

# Ordering helpers
sort_points = _points.sort_points
sorted_points = _points.sorted_points
sort_coordinates = _points.sort_coordinates
as_points = _points.as_points

# Errors and configuration
TriangulationError = _errors.TriangulationError
NotEnoughPoints = _errors.NotEnoughPoints
TriangulationConfig = _config.TriangulationConfig
machine_epsilon = _const.machine_epsilon
MIN_POINTS = _const.MIN_POINTS

configure_logging = _log.configure_logging

# I/O
load_points = _io.load_points
write_vtk = _io.write_vtk

# Namespace submodules for exploratory users
constants = _const
points = _points
geometry = _geom
triangulation = _tri
diagnostics = _diag
io = _io

__all__ = [
    '__version__',
    # core
    'Point', 'PointLike', 'Triangle', 'Edge',
    'triangulate', 'triangulate_array', 'supertriangle', 'in_circumcircle',
    # ordering
    'sort_points', 'sorted_points', 'sort_coordinates', 'as_points',
    # errors / config
    'TriangulationError', 'NotEnoughPoints', 'TriangulationConfig',
    'machine_epsilon', 'MIN_POINTS', 'configure_logging',
    # io
    'load_points', 'write_vtk',
    # submodules / namespaces
    'constants', 'points', 'geometry', 'triangulation', 'diagnostics', 'io', 'visualization',
]
