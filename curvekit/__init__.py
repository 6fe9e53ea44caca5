"""Public package API for curvekit.

A flat import surface over the implementation modules in ``curvekit.core``:
tolerant 2D primitives (points, angles, segments, lines, rects, polygons,
polylines, Bezier curves, arcs, ellipses), a mixed edge sequence, and the
corner-rounding engine that turns polylines into smooth outlines. Plotting
helpers are loaded on first use so that ``import curvekit`` never imports
pyplot.

Example
-------
    from curvekit import Polyline, Point

    edges = Polyline([Point(0, 0), Point(10, 0), Point(10, -10)]).rounded_corners(3, 2)
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("curvekit")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('curvekit.core.constants')
_scalar = _imp('curvekit.core.scalar')
_point = _imp('curvekit.core.point')
_angle = _imp('curvekit.core.angle')
_geom = _imp('curvekit.core.geometry')
_linear = _imp('curvekit.core.linear')
_rect = _imp('curvekit.core.rect')
_polygon = _imp('curvekit.core.polygon')
_polyline = _imp('curvekit.core.polyline')
_curves = _imp('curvekit.core.curves')
_edges = _imp('curvekit.core.edges')
_path = _imp('curvekit.core.path')
_rounding = _imp('curvekit.core.rounding')
_config = _imp('curvekit.core.config')
_stats = _imp('curvekit.core.stats')
_log = _imp('curvekit.core.logging_utils')


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
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# pyplot is only imported when a plot is requested
visualization = _lazy_module('curvekit.core.visualization')

# Tolerances
EPS_DEFAULT = _const.EPS_DEFAULT
EPS_DEGENERATE = _const.EPS_DEGENERATE

# Primitives
Point = _point.Point
Angle = _angle.Angle
PointCollection = _geom.PointCollection
Segment = _linear.Segment
Line = _linear.Line
Rect = _rect.Rect
Polygon = _polygon.Polygon
Polyline = _polyline.Polyline
CubicBezier = _curves.CubicBezier
QuadCurve = _curves.QuadCurve
Arc = _curves.Arc
Ellipse = _curves.Ellipse
CurvilinearEdges = _edges.CurvilinearEdges

# Rendering contract
PathBuilder = _path.PathBuilder
MatplotlibPathBuilder = _path.MatplotlibPathBuilder
edges_to_path = _path.edges_to_path

# Corner rounding
rounded_corners = _rounding.rounded_corners
bezier_corners = _rounding.bezier_corners
round_polyline = _rounding.round_polyline
GeometryConfig = _config.GeometryConfig
RoundingConfig = _config.RoundingConfig
BezierCornerConfig = _config.BezierCornerConfig
CurvekitConfig = _config.CurvekitConfig
RoundingStats = _stats.RoundingStats

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Namespace submodules for exploratory users
constants = _const
scalar = _scalar
geometry = _geom
curves = _curves
edges = _edges
path = _path
rounding = _rounding
config = _config
stats = _stats

__all__ = [
    '__version__',
    # tolerances
    'EPS_DEFAULT', 'EPS_DEGENERATE',
    # primitives
    'Point', 'Angle', 'PointCollection', 'Segment', 'Line', 'Rect', 'Polygon', 'Polyline',
    'CubicBezier', 'QuadCurve', 'Arc', 'Ellipse', 'CurvilinearEdges',
    # rendering
    'PathBuilder', 'MatplotlibPathBuilder', 'edges_to_path',
    # rounding
    'rounded_corners', 'bezier_corners', 'round_polyline',
    'GeometryConfig', 'RoundingConfig', 'BezierCornerConfig', 'CurvekitConfig', 'RoundingStats',
    # logging
    'get_logger', 'configure_logging',
    # submodules / namespaces
    'constants', 'scalar', 'geometry', 'curves', 'edges', 'path', 'rounding', 'config', 'stats',
    'visualization',
]
