"""Path-building contract and its matplotlib implementation.

curvekit never draws. Geometry is replayed on any object implementing
:class:`PathBuilder`; :class:`MatplotlibPathBuilder` collects the calls into
a :class:`matplotlib.path.Path` that can be stroked, filled or measured.
"""
from __future__ import annotations

from typing import List, Protocol, Tuple

import numpy as np
from matplotlib.path import Path

from .angle import Angle
from .point import Point

__all__ = [
    'PathBuilder', 'MatplotlibPathBuilder',
    'edges_to_path', 'polyline_to_path', 'polygon_to_path',
]


class PathBuilder(Protocol):
    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None: ...

    def quad_to(self, control: Point, end: Point) -> None: ...

    def arc_to(self, center: Point, radius: float, start_angle: Angle, end_angle: Angle) -> None: ...


class MatplotlibPathBuilder:
    """Accumulate vertices and codes for a ``matplotlib.path.Path``.

    Arcs run counter-clockwise and are expanded into cubic segments with
    :meth:`matplotlib.path.Path.arc`.
    """

    def __init__(self):
        self._verts: List[Tuple[float, float]] = []
        self._codes: List[int] = []

    def _push(self, point: Point, code: int) -> None:
        self._verts.append((point.x, point.y))
        self._codes.append(code)

    def move_to(self, point: Point) -> None:
        self._push(point, Path.MOVETO)

    def line_to(self, point: Point) -> None:
        if not self._codes:
            self.move_to(point)
            return
        self._push(point, Path.LINETO)

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None:
        for p in (control1, control2, end):
            self._push(p, Path.CURVE4)

    def quad_to(self, control: Point, end: Point) -> None:
        for p in (control, end):
            self._push(p, Path.CURVE3)

    def arc_to(self, center: Point, radius: float, start_angle: Angle, end_angle: Angle) -> None:
        start = start_angle.normalized.degrees
        sweep = (end_angle - start_angle).normalized.degrees
        unit = Path.arc(start, start + sweep)
        pts = [center + Point(x, y) * radius for x, y in unit.vertices]
        # the unit arc opens with its own MOVETO; join it to the current point instead
        self.line_to(pts[0])
        for p, code in zip(pts[1:], unit.codes[1:]):
            self._push(p, int(code))

    def close(self) -> None:
        if self._codes:
            self._verts.append(self._verts[0])
            self._codes.append(Path.CLOSEPOLY)

    @property
    def is_empty(self) -> bool:
        return not self._codes

    def path(self) -> Path:
        if not self._codes:
            return Path(np.empty((0, 2), dtype=float))
        return Path(np.asarray(self._verts, dtype=float), np.asarray(self._codes, dtype=np.uint8))


def edges_to_path(edges) -> Path:
    """Path for a :class:`~curvekit.core.edges.CurvilinearEdges`."""
    builder = MatplotlibPathBuilder()
    edges.emit(builder)
    return builder.path()


def _vertices_path(vertices, closed: bool) -> Path:
    builder = MatplotlibPathBuilder()
    for i, v in enumerate(vertices):
        if i == 0:
            builder.move_to(v)
        else:
            builder.line_to(v)
    if closed:
        builder.close()
    return builder.path()


def polyline_to_path(polyline) -> Path:
    return _vertices_path(polyline.vertices, closed=False)


def polygon_to_path(polygon) -> Path:
    return _vertices_path(polygon.vertices, closed=True)
