"""Ordered sequence of mixed straight and curved edges.

:class:`CurvilinearEdges` is the output of the corner-rounding engine and the
input of the path builders. It is the one mutable container in curvekit:
edges are added and removed in place by whoever owns the instance, while the
transforms (``translate``, ``rotate``...) return new sequences.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Union

from .angle import Angle
from .constants import EPS_DEFAULT
from .curves import Arc, CubicBezier, QuadCurve
from .linear import Segment
from .logging_utils import get_logger
from .point import Point
from .scalar import is_equal, is_zero

logger = get_logger('curvekit.edges')

Edge = Union[Segment, CubicBezier, QuadCurve, Arc]

__all__ = ['Edge', 'CurvilinearEdges', 'edge_start', 'edge_end']


def edge_start(edge: Edge) -> Point:
    if isinstance(edge, Arc):
        return edge.start_point
    return edge.origin


def edge_end(edge: Edge) -> Point:
    if isinstance(edge, Arc):
        return edge.end_point
    return edge.end


class CurvilinearEdges:
    """Mixed edge list with contiguous indices.

    Parameters
    ----------
    edges : iterable of Segment, CubicBezier, QuadCurve or Arc, optional
        Initial content, in order.
    """

    def __init__(self, edges=None):
        self._edges: List[Edge] = []
        for edge in edges or ():
            self._append(edge)

    def _append(self, edge: Edge) -> None:
        if not isinstance(edge, (Segment, CubicBezier, QuadCurve, Arc)):
            raise TypeError(f"unsupported edge type: {type(edge).__name__}")
        self._edges.append(edge)

    # -- building -----------------------------------------------------------
    def add_linear_edge(self, edge: Segment) -> None:
        self._append(edge)

    def add_bezier_edge(self, edge: CubicBezier) -> None:
        self._append(edge)

    def add_quad_edge(self, edge: QuadCurve) -> None:
        self._append(edge)

    def add_arc_edge(self, edge: Arc) -> None:
        self._append(edge)

    def remove_edge(self, index: int) -> None:
        """Remove the edge at ``index``; later edges shift down by one.

        Indices outside ``0 <= index < edge_count`` are ignored.
        """
        if 0 <= index < len(self._edges):
            del self._edges[index]

    # -- inspection ---------------------------------------------------------
    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def last_point(self) -> Optional[Point]:
        if not self._edges:
            return None
        return edge_end(self._edges[-1])

    @property
    def linear_edges(self) -> List[Segment]:
        return [e for e in self._edges if isinstance(e, Segment)]

    @property
    def bezier_edges(self) -> List[CubicBezier]:
        return [e for e in self._edges if isinstance(e, CubicBezier)]

    @property
    def quad_edges(self) -> List[QuadCurve]:
        return [e for e in self._edges if isinstance(e, QuadCurve)]

    @property
    def arc_edges(self) -> List[Arc]:
        return [e for e in self._edges if isinstance(e, Arc)]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __getitem__(self, index: int) -> Edge:
        return self._edges[index]

    @property
    def bounding_box(self):
        """Exact extents of the drawn sequence, or None when empty."""
        if not self._edges:
            return None
        from .path import edges_to_path
        from .rect import Rect
        bbox = edges_to_path(self).get_extents()
        return Rect(Point(bbox.x0, bbox.y0), Point(bbox.x1, bbox.y1))

    # -- pruning ------------------------------------------------------------
    def remove_redundant_edges(self, tol: float = EPS_DEFAULT) -> int:
        """Drop zero-length edges and merge connected collinear segments.

        Walks from the last edge to the first. A segment followed by a
        segment that starts at its end and continues in the same direction
        absorbs it. Returns the number of edges removed.
        """
        before = len(self._edges)
        for i in range(len(self._edges) - 1, -1, -1):
            edge = self._edges[i]
            if isinstance(edge, Segment):
                if is_zero(edge.length, tol):
                    self.remove_edge(i)
                    continue
                nxt = self._edges[i + 1] if i + 1 < len(self._edges) else None
                if isinstance(nxt, Segment) and edge.end.is_equal(nxt.origin, tol):
                    p1, p2, p3 = edge.origin, edge.end, nxt.end
                    if is_equal(p1.length(p2) + p2.length(p3), p1.length(p3), tol):
                        self._edges[i] = Segment(p1, p3)
                        self.remove_edge(i + 1)
            elif isinstance(edge, (CubicBezier, QuadCurve)):
                if all(p.is_equal(edge.origin, tol) for p in edge.points[1:]):
                    self.remove_edge(i)
            elif is_zero(edge.length, tol):
                self.remove_edge(i)
        removed = before - len(self._edges)
        if removed:
            logger.debug("pruned %d redundant edge(s), %d left", removed, len(self._edges))
        return removed

    # -- rendering ----------------------------------------------------------
    def emit(self, builder, tol: float = EPS_DEFAULT) -> None:
        """Replay the edges on a path builder.

        A ``move_to`` is issued before the first edge and wherever an edge
        does not start at the previous edge's end.
        """
        current: Optional[Point] = None
        for edge in self._edges:
            start = edge_start(edge)
            if current is None or not current.is_equal(start, tol):
                builder.move_to(start)
            if isinstance(edge, Segment):
                builder.line_to(edge.end)
            elif isinstance(edge, CubicBezier):
                builder.curve_to(edge.origin_control_point, edge.end_control_point, edge.end)
            elif isinstance(edge, QuadCurve):
                builder.quad_to(edge.control_point, edge.end)
            else:
                builder.arc_to(edge.center, edge.radius, edge.start_angle, edge.end_angle)
            current = edge_end(edge)

    # -- transforms ---------------------------------------------------------
    def _map(self, fn) -> 'CurvilinearEdges':
        return CurvilinearEdges(fn(e) for e in self._edges)

    def translate(self, offset: Point) -> 'CurvilinearEdges':
        return self._map(lambda e: e.translate(offset))

    def translate_center(self, to: Point) -> 'CurvilinearEdges':
        box = self.bounding_box
        if box is None:
            return self.copy()
        return self.translate(to - box.center)

    def rotate(self, center: Point, angle: Angle) -> 'CurvilinearEdges':
        return self._map(lambda e: e.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'CurvilinearEdges':
        return self._map(lambda e: e.scale(origin, factor))

    def copy(self) -> 'CurvilinearEdges':
        return CurvilinearEdges(self._edges)

    def __add__(self, offset: Point) -> 'CurvilinearEdges':
        return self.translate(offset)

    def __sub__(self, offset: Point) -> 'CurvilinearEdges':
        return self.translate(-offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurvilinearEdges):
            return NotImplemented
        if len(self._edges) != len(other._edges):
            return False
        return all(type(a) is type(b) and a == b for a, b in zip(self._edges, other._edges))

    __hash__ = None

    def __repr__(self) -> str:
        kinds = ', '.join(type(e).__name__ for e in self._edges)
        return f"CurvilinearEdges([{kinds}])"
