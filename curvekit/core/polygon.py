"""Closed polygons and the vertex-list helpers shared with polylines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .constants import EPS_DEFAULT
from .geometry import GeometryMixin
from .linear import Segment
from .point import Point
from .scalar import is_equal, is_greater, is_greater_than_zero, is_less, is_less_than_zero

__all__ = ['VertexSequenceMixin', 'Polygon', 'as_points']


def as_points(vertices) -> Tuple[Point, ...]:
    """Coerce an iterable of Points or ``(x, y)`` pairs to a tuple of Points."""
    return tuple(v if isinstance(v, Point) else Point(*v) for v in vertices)


class VertexSequenceMixin:
    """Editing helpers over an ordered ``vertices`` tuple.

    Every helper returns a new instance of the same class.
    """
    vertices: Tuple[Point, ...]

    def _with_vertices(self, vertices):
        return type(self)(tuple(vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def reversed(self):
        return self._with_vertices(self.vertices[::-1])

    def appended(self, point: Point):
        return self._with_vertices(self.vertices + (point,))

    def inserted(self, index: int, point: Point):
        verts = list(self.vertices)
        verts.insert(index, point)
        return self._with_vertices(verts)

    def removed(self, index: int):
        """Drop the vertex at ``index``; out-of-range indices leave it unchanged."""
        if not 0 <= index < len(self.vertices):
            return self
        return self._with_vertices(self.vertices[:index] + self.vertices[index + 1:])

    def without_redundant_points(self, tol: float = EPS_DEFAULT):
        """Drop the middle vertex of every degenerate (zero-area) triplet.

        A triplet a, b, c is degenerate when ``|ab| + |bc| == |ac|``
        tolerantly, which also covers repeated points. Two coincident
        vertices left on their own collapse to one.
        """
        verts = self.vertices
        if len(verts) < 3:
            if len(verts) == 2 and verts[0].is_equal(verts[1], tol):
                return self._with_vertices(verts[:1])
            return self
        drop = set()
        for i in range(len(verts) - 2):
            a, b, c = verts[i], verts[i + 1], verts[i + 2]
            if is_equal(a.length(b) + b.length(c), a.length(c), tol):
                drop.add(i + 1)
        if not drop:
            return self
        kept = [v for i, v in enumerate(verts) if i not in drop]
        if len(kept) == 2 and kept[0].is_equal(kept[1], tol):
            kept = kept[:1]
        return self._with_vertices(kept)

    def without_duplicate_points(self, tol: float = EPS_DEFAULT):
        """Drop vertices equal to their predecessor (no wrap-around)."""
        kept: List[Point] = []
        for v in self.vertices:
            if kept and kept[-1].is_equal(v, tol):
                continue
            kept.append(v)
        return self._with_vertices(kept)

    def translate(self, offset: Point):
        return self._with_vertices(v + offset for v in self.vertices)

    def translate_center(self, to: Point):
        center = self.average_point
        if center is None:
            return self
        return self.translate(to - center)

    def rotate(self, center: Point, angle):
        return self._with_vertices(v.rotate(center, angle) for v in self.vertices)

    def scale(self, origin: Point, factor: float):
        return self._with_vertices(v.scale(origin, factor) for v in self.vertices)

    def to_string(self, decimal_places: int = 2) -> str:
        return '[' + ', '.join(v.to_string(decimal_places) for v in self.vertices) + ']'

    def __add__(self, offset: Point):
        return self.translate(offset)

    def __sub__(self, offset: Point):
        return self.translate(-offset)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if len(self.vertices) != len(other.vertices):
            return False
        return all(a == b for a, b in zip(self.vertices, other.vertices))

    def __hash__(self) -> int:
        return hash(self.vertices)


@dataclass(frozen=True, eq=False)
class Polygon(VertexSequenceMixin, GeometryMixin):
    """Closed ring of vertices; the last vertex connects back to the first.

    Measures (``area``, ``perimeter``) are None and orientation tests are
    False for an invalid polygon. The containment tests accept
    ``validate=True`` to also answer False for invalid polygons; by default
    they trust the caller and skip the O(n^2) validity scan.
    """
    vertices: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'vertices', as_points(self.vertices))

    @property
    def edges(self) -> List[Segment]:
        verts = self.vertices
        n = len(verts)
        if n < 2:
            return []
        return [Segment(verts[i], verts[(i + 1) % n]) for i in range(n)]

    @property
    def open(self):
        from .polyline import Polyline
        return Polyline(self.vertices)

    @property
    def is_valid(self) -> bool:
        n = len(self.vertices)
        if n < 3:
            return False
        edges = self.edges
        if not all(e.is_valid for e in edges):
            return False
        for i in range(n):
            for j in range(i + 1, n):
                adjacent = (j - i == 1) or (j - i == n - 1)
                if not adjacent and edges[i].intersects_line(edges[j]):
                    return False
                if edges[i].overlaps(edges[j]):
                    return False
        return True

    @property
    def area(self) -> Optional[float]:
        if not self.is_valid:
            return None
        arr = self.as_array()
        x, y = arr[:, 0], arr[:, 1]
        return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))

    @property
    def perimeter(self) -> Optional[float]:
        if not self.is_valid:
            return None
        return float(sum(e.length for e in self.edges))

    def _orientation_sum(self) -> float:
        return sum((e.end.x - e.origin.x) * (e.end.y + e.origin.y) for e in self.edges)

    @property
    def is_clockwise(self) -> bool:
        return self.is_valid and is_greater_than_zero(self._orientation_sum())

    @property
    def is_anticlockwise(self) -> bool:
        return self.is_valid and is_less_than_zero(self._orientation_sum())

    def ordered_clockwise(self) -> 'Polygon':
        return self.reversed() if self.is_anticlockwise else self

    def ordered_anticlockwise(self) -> 'Polygon':
        return self.reversed() if self.is_clockwise else self

    # -- containment --------------------------------------------------------
    def _pnpoly(self, point: Point, tol: float) -> bool:
        # W. Randolph Franklin's even-odd ray cast; edges handled by callers
        verts = self.vertices
        inside = False
        for i in range(len(verts)):
            vi, vj = verts[i], verts[i - 1]
            if is_greater(vi.y, point.y, tol) != is_greater(vj.y, point.y, tol):
                x_cross = (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
                if is_less(point.x, x_cross, tol):
                    inside = not inside
        return inside

    def contains(self, point: Point, validate: bool = False, tol: float = EPS_DEFAULT,
                 check_edges: bool = True) -> bool:
        """Point inside or on an edge.

        With ``check_edges=False`` points on the boundary are left to the ray
        cast, which counts only some of them as inside.
        """
        if validate and not self.is_valid:
            return False
        if not self.bounding_box_contains(point, tol):
            return False
        if check_edges and self.intersects(point, tol):
            return True
        return self._pnpoly(point, tol)

    def encloses(self, point: Point, validate: bool = False, tol: float = EPS_DEFAULT) -> bool:
        """Point strictly inside."""
        if validate and not self.is_valid:
            return False
        if not self.bounding_box_encloses(point, tol):
            return False
        if self.intersects(point, tol):
            return False
        return self._pnpoly(point, tol)

    def contains_geometry(self, other, validate: bool = False, tol: float = EPS_DEFAULT) -> bool:
        """Every vertex of ``other`` contained and no edge crossing the boundary.

        Edges that only touch the boundary at one of their own endpoints are
        allowed.
        """
        if validate and not self.is_valid:
            return False
        if not self.bounding_box_contains_bounding_box(other, tol):
            return False
        if other.bounding_box_encloses_bounding_box(self, tol):
            return False
        if not all(self.contains(v, tol=tol) for v in other.vertices):
            return False
        for edge in other.edges:
            if (
                self.intersects_geometry(edge, tol)
                and not self.intersects(edge.origin, tol)
                and not self.intersects(edge.end, tol)
            ):
                return False
        return True

    def encloses_geometry(self, other, validate: bool = False, tol: float = EPS_DEFAULT) -> bool:
        if validate and not self.is_valid:
            return False
        if not self.bounding_box_encloses_bounding_box(other, tol):
            return False
        if other.bounding_box_contains_bounding_box(self, tol):
            return False
        if not all(self.encloses(v, tol=tol) for v in other.vertices):
            return False
        return not any(self.intersects_geometry(edge, tol) for edge in other.edges)
