"""Shared vertex/edge predicates for every geometry exposing ``vertices`` and ``edges``.

Bounding boxes are returned as :class:`curvekit.core.rect.Rect`; the import is
deferred because Rect itself is built on this mixin.
"""
from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from .constants import EPS_DEFAULT
from .point import Point

__all__ = ['GeometryMixin', 'PointCollection']


class GeometryMixin:
    """Derived measures and relations for vertex/edge geometries.

    Subclasses provide ``vertices`` (ordered list of Point) and ``edges``
    (ordered list of Segment). Everything here is read-only.
    """

    @property
    def min_x_point(self) -> Optional[Point]:
        verts = self.vertices
        return min(verts, key=lambda p: p.x) if verts else None

    @property
    def max_x_point(self) -> Optional[Point]:
        verts = self.vertices
        return max(verts, key=lambda p: p.x) if verts else None

    @property
    def min_y_point(self) -> Optional[Point]:
        verts = self.vertices
        return min(verts, key=lambda p: p.y) if verts else None

    @property
    def max_y_point(self) -> Optional[Point]:
        verts = self.vertices
        return max(verts, key=lambda p: p.y) if verts else None

    @property
    def min_x(self) -> Optional[float]:
        p = self.min_x_point
        return None if p is None else p.x

    @property
    def max_x(self) -> Optional[float]:
        p = self.max_x_point
        return None if p is None else p.x

    @property
    def min_y(self) -> Optional[float]:
        p = self.min_y_point
        return None if p is None else p.y

    @property
    def max_y(self) -> Optional[float]:
        p = self.max_y_point
        return None if p is None else p.y

    @property
    def bounding_box(self):
        from .rect import Rect
        if not self.vertices:
            return None
        return Rect(Point(self.min_x, self.min_y), Point(self.max_x, self.max_y))

    @property
    def average_point(self) -> Optional[Point]:
        verts = self.vertices
        if not verts:
            return None
        arr = self.as_array()
        mean = arr.mean(axis=0)
        return Point(float(mean[0]), float(mean[1]))

    def as_array(self) -> np.ndarray:
        """Vertices as a float ``(N, 2)`` array."""
        return np.asarray([(p.x, p.y) for p in self.vertices], dtype=float).reshape(-1, 2)

    # -- bounding-box relations ---------------------------------------------
    def bounding_box_contains(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        box = self.bounding_box
        return box is not None and box.contains(point, tol)

    def bounding_box_encloses(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        box = self.bounding_box
        return box is not None and box.encloses(point, tol)

    def bounding_box_contains_bounding_box(self, other, tol: float = EPS_DEFAULT) -> bool:
        box, other_box = self.bounding_box, other.bounding_box
        if box is None or other_box is None:
            return False
        return box.contains_rect(other_box, tol)

    def bounding_box_encloses_bounding_box(self, other, tol: float = EPS_DEFAULT) -> bool:
        box, other_box = self.bounding_box, other.bounding_box
        if box is None or other_box is None:
            return False
        return box.encloses_rect(other_box, tol)

    def bounding_box_relates_to_bounding_box(self, other, tol: float = EPS_DEFAULT) -> bool:
        box, other_box = self.bounding_box, other.bounding_box
        if box is None or other_box is None:
            return False
        return box.relates_to(other_box, tol)

    # -- edge relations -----------------------------------------------------
    def intersects(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        """True if the point lies on any edge."""
        return any(edge.intersects(point, tol) for edge in self.edges)

    def intersects_geometry(self, other, tol: float = EPS_DEFAULT) -> bool:
        """True if some edge pair meets in a single point (overlaps do not count)."""
        if not self.bounding_box_relates_to_bounding_box(other, tol):
            return False
        other_edges = other.edges
        for edge in self.edges:
            for other_edge in other_edges:
                if edge.intersects_line(other_edge, tol):
                    return True
        return False

    def relates(self, other, tol: float = EPS_DEFAULT) -> bool:
        if not self.bounding_box_relates_to_bounding_box(other, tol):
            return False
        if self.intersects_geometry(other, tol):
            return True
        other_edges = other.edges
        for edge in self.edges:
            for other_edge in other_edges:
                if edge.overlaps(other_edge, tol):
                    return True
        return False

    def matches_geometry(self, other) -> bool:
        """Same vertices and the same cyclic edge sequence, in either direction."""
        verts = list(self.vertices)
        other_verts = list(other.vertices)
        n = len(verts)
        if n != len(other_verts):
            return False
        if n == 0:
            return True
        if n == 1:
            return verts[0] == other_verts[0]
        ordered = sorted(sorted(verts, key=lambda p: p.x), key=lambda p: p.y)
        other_ordered = sorted(sorted(other_verts, key=lambda p: p.x), key=lambda p: p.y)
        if any(a != b for a, b in zip(ordered, other_ordered)):
            return False
        edges = self.edges
        other_edges = other.edges
        m = len(edges)
        if m == 0 or len(other_edges) != m:
            return False
        starts = [k for k, e in enumerate(other_edges) if edges[0].matches_geometry(e)]
        for k in starts:
            if all(edges[i].matches_geometry(other_edges[(i + k) % m]) for i in range(m - 1)):
                return True
        for k in starts:
            if all(edges[i].matches_geometry(other_edges[(k - i) % m]) for i in range(m - 1)):
                return True
        return False


class PointCollection(GeometryMixin):
    """Unordered bag of points.

    Unlike the other geometries this one is mutable: ``add`` and ``remove``
    edit ``points`` directly. It has no edges.
    """

    def __init__(self, points=None):
        self.points: List[Point] = list(points or [])

    @property
    def vertices(self) -> List[Point]:
        return self.points

    @property
    def edges(self) -> list:
        return []

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def add(self, point: Point) -> None:
        self.points.append(point)

    def remove(self, index: int) -> Optional[Point]:
        if not 0 <= index < len(self.points):
            return None
        return self.points.pop(index)

    def contains_point(self, point: Point) -> bool:
        return any(p == point for p in self.points)

    def closest_point(self, to: Point) -> Optional[Point]:
        if not self.points:
            return None
        return min(self.points, key=lambda p: p.length(to))

    def furthest_point(self, to: Point) -> Optional[Point]:
        if not self.points:
            return None
        return max(self.points, key=lambda p: p.length(to))

    def sorted_by_distance(self, to: Point) -> List[Point]:
        return sorted(self.points, key=lambda p: p.length(to))

    def duplicated_points(self) -> Dict[Point, int]:
        """Map each repeated point to the number of extra occurrences.

        Keys are matched by exact coordinates (the Point hash), not by the
        tolerant equality.
        """
        seen = set()
        dupes: Dict[Point, int] = {}
        for p in self.points:
            key = p.as_tuple()
            if key in seen:
                dupes[p] = dupes.get(p, 0) + 1
            else:
                seen.add(key)
        return dupes

    def count_duplicated_points(self) -> int:
        return len(self.points) - len({p.as_tuple() for p in self.points})

    def to_string(self, decimal_places: int = 2) -> str:
        return '[' + ', '.join(p.to_string(decimal_places) for p in self.points) + ']'
