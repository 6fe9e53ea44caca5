"""Axis-aligned rectangle."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .constants import EPS_DEFAULT
from .geometry import GeometryMixin
from .linear import Segment
from .point import Point
from .scalar import is_greater, is_greater_or_equal, is_less, is_less_or_equal

__all__ = ['Rect']


@dataclass(frozen=True, eq=False)
class Rect(GeometryMixin):
    """Rectangle spanned by ``origin`` (bottom-left) and ``end`` (top-right)."""
    origin: Point = Point()
    end: Point = Point()

    @classmethod
    def from_bounds(cls, min_x: float, max_x: float, min_y: float, max_y: float) -> 'Rect':
        return cls(Point(min_x, min_y), Point(max_x, max_y))

    @classmethod
    def from_center(cls, center: Point, width: float, height: float) -> 'Rect':
        half = Point(width / 2.0, height / 2.0)
        return cls(center - half, center + half)

    @classmethod
    def from_size(cls, origin: Point, width: float, height: float) -> 'Rect':
        return cls(origin, origin + Point(width, height))

    # -- corners and edges --------------------------------------------------
    @property
    def bottom_left(self) -> Point:
        return self.origin

    @property
    def top_left(self) -> Point:
        return self.origin + Point(0.0, self.height)

    @property
    def top_right(self) -> Point:
        return self.end

    @property
    def bottom_right(self) -> Point:
        return self.origin + Point(self.width, 0.0)

    @property
    def vertices(self) -> List[Point]:
        return [self.bottom_left, self.top_left, self.top_right, self.bottom_right]

    @property
    def edges(self) -> List[Segment]:
        v = self.vertices
        return [Segment(v[i], v[(i + 1) % 4]) for i in range(4)]

    # -- measures -----------------------------------------------------------
    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_x(self) -> float:
        return self.end.x

    @property
    def max_y(self) -> float:
        return self.end.y

    @property
    def bounding_box(self) -> 'Rect':
        return self

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return 2.0 * self.width + 2.0 * self.height

    @property
    def is_valid(self) -> bool:
        return is_less(self.min_y, self.max_y) and is_less(self.min_x, self.max_x)

    # -- point / rect containment -------------------------------------------
    def contains(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        """Point inside or on an edge."""
        return (
            is_less_or_equal(point.x, self.max_x, tol)
            and is_greater_or_equal(point.x, self.min_x, tol)
            and is_less_or_equal(point.y, self.max_y, tol)
            and is_greater_or_equal(point.y, self.min_y, tol)
        )

    def encloses(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        """Point strictly inside."""
        return (
            is_less(point.x, self.max_x, tol)
            and is_greater(point.x, self.min_x, tol)
            and is_less(point.y, self.max_y, tol)
            and is_greater(point.y, self.min_y, tol)
        )

    def contains_rect(self, other: 'Rect', tol: float = EPS_DEFAULT) -> bool:
        return (
            is_less_or_equal(other.max_x, self.max_x, tol)
            and is_greater_or_equal(other.min_x, self.min_x, tol)
            and is_less_or_equal(other.max_y, self.max_y, tol)
            and is_greater_or_equal(other.min_y, self.min_y, tol)
        )

    def encloses_rect(self, other: 'Rect', tol: float = EPS_DEFAULT) -> bool:
        return (
            is_less(other.max_x, self.max_x, tol)
            and is_greater(other.min_x, self.min_x, tol)
            and is_less(other.max_y, self.max_y, tol)
            and is_greater(other.min_y, self.min_y, tol)
        )

    def contains_geometry(self, geometry, tol: float = EPS_DEFAULT) -> bool:
        if not self.is_valid:
            return False
        box = geometry.bounding_box
        if box is None or not self.contains_rect(box, tol):
            return False
        return all(self.contains(v, tol) for v in geometry.vertices)

    def encloses_geometry(self, geometry, tol: float = EPS_DEFAULT) -> bool:
        if not self.is_valid:
            return False
        box = geometry.bounding_box
        if box is None or not self.encloses_rect(box, tol):
            return False
        return all(self.encloses(v, tol) for v in geometry.vertices)

    # -- rect relations -----------------------------------------------------
    def union(self, other: 'Rect') -> 'Rect':
        return Rect.from_bounds(
            min(self.min_x, other.min_x), max(self.max_x, other.max_x),
            min(self.min_y, other.min_y), max(self.max_y, other.max_y),
        )

    def overlap(self, other: 'Rect', tol: float = EPS_DEFAULT) -> Optional['Rect']:
        """Shared region with positive area, or None (edge contact is not overlap)."""
        lo_x, hi_x = max(self.min_x, other.min_x), min(self.max_x, other.max_x)
        lo_y, hi_y = max(self.min_y, other.min_y), min(self.max_y, other.max_y)
        if not (is_less(lo_x, hi_x, tol) and is_less(lo_y, hi_y, tol)):
            return None
        return Rect.from_bounds(lo_x, hi_x, lo_y, hi_y)

    def _corners_touch(self, other: 'Rect', tol: float) -> bool:
        return (
            self.top_right.is_equal(other.bottom_left, tol)
            or self.bottom_left.is_equal(other.top_right, tol)
            or self.top_left.is_equal(other.bottom_right, tol)
            or self.bottom_right.is_equal(other.top_left, tol)
        )

    def intersects_rect(self, other: 'Rect', tol: float = EPS_DEFAULT) -> bool:
        """Boundaries cross, or the rectangles meet at a single corner."""
        if (
            self.overlap(other, tol) is not None
            and not self.contains_rect(other, tol)
            and not other.contains_rect(self, tol)
        ):
            return True
        return self._corners_touch(other, tol)

    def touches(self, other: 'Rect', tol: float = EPS_DEFAULT) -> bool:
        """Some pair of edges overlaps, or the rectangles meet at a corner."""
        other_edges = other.edges
        for edge in self.edges:
            for other_edge in other_edges:
                if edge.overlaps(other_edge, tol):
                    return True
        return self._corners_touch(other, tol)

    def relates_to(self, other: 'Rect', tol: float = EPS_DEFAULT) -> bool:
        return (
            self.intersects_rect(other, tol)
            or self.touches(other, tol)
            or self.encloses_rect(other, tol)
            or other.encloses_rect(self, tol)
        )

    # -- resizing and transforms --------------------------------------------
    def expand(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0) -> 'Rect':
        return Rect(
            Point(self.origin.x - left, self.origin.y - bottom),
            Point(self.end.x + right, self.end.y + top),
        )

    def expand_all_sides(self, amount: float) -> 'Rect':
        return self.expand(amount, amount, amount, amount)

    def translate(self, offset: Point) -> 'Rect':
        return Rect(self.origin + offset, self.end + offset)

    def translate_center(self, to: Point) -> 'Rect':
        return self.translate(to - self.center)

    def rotate(self, center: Point, angle) -> 'Rect':
        """Rotate the rectangle's center; the rectangle stays axis-aligned."""
        return Rect.from_center(self.center.rotate(center, angle), self.width, self.height)

    def scale(self, origin: Point, factor: float) -> 'Rect':
        return Rect(self.origin.scale(origin, factor), self.end.scale(origin, factor))

    def to_string(self, decimal_places: int = 2) -> str:
        return (
            f"Rect(x={round(self.min_x, decimal_places)}..{round(self.max_x, decimal_places)}, "
            f"y={round(self.min_y, decimal_places)}..{round(self.max_y, decimal_places)})"
        )

    def __add__(self, offset: Point) -> 'Rect':
        return self.translate(offset)

    def __sub__(self, offset: Point) -> 'Rect':
        return self.translate(-offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.origin == other.origin and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.origin, self.end))
