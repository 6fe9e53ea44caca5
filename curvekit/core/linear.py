"""Straight primitives: bounded :class:`Segment` and unbounded :class:`Line`.

Both are defined by two points, ``origin`` and ``end``. For a Line the pair
only fixes a point on the line and its direction. Shared slope/parallelism
logic lives in :class:`LinearMixin`; the bounded/unbounded difference shows up
in ``intersects(point)`` (a Line never bounds-checks).

A primitive whose two points coincide is *invalid* (zero length). Invalid
primitives are still accepted everywhere: they behave as a single point.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from .angle import Angle
from .constants import EPS_DEFAULT
from .geometry import GeometryMixin
from .point import Point
from .scalar import (
    is_equal, is_greater_or_equal, is_less_or_equal, is_zero, optional_equal,
)

__all__ = ['LinearMixin', 'Segment', 'Line']


class LinearMixin:
    origin: Point
    end: Point

    @property
    def gradient(self) -> Optional[float]:
        """Slope dy/dx, or None for a vertical primitive."""
        if is_equal(self.origin.x, self.end.x):
            return None
        return (self.end.y - self.origin.y) / (self.end.x - self.origin.x)

    @property
    def y_intercept(self) -> Optional[float]:
        m = self.gradient
        if m is None:
            return None
        return self.origin.y - m * self.origin.x

    @property
    def angle(self) -> Optional[Angle]:
        """Direction of origin -> end measured from the positive x axis."""
        if not self.is_valid:
            return None
        return Angle.from_points(self.origin + Point(1.0, 0.0), self.origin, self.end)

    @property
    def is_vertical(self) -> bool:
        return self.gradient is None

    @property
    def is_horizontal(self) -> bool:
        return is_equal(self.origin.y, self.end.y)

    @property
    def is_valid(self) -> bool:
        return self.origin != self.end

    @property
    def x_axis_intercept(self) -> Optional[Point]:
        return self.intersection(Line(Point(0.0, 0.0), Point(1.0, 0.0)))

    @property
    def y_axis_intercept(self) -> Optional[Point]:
        return self.intersection(Line(Point(0.0, 0.0), Point(0.0, 1.0)))

    def is_parallel(self, other: 'LinearMixin', tol: float = EPS_DEFAULT) -> bool:
        """Invalid primitives are never parallel to anything."""
        if not (self.is_valid and other.is_valid):
            return False
        m1, m2 = self.gradient, other.gradient
        if m1 is not None and m2 is not None:
            return is_equal(m1, m2, tol)
        return m1 is None and m2 is None

    def intersects_line(self, other: 'LinearMixin', tol: float = EPS_DEFAULT) -> bool:
        """True when the two primitives meet in exactly one point."""
        return self.intersection(other, tol) is not None

    def _degenerate_intersection(self, other: 'LinearMixin', tol: float):
        # returns (handled, result)
        if not self.is_valid and not other.is_valid:
            return True, (self.origin if self.origin.is_equal(other.origin, tol) else None)
        if not self.is_valid:
            return True, (self.origin if other.intersects(self.origin, tol) else None)
        if not other.is_valid:
            return True, (other.origin if self.intersects(other.origin, tol) else None)
        return False, None

    def _solve(self, other: 'LinearMixin') -> Optional[Point]:
        """Intersection of the two infinite carriers (None if both vertical)."""
        m1, m2 = self.gradient, other.gradient
        if m1 is None and m2 is None:
            return None
        if m1 is None:
            x = self.origin.x
            return Point(x, m2 * x + other.y_intercept)
        if m2 is None:
            x = other.origin.x
            return Point(x, m1 * x + self.y_intercept)
        b1, b2 = self.y_intercept, other.y_intercept
        x = (b2 - b1) / (m1 - m2)
        return Point(x, m1 * x + b1)


@dataclass(frozen=True, eq=False)
class Segment(LinearMixin, GeometryMixin):
    origin: Point = Point()
    end: Point = Point()

    @classmethod
    def from_angle(cls, origin: Point, angle: Angle, length: float) -> 'Segment':
        direction = Point(math.cos(angle.radians), math.sin(angle.radians))
        return cls(origin, origin + direction * length)

    @classmethod
    def from_gradient(cls, origin: Point, gradient: Optional[float], length: float) -> 'Segment':
        return cls.from_angle(origin, Angle.from_gradient(gradient), length)

    # -- geometry protocol --------------------------------------------------
    @property
    def vertices(self) -> List[Point]:
        return [self.origin, self.end]

    @property
    def edges(self) -> List['Segment']:
        return [self]

    @property
    def midpoint(self) -> Point:
        return Point((self.origin.x + self.end.x) / 2.0, (self.origin.y + self.end.y) / 2.0)

    @property
    def length(self) -> float:
        return self.origin.length(self.end)

    @property
    def flipped(self) -> 'Segment':
        return Segment(self.end, self.origin)

    @property
    def as_infinite_line(self) -> 'Line':
        return Line(self.origin, self.end)

    # -- length editing -----------------------------------------------------
    def _rescaled(self, proportion: float, anchor_end: bool) -> 'Segment':
        if anchor_end:
            return Segment(self.origin.scale(self.end, proportion), self.end)
        return Segment(self.origin, self.end.scale(self.origin, proportion))

    def adjust_length(self, by: float, anchor_end: bool = False) -> 'Segment':
        """Extend (+) or shorten (-) by ``by``, moving the end unless ``anchor_end``.

        Shortening past the anchor keeps going along the same carrier line.
        A zero-length segment has no direction and is returned unchanged.
        """
        if not self.is_valid:
            return self
        length = self.length
        return self._rescaled((length + by) / length, anchor_end)

    def set_length(self, to: float, anchor_end: bool = False) -> 'Segment':
        """Negative ``to`` places the moving point on the other side of the anchor."""
        if not self.is_valid:
            return self
        if is_zero(to):
            if anchor_end:
                return Segment(self.end, self.end)
            return Segment(self.origin, self.origin)
        return self._rescaled(to / self.length, anchor_end)

    def point_at_proportion(self, proportion: float) -> Point:
        if not self.is_valid:
            return self.origin
        return Point(
            self.origin.x + proportion * (self.end.x - self.origin.x),
            self.origin.y + proportion * (self.end.y - self.origin.y),
        )

    # -- predicates ---------------------------------------------------------
    def intersects(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        """Point on the segment, endpoints included."""
        m = self.gradient
        if m is not None:
            expected_y = m * (point.x - self.origin.x) + self.origin.y
            if not is_equal(expected_y, point.y, tol):
                return False
            return self.bounding_box_contains(point, tol)
        return (
            is_equal(self.origin.x, point.x, tol)
            and is_less_or_equal(point.y, max(self.origin.y, self.end.y), tol)
            and is_greater_or_equal(point.y, min(self.origin.y, self.end.y), tol)
        )

    def intersection(self, other: LinearMixin, tol: float = EPS_DEFAULT) -> Optional[Point]:
        """The single shared point, or None when disjoint or overlapping."""
        handled, result = self._degenerate_intersection(other, tol)
        if handled:
            return result
        if optional_equal(self.gradient, other.gradient, tol):
            if isinstance(other, Segment):
                return self.touching_point(other, tol)
            return None
        point = self._solve(other)
        if point is None:
            return None
        if self.intersects(point, tol) and other.intersects(point, tol):
            return point
        return None

    def overlaps(self, other: 'Segment', tol: float = EPS_DEFAULT) -> bool:
        """True when the segments share infinitely many points."""
        if not self.is_parallel(other, tol):
            return False
        if self.intersects_line(other, tol):
            return False
        return (
            self.intersects(other.origin, tol)
            or self.intersects(other.end, tol)
            or other.intersects(self.origin, tol)
            or other.intersects(self.end, tol)
        )

    def touching_point(self, other: 'Segment', tol: float = EPS_DEFAULT) -> Optional[Point]:
        """Shared endpoint when the segments meet end-to-end without overlapping.

        A zero-length segment sitting on the other's endpoint counts as
        touching. Identical segments, and collinear pairs where one runs back
        over the other, do not.
        """
        touching_origin = self.origin.is_equal(other.origin, tol) or self.origin.is_equal(other.end, tol)
        touching_end = self.end.is_equal(other.origin, tol) or self.end.is_equal(other.end, tol)
        if touching_origin and touching_end:
            if not self.is_valid:
                return self.origin
            if not other.is_valid:
                return other.origin
            return None
        same_slope = optional_equal(self.gradient, other.gradient, tol)
        if touching_origin:
            if same_slope:
                other_far = other.origin if self.origin.is_equal(other.end, tol) else other.end
                if other.bounding_box_contains(self.end, tol) or self.bounding_box_contains(other_far, tol):
                    return None
            return self.origin
        if touching_end:
            if same_slope:
                other_far = other.end if self.end.is_equal(other.origin, tol) else other.origin
                if other.bounding_box_contains(self.origin, tol) or self.bounding_box_contains(other_far, tol):
                    return None
            return self.end
        return None

    def touches(self, other: 'Segment', tol: float = EPS_DEFAULT) -> bool:
        return self.touching_point(other, tol) is not None

    def matches_geometry(self, other: 'Segment') -> bool:
        """Same two endpoints in either order."""
        return self == other or self.flipped == other

    def is_collinear(self, other: LinearMixin, tol: float = EPS_DEFAULT) -> bool:
        if isinstance(other, Line):
            if not self.is_valid:
                return other.intersects(self.origin, tol)
            return self.is_parallel(other, tol) and other.intersects(self.origin, tol)
        if not self.is_valid and not other.is_valid:
            return self.origin.is_equal(other.origin, tol)
        if not self.is_valid:
            return other.intersects(self.origin, tol)
        if not other.is_valid:
            return self.intersects(other.origin, tol)
        return self.as_infinite_line.is_equal(other.as_infinite_line, tol)

    # -- transforms ---------------------------------------------------------
    def translate(self, offset: Point) -> 'Segment':
        return Segment(self.origin + offset, self.end + offset)

    def translate_center(self, to: Point) -> 'Segment':
        return self.translate(to - self.midpoint)

    def rotate(self, center: Point, angle: Angle) -> 'Segment':
        return Segment(self.origin.rotate(center, angle), self.end.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'Segment':
        return Segment(self.origin.scale(origin, factor), self.end.scale(origin, factor))

    def to_string(self, decimal_places: int = 2) -> str:
        return f"{self.origin.to_string(decimal_places)} -> {self.end.to_string(decimal_places)}"

    def __add__(self, offset: Point) -> 'Segment':
        return self.translate(offset)

    def __sub__(self, offset: Point) -> 'Segment':
        return self.translate(-offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.origin == other.origin and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.origin, self.end))


@dataclass(frozen=True, eq=False)
class Line(LinearMixin):
    """Infinite line through ``origin`` in the direction of ``end``."""
    origin: Point = Point()
    end: Point = Point(1.0, 0.0)

    @classmethod
    def from_angle(cls, point: Point, angle: Angle) -> 'Line':
        return cls(point, point + Point(math.cos(angle.radians), math.sin(angle.radians)))

    @classmethod
    def from_gradient(cls, point: Point, gradient: Optional[float]) -> 'Line':
        if gradient is None:
            return cls(point, point + Point(0.0, 1.0))
        return cls(point, point + Point(1.0, gradient))

    def intersects(self, point: Point, tol: float = EPS_DEFAULT) -> bool:
        m = self.gradient
        if m is None:
            return is_equal(point.x, self.origin.x, tol)
        return is_equal(point.y, m * point.x + self.y_intercept, tol)

    def intersection(self, other: LinearMixin, tol: float = EPS_DEFAULT) -> Optional[Point]:
        if self.is_parallel(other, tol):
            return None
        handled, result = self._degenerate_intersection(other, tol)
        if handled:
            return result
        point = self._solve(other)
        if point is None:
            return None
        if isinstance(other, Segment) and not other.intersects(point, tol):
            return None
        return point

    def is_equal(self, other: 'Line', tol: float = EPS_DEFAULT) -> bool:
        """Same carrier: parallel and passing through the other's origin."""
        return self.is_parallel(other, tol) and self.intersects(other.origin, tol)

    def translate(self, offset: Point) -> 'Line':
        return Line(self.origin + offset, self.end + offset)

    def translate_to_intersect(self, point: Point) -> 'Line':
        """Move the line, keeping its direction, so that it passes through ``point``."""
        return Line(point, point + self.end - self.origin)

    def translate_center(self, to: Point) -> 'Line':
        return self.translate_to_intersect(to)

    def rotate(self, center: Point, angle: Angle) -> 'Line':
        return Line(self.origin.rotate(center, angle), self.end.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'Line':
        # an infinite line has no length to scale
        return self

    def to_string(self, decimal_places: int = 2) -> str:
        return f"Line through {self.origin.to_string(decimal_places)} -> {self.end.to_string(decimal_places)}"

    def __add__(self, offset: Point) -> 'Line':
        return self.translate(offset)

    def __sub__(self, offset: Point) -> 'Line':
        return self.translate(-offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.is_equal(other)

    # equal lines can be built from any two points on them
    __hash__ = None
