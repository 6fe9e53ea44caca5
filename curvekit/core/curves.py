"""Curved primitives: cubic and quadratic Beziers, circular arcs, ellipses.

All are immutable; transforms return new instances. Bezier extents are
computed from the matching :class:`matplotlib.path.Path`, which accounts for
the curve's extrema rather than just its control polygon.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np
from matplotlib.path import Path
from scipy.special import ellipe

from .angle import Angle
from .constants import EPS_DEFAULT, FULL_TURN
from .linear import Segment
from .point import Point
from .rect import Rect
from .scalar import is_equal, is_greater, is_less_than_zero, is_zero

__all__ = ['CubicBezier', 'QuadCurve', 'Arc', 'Ellipse']


def _extents(vertices: List[Point], codes: List[int]) -> Rect:
    bbox = Path(np.array([p.as_tuple() for p in vertices], dtype=float), codes).get_extents()
    return Rect(Point(bbox.x0, bbox.y0), Point(bbox.x1, bbox.y1))


@dataclass(frozen=True, eq=False)
class CubicBezier:
    origin: Point
    origin_control_point: Point
    end_control_point: Point
    end: Point

    @property
    def points(self) -> List[Point]:
        return [self.origin, self.origin_control_point, self.end_control_point, self.end]

    @property
    def length_is_zero(self) -> bool:
        """All four points coincide."""
        return all(p == self.origin for p in self.points[1:])

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter ``t`` in [0, 1] (de Casteljau)."""
        p0, p1, p2, p3 = self.points
        a, b, c = p0 + (p1 - p0) * t, p1 + (p2 - p1) * t, p2 + (p3 - p2) * t
        d, e = a + (b - a) * t, b + (c - b) * t
        return d + (e - d) * t

    @property
    def bounding_box(self) -> Rect:
        return _extents(self.points, [Path.MOVETO, Path.CURVE4, Path.CURVE4, Path.CURVE4])

    def _map(self, fn) -> 'CubicBezier':
        return CubicBezier(*(fn(p) for p in self.points))

    def translate(self, offset: Point) -> 'CubicBezier':
        return self._map(lambda p: p + offset)

    def rotate(self, center: Point, angle: Angle) -> 'CubicBezier':
        return self._map(lambda p: p.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'CubicBezier':
        return self._map(lambda p: p.scale(origin, factor))

    def __eq__(self, other) -> bool:
        if not isinstance(other, CubicBezier):
            return NotImplemented
        return all(a == b for a, b in zip(self.points, other.points))

    def __hash__(self) -> int:
        return hash(tuple(self.points))


@dataclass(frozen=True, eq=False)
class QuadCurve:
    origin: Point
    control_point: Point
    end: Point

    @property
    def points(self) -> List[Point]:
        return [self.origin, self.control_point, self.end]

    @property
    def length_is_zero(self) -> bool:
        return self.control_point == self.origin and self.end == self.origin

    def point_at(self, t: float) -> Point:
        p0, p1, p2 = self.points
        a, b = p0 + (p1 - p0) * t, p1 + (p2 - p1) * t
        return a + (b - a) * t

    @property
    def bounding_box(self) -> Rect:
        return _extents(self.points, [Path.MOVETO, Path.CURVE3, Path.CURVE3])

    def _map(self, fn) -> 'QuadCurve':
        return QuadCurve(*(fn(p) for p in self.points))

    def translate(self, offset: Point) -> 'QuadCurve':
        return self._map(lambda p: p + offset)

    def rotate(self, center: Point, angle: Angle) -> 'QuadCurve':
        return self._map(lambda p: p.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'QuadCurve':
        return self._map(lambda p: p.scale(origin, factor))

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuadCurve):
            return NotImplemented
        return all(a == b for a, b in zip(self.points, other.points))

    def __hash__(self) -> int:
        return hash(tuple(self.points))


@dataclass(frozen=True, eq=False)
class Arc:
    """Counter-clockwise circular arc from ``start_angle`` to ``end_angle``.

    Both angles are stored normalized to [0, 2*pi). The arc always runs
    counter-clockwise, so start 350 deg / end 10 deg spans 20 degrees.
    """
    center: Point
    radius: float
    start_angle: Angle
    end_angle: Angle

    def __post_init__(self):
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'start_angle', self.start_angle.normalized)
        object.__setattr__(self, 'end_angle', self.end_angle.normalized)

    def _on_circle(self, radians: float) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(radians),
            self.center.y + self.radius * math.sin(radians),
        )

    @property
    def central_angle(self) -> Angle:
        return (self.end_angle - self.start_angle).normalized

    @property
    def length(self) -> float:
        return self.radius * self.central_angle.radians

    @property
    def length_is_zero(self) -> bool:
        return is_zero(self.length)

    @property
    def circumference(self) -> float:
        return FULL_TURN * self.radius

    @property
    def start_point(self) -> Point:
        return self._on_circle(self.start_angle.radians)

    @property
    def end_point(self) -> Point:
        return self._on_circle(self.end_angle.radians)

    @property
    def chord(self) -> Segment:
        return Segment(self.start_point, self.end_point)

    @property
    def midpoint(self) -> Point:
        return self.point_at_proportion(0.5)

    def point_at_proportion(self, proportion: float) -> Point:
        """Point reached after ``proportion`` of the arc length (may exceed 1)."""
        return self._on_circle(self.start_angle.radians + self.central_angle.radians * proportion)

    @property
    def bounding_box(self) -> Rect:
        arc = Path.arc(self.start_angle.degrees, self.start_angle.degrees + self.central_angle.degrees)
        verts = [self.center + Point(x, y) * self.radius for x, y in arc.vertices]
        return _extents(verts, list(arc.codes))

    def _with_angles(self, start: Angle, end: Angle) -> 'Arc':
        return Arc(self.center, self.radius, start, end)

    def rotate_angles(self, angle: Angle) -> 'Arc':
        """Spin the arc around its own center."""
        return self._with_angles(self.start_angle + angle, self.end_angle + angle)

    def set_length(self, to: float) -> 'Arc':
        """Arc of length ``to`` from the same start.

        Lengths reduce modulo the circumference. A negative length keeps the
        magnitude but lays the arc out clockwise from the start, i.e. the new
        arc ends where this one started.
        """
        circumference = self.circumference
        if is_zero(circumference):
            return self
        length = math.fmod(to, circumference)
        if is_zero(length):
            return self._with_angles(self.start_angle, self.start_angle)
        start = self.start_angle
        sweep = Angle(abs(length) / self.radius)
        if is_less_than_zero(length):
            return self._with_angles(start - sweep, start)
        return self._with_angles(start, start + sweep)

    def adjust_length(self, by: float) -> 'Arc':
        """Grow (+) or shrink (-) the arc, keeping its start.

        Shrinking past zero flips the arc so that it ends on the original
        start angle; adjustments larger than a full turn wrap.
        """
        circumference = self.circumference
        if is_zero(circumference):
            return self
        if is_less_than_zero(self.length + by):
            if is_greater(abs(by), circumference):
                return self.adjust_length(math.fmod(by, circumference))
            remaining = circumference + math.fmod(self.length + by, circumference)
            start = self.start_angle
            return self._with_angles(start + Angle(remaining / self.radius), start)
        return self.set_length(self.length + by)

    def translate(self, offset: Point) -> 'Arc':
        return Arc(self.center + offset, self.radius, self.start_angle, self.end_angle)

    def translate_center(self, to: Point) -> 'Arc':
        return Arc(to, self.radius, self.start_angle, self.end_angle)

    def rotate(self, center: Point, angle: Angle) -> 'Arc':
        """Rigid rotation: the center moves around ``center`` and the arc turns with it."""
        return Arc(self.center.rotate(center, angle), self.radius, self.start_angle + angle, self.end_angle + angle)

    def scale(self, origin: Point, factor: float) -> 'Arc':
        return Arc(self.center.scale(origin, factor), self.radius * abs(factor), self.start_angle, self.end_angle)

    def is_equal(self, other: 'Arc', tol: float = EPS_DEFAULT) -> bool:
        return (
            self.center.is_equal(other.center, tol)
            and is_equal(self.radius, other.radius, tol)
            and self.start_angle.is_equal(other.start_angle, tol)
            and self.end_angle.is_equal(other.end_angle, tol)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash((self.center, self.radius))


@dataclass(frozen=True, eq=False)
class Ellipse:
    """Axis-aligned ellipse inscribed in ``bounding_box``."""
    bounding_box: Rect

    @property
    def is_valid(self) -> bool:
        return self.bounding_box.is_valid

    @property
    def center(self) -> Point:
        return self.bounding_box.center

    @property
    def min_radius(self) -> float:
        return min(self.bounding_box.width, self.bounding_box.height) / 2.0

    @property
    def max_radius(self) -> float:
        return max(self.bounding_box.width, self.bounding_box.height) / 2.0

    @property
    def is_circle(self) -> bool:
        return is_equal(self.bounding_box.width, self.bounding_box.height)

    @property
    def area(self) -> float:
        return math.pi * self.bounding_box.width * self.bounding_box.height / 4.0

    @property
    def circumference(self) -> float:
        """Ramanujan's first approximation."""
        a, b = self.max_radius, self.min_radius
        return math.pi * (3.0 * (a + b) - math.sqrt((3.0 * a + b) * (a + 3.0 * b)))

    @property
    def exact_circumference(self) -> float:
        """Perimeter from the complete elliptic integral of the second kind."""
        a, b = self.max_radius, self.min_radius
        if is_zero(a):
            return 0.0
        return float(4.0 * a * ellipe(1.0 - (b * b) / (a * a)))

    def translate(self, offset: Point) -> 'Ellipse':
        return Ellipse(self.bounding_box.translate(offset))

    def translate_center(self, to: Point) -> 'Ellipse':
        return Ellipse(self.bounding_box.translate_center(to))

    def rotate(self, center: Point, angle: Angle) -> 'Ellipse':
        return Ellipse(self.bounding_box.rotate(center, angle))

    def scale(self, origin: Point, factor: float) -> 'Ellipse':
        return Ellipse(self.bounding_box.scale(origin, factor))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ellipse):
            return NotImplemented
        return self.bounding_box == other.bounding_box

    def __hash__(self) -> int:
        return hash(self.bounding_box)
