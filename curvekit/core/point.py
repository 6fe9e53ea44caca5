"""2D point / vector value type."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import EPS_DEFAULT
from .scalar import is_equal, is_zero

__all__ = ['Point']


@dataclass(frozen=True, eq=False)
class Point:
    """Immutable ``(x, y)`` pair.

    ``==`` is tolerant (``EPS_DEFAULT`` on each coordinate); use
    :meth:`is_equal` to pass a different tolerance. The hash is taken from the
    raw coordinates, so two points that compare equal only through the
    tolerance may still land in different buckets of a dict or set.
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    # -- arithmetic ---------------------------------------------------------
    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Point':
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Point':
        if is_zero(scalar):
            raise ZeroDivisionError("Division by zero is illegal")
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def is_equal(self, other: 'Point', tol: float = EPS_DEFAULT) -> bool:
        return is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)

    # -- measures -----------------------------------------------------------
    def length(self, to: 'Point') -> float:
        """Euclidean distance to another point."""
        return math.hypot(to.x - self.x, to.y - self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_string(self, decimal_places: int = 2) -> str:
        return f"({round(self.x, decimal_places)}, {round(self.y, decimal_places)})"

    # -- transforms ---------------------------------------------------------
    def translate(self, offset: 'Point') -> 'Point':
        return self + offset

    def translate_center(self, to: 'Point') -> 'Point':
        return Point(to.x, to.y)

    def rotate(self, center: 'Point', angle) -> 'Point':
        """Rotate counter-clockwise around ``center`` by ``angle`` (an Angle)."""
        dx = self.x - center.x
        dy = self.y - center.y
        c = math.cos(angle.radians)
        s = math.sin(angle.radians)
        return Point(dx * c - dy * s + center.x, dx * s + dy * c + center.y)

    def scale(self, origin: 'Point', factor: float) -> 'Point':
        return Point(origin.x + (self.x - origin.x) * factor, origin.y + (self.y - origin.y) * factor)
