"""Angle value type (radians, with degree helpers)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .constants import EPS_DEFAULT, FULL_TURN, QUARTER_TURN
from .scalar import is_equal, is_less_than_zero

__all__ = ['Angle']


@dataclass(frozen=True, eq=False)
class Angle:
    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        return cls(degrees * math.pi / 180.0)

    @classmethod
    def from_gradient(cls, gradient: Optional[float]) -> 'Angle':
        """Angle of a slope; ``None`` (vertical) maps to a quarter turn."""
        if gradient is None:
            return cls(QUARTER_TURN)
        return cls(math.atan(gradient))

    @classmethod
    def from_points(cls, point1, vertex, point2) -> 'Angle':
        """Counter-clockwise angle swept from ``point1`` to ``point2`` around
        ``vertex``, in ``[0, 2*pi)``.
        """
        angle1 = math.atan2(point1.y - vertex.y, point1.x - vertex.x)
        angle2 = math.atan2(point2.y - vertex.y, point2.x - vertex.x)
        angle = angle2 - angle1
        if is_less_than_zero(angle):
            angle += FULL_TURN
        return cls(angle)

    @property
    def degrees(self) -> float:
        return self.radians * 180.0 / math.pi

    @property
    def normalized(self) -> 'Angle':
        result = math.fmod(self.radians, FULL_TURN)
        if is_less_than_zero(result):
            result += FULL_TURN
        if is_equal(result, FULL_TURN):
            result = 0.0
        return Angle(result)

    @property
    def gradient(self) -> Optional[float]:
        if is_equal(self.normalized.radians, QUARTER_TURN):
            return None
        return math.tan(self.radians)

    def is_equivalent(self, other: 'Angle', tol: float = EPS_DEFAULT) -> bool:
        return self.normalized.is_equal(other.normalized, tol)

    def is_equal(self, other: 'Angle', tol: float = EPS_DEFAULT) -> bool:
        return is_equal(self.radians, other.radians, tol)

    def to_string(self, decimal_places: int = 2) -> str:
        return f"{round(self.degrees, decimal_places)} deg"

    def __add__(self, other: 'Angle') -> 'Angle':
        return Angle(self.radians + other.radians)

    def __sub__(self, other: 'Angle') -> 'Angle':
        return Angle(self.radians - other.radians)

    def __mul__(self, scalar: float) -> 'Angle':
        return Angle(self.radians * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Angle':
        return Angle(self.radians / scalar)

    def __neg__(self) -> 'Angle':
        return Angle(-self.radians)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self.radians)
