"""Open chains of vertices."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .constants import EPS_DEFAULT
from .geometry import GeometryMixin
from .linear import Segment
from .point import Point
from .polygon import Polygon, VertexSequenceMixin, as_points
from .scalar import is_greater_than_zero

__all__ = ['Polyline']

Triplet = Tuple[Point, Point, Point]


@dataclass(frozen=True, eq=False)
class Polyline(VertexSequenceMixin, GeometryMixin):
    """Open chain ``v0 -> v1 -> ... -> vn``; unlike Polygon there is no closing edge."""
    vertices: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'vertices', as_points(self.vertices))

    @property
    def edges(self) -> List[Segment]:
        verts = self.vertices
        return [Segment(verts[i], verts[i + 1]) for i in range(len(verts) - 1)]

    @property
    def triplets(self) -> List[Triplet]:
        """Consecutive ``(origin, corner, end)`` vertex triples."""
        verts = self.vertices
        return [(verts[i], verts[i + 1], verts[i + 2]) for i in range(len(verts) - 2)]

    @property
    def length(self) -> float:
        if len(self.vertices) < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(self.as_array(), axis=0), axis=1).sum())

    @property
    def is_valid(self) -> bool:
        return is_greater_than_zero(self.length)

    @property
    def closed(self) -> Polygon:
        return Polygon(self.vertices)

    def matches_geometry(self, other: 'Polyline') -> bool:
        """Same vertices in the same or reversed order."""
        verts, other_verts = self.vertices, tuple(other.vertices)
        if len(verts) != len(other_verts):
            return False
        return (
            all(a == b for a, b in zip(verts, other_verts))
            or all(a == b for a, b in zip(verts, other_verts[::-1]))
        )

    def rounded_corners(self, point_distance: float, control_point_distance: float,
                        tol: float = EPS_DEFAULT, stats=None):
        """Replace every corner with a cubic Bezier; see :func:`curvekit.core.rounding.rounded_corners`."""
        from .rounding import rounded_corners
        return rounded_corners(self, point_distance, control_point_distance, tol=tol, stats=stats)

    def bezier_corners(self, radius: float, control_point_distance: float,
                       tol: float = EPS_DEFAULT, stats=None):
        """Fixed-radius fillets; see :func:`curvekit.core.rounding.bezier_corners`."""
        from .rounding import bezier_corners
        return bezier_corners(self, radius, control_point_distance, tol=tol, stats=stats)

    def to_path(self):
        from .path import polyline_to_path
        return polyline_to_path(self)

    @classmethod
    def from_array(cls, arr, closed: Optional[bool] = False):
        """Build from an ``(N, 2)`` array-like; ``closed=True`` returns a Polygon."""
        pts = [Point(float(x), float(y)) for x, y in np.asarray(arr, dtype=float).reshape(-1, 2)]
        return Polygon(pts) if closed else cls(pts)
