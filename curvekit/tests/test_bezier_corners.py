import math

from curvekit.core.curves import CubicBezier
from curvekit.core.linear import Segment
from curvekit.core.point import Point
from curvekit.core.polyline import Polyline
from curvekit.core.rounding import bezier_corners
from curvekit.core.stats import RoundingStats

P = Point
H = math.sqrt(0.5)


class TestBezierCorners:
    """Fixed-radius fillets along the corner bisector."""

    def test_right_angle(self):
        edges = Polyline([P(0, 0), P(10, 0), P(10, 10)]).bezier_corners(2, 1)
        assert edges.edge_count == 2
        first, second = edges
        split = P(10 - 2 * H, 2 * H)
        assert first == CubicBezier(P(0, 0), P(1, 0), split - P(H, H), split)
        assert second == CubicBezier(split, split + P(H, H), P(10, 9), P(10, 10))

    def test_split_point_is_radius_from_corner(self):
        edges = bezier_corners([P(0, 0), P(10, 0), P(10, 10), P(20, 10)], 3, 1)
        assert edges.edge_count == 3
        assert abs(edges[0].end.length(P(10, 0)) - 3.0) < 1e-9
        assert abs(edges[1].end.length(P(10, 10)) - 3.0) < 1e-9

    def test_chain_is_continuous(self):
        vertices = [P(0, 0), P(3, 4), P(8, 1), P(9, 9), P(15, 2)]
        edges = bezier_corners(vertices, 1.5, 0.5)
        assert edges.edge_count == len(vertices) - 1
        assert edges[0].origin == vertices[0]
        assert edges.last_point == vertices[-1]
        for a, b in zip(edges.edges, edges.edges[1:]):
            assert a.end == b.origin

    def test_radius_clamped_to_half_shorter_edge(self):
        stats = RoundingStats()
        edges = bezier_corners([P(0, 0), P(2, 0), P(2, 10)], 5, 1, stats=stats)
        assert abs(edges[0].end.length(P(2, 0)) - 1.0) < 1e-9
        assert stats.corners == 1
        assert stats.clamped_corners == 1
        assert abs(stats.max_reach - 1.0) < 1e-9

    def test_straight_vertex_stays_in_place(self):
        stats = RoundingStats()
        edges = bezier_corners([P(0, 0), P(5, 0), P(10, 0)], 2, 1, stats=stats)
        assert list(edges) == [
            CubicBezier(P(0, 0), P(1, 0), P(4, 0), P(5, 0)),
            CubicBezier(P(5, 0), P(6, 0), P(9, 0), P(10, 0)),
        ]
        assert stats.straight_triplets == 1
        assert stats.corners == 0

    def test_degenerate_inputs(self):
        assert bezier_corners([], 2, 1).edge_count == 0
        assert bezier_corners([P(1, 1), P(1, 1)], 2, 1).edge_count == 0
        edges = bezier_corners([P(0, 0), P(4, 0)], 2, 1)
        assert list(edges) == [Segment(P(0, 0), P(4, 0))]

    def test_reversal_does_not_fail(self):
        edges = bezier_corners([P(0, 0), P(5, 0), P(0, 0)], 1, 1)
        assert edges.edge_count == 2
        assert edges[0].end == P(4, 0)
