import pytest

from curvekit.core.linear import Segment
from curvekit.core.point import Point
from curvekit.core.polygon import Polygon
from curvekit.core.scalar import is_equal

P = Point


def poly(*coords):
    return Polygon([P(x, y) for x, y in coords])


UNIT_TRIANGLE = poly((0, 0), (1, 0), (0, 1))
UNIT_SQUARE = poly((0, 0), (1, 0), (1, 1), (0, 1))
HOUSE = poly((0, 0), (1, 0), (1, 1), (0.5, 1.5), (0, 1))
BOWTIE = poly((0, 0), (1, 1), (1, 0), (0, 1))


class TestPolygonShape:
    """Edges, validity and measures."""

    def test_edges(self):
        assert poly().edges == []
        assert poly((1, 1)).edges == []
        assert len(poly((1, 1), (2, 2)).edges) == 2
        assert len(poly((1, 1), (2, 2), (1, 2)).edges) == 3
        square = poly((1, 1), (2, 1), (2, 2), (1, 2))
        assert len(square.edges) == 4
        assert square.edges[0] == Segment(P(1, 1), P(2, 1))
        assert square.edges[-1] == Segment(P(1, 2), P(1, 1))

    def test_is_valid(self):
        assert not poly().is_valid
        assert not poly((1, 1)).is_valid
        assert not poly((1, 1), (2, 2)).is_valid
        assert UNIT_TRIANGLE.is_valid
        assert UNIT_SQUARE.is_valid
        assert not BOWTIE.is_valid
        assert not poly((0, 0), (0.5, 0.5), (1, 1), (0, 0)).is_valid

    def test_area(self):
        assert poly().area is None
        assert poly((0, 0), (1, 1)).area is None
        assert UNIT_TRIANGLE.area == 0.5
        assert UNIT_SQUARE.area == 1.0
        assert HOUSE.area == 1.25
        assert BOWTIE.area is None

    def test_area_ignores_orientation(self):
        assert UNIT_SQUARE.reversed().area == 1.0

    def test_perimeter(self):
        assert poly().perimeter is None
        assert poly((0, 0), (1, 1)).perimeter is None
        assert abs(UNIT_TRIANGLE.perimeter - 3.414213562373095) < 1e-12
        assert UNIT_SQUARE.perimeter == 4.0
        assert is_equal(HOUSE.perimeter, 4.41421)
        assert BOWTIE.perimeter is None

    def test_open(self):
        polyline = UNIT_SQUARE.open
        assert len(polyline.edges) == 3
        assert polyline.closed == UNIT_SQUARE


class TestPolygonContainsPoint:
    """Point containment, edges counted as inside."""

    def test_simple_shapes(self):
        assert not poly().contains(P(1, 1))
        triangle = poly((0, 0), (2, 0), (1, 2))
        assert triangle.contains(P(1, 1))
        assert not triangle.contains(P(-1, -1))
        square = poly((0, 0), (2, 0), (2, 2), (0, 2))
        assert square.contains(P(1, 0))
        assert square.contains(P(1, 1))
        assert not square.contains(P(3, 3))

    def test_irregular(self):
        polygon = poly((1, 0), (10, -10), (14, 4), (4, 12), (0, 4))
        assert polygon.contains(P(2, 3))
        assert not polygon.contains(P(0, 5))

    def test_edge_short_circuit_optional(self):
        square = poly((0, 0), (2, 0), (2, 2), (0, 2))
        assert square.contains(P(2, 1))
        assert not square.contains(P(2, 1), check_edges=False)
        assert square.contains(P(1, 1), check_edges=False)

    def test_invalid_with_validation(self):
        assert not BOWTIE.contains(P(0.5, 0.5), validate=True)

    @pytest.mark.parametrize("point, expected", [
        (P(2.0, 3.0), True),
        (P(2.0, 1.0), True),
        (P(2.0, 2.0), True),
        (P(2.1, 2.0), False),
        (P(3.0, 2.5), False),
        (P(3.0, 4.1), False),
    ])
    def test_concave(self, point, expected):
        polygon = poly((0, 0), (4, 0), (2, 2), (4, 4), (0, 4))
        assert polygon.contains(point) is expected

    @pytest.mark.parametrize("point, expected", [
        (P(2.0, 2.0), True),
        (P(3.0, 3.0), True),
        (P(4.0, 1.0), True),
        (P(-1.0, -1.0), False),
        (P(7.0, 3.0), False),
        (P(3.0, 5.0), True),
        (P(4.0, 0.0), True),
        (P(5.0, 4.0), False),
        (P(5.0, 0.5), False),
        (P(6.0, 2.0), True),
        (P(-1.0, 2.0), False),
        (P(5.5, 2.0), True),
    ])
    def test_convex(self, point, expected):
        polygon = poly((0, 0), (4, 0), (6, 2), (3, 5), (0, 4))
        assert polygon.contains(point) is expected

    def test_encloses_excludes_edges(self):
        square = poly((0, 0), (2, 0), (2, 2), (0, 2))
        assert square.encloses(P(1, 1))
        assert not square.encloses(P(1, 0))
        assert not square.encloses(P(0, 0))


class TestPolygonContainsGeometry:
    """Containment of one polygon in another."""

    outer = poly((0, 0), (5, 0), (5, 5), (0, 5))

    @pytest.mark.parametrize("inner, contains, encloses", [
        (poly((1, 1), (4, 1), (4, 4), (1, 4)), True, True),
        (poly((3, 3), (6, 3), (6, 6), (3, 6)), False, False),
        (poly((6, 6), (7, 6), (7, 7), (6, 7)), False, False),
        (poly((0, 0), (5, 0), (5, 5)), True, False),
        (poly((1, 1)), True, True),
        (poly((1, 1), (4, 1), (5, 2.5), (4, 4), (1, 4)), True, False),
        (poly((1, 1), (4, 1), (5, 2), (6, 2.5), (4, 3), (4, 4), (1, 4)), False, False),
    ])
    def test_against_square(self, inner, contains, encloses):
        assert self.outer.contains_geometry(inner) is contains
        assert self.outer.encloses_geometry(inner) is encloses

    def test_concave_outer_with_sticking_out_inner(self):
        v_shape = poly((-10, 0), (10, 0), (10, 10), (0, 5), (-10, 10))
        crossing = poly((-5, 2), (5, 2), (5, 6), (-5, 6))
        assert not v_shape.contains_geometry(crossing)
        assert not v_shape.encloses_geometry(crossing)


class TestPolygonOrientation:

    def test_clockwise(self):
        clockwise = poly((0, 0), (0, 1), (1, 1), (1, 0))
        assert clockwise.is_clockwise
        assert not clockwise.is_anticlockwise
        assert UNIT_SQUARE.is_anticlockwise
        assert not UNIT_SQUARE.is_clockwise
        line = poly((0, 0), (1, 1))
        assert not line.is_clockwise
        assert not line.is_anticlockwise

    def test_ordering(self):
        assert UNIT_SQUARE.ordered_clockwise().is_clockwise
        assert UNIT_SQUARE.ordered_anticlockwise() == UNIT_SQUARE


class TestPolygonEditing:
    """Geometry matching and vertex cleanup."""

    def test_matches_geometry(self):
        segment_a = poly((0, 0), (1, 1))
        assert segment_a.matches_geometry(poly((1, 1), (0, 0)))
        assert not segment_a.matches_geometry(poly((0, 0), (1.1, 1)))
        triangle = poly((0, 0), (1, 0), (1, 1))
        assert triangle.matches_geometry(poly((1, 0), (1, 1), (0, 0)))
        assert triangle.matches_geometry(triangle.reversed())
        assert not UNIT_SQUARE.matches_geometry(poly((0, 0), (1, 1), (1, 0), (0, 1)))

    def test_without_redundant_points(self):
        clean = poly((0, 0), (1, 1))
        assert clean.without_redundant_points().matches_geometry(clean)
        padded = clean.inserted(1, P(0.5, 0.5))
        assert len(padded) == 3
        assert padded.without_redundant_points().matches_geometry(clean)
        repeated = poly((0, 0), (0, 0), (0, 0), (1, 1), (0, 0))
        assert repeated.without_redundant_points().matches_geometry(poly((0, 0), (1, 1), (0, 0)))
        pair = poly((0, 0), (0, 0))
        assert pair.without_redundant_points().matches_geometry(poly((0, 0)))

    def test_without_duplicate_points(self):
        polygon = poly((0, 0), (0, 0), (0, 0), (1, 0), (0, 0))
        assert polygon.without_duplicate_points().matches_geometry(poly((0, 0), (1, 0), (0, 0)))

    def test_vertex_helpers(self):
        triangle = poly((0, 0), (1, 0), (1, 1))
        assert triangle.appended(P(0, 1)) == UNIT_SQUARE
        assert triangle.inserted(0, P(0, 1)) == poly((0, 1), (0, 0), (1, 0), (1, 1))
        assert triangle.removed(1) == poly((0, 0), (1, 1))
        assert triangle.removed(7) == triangle
        assert triangle + P(1, 1) == poly((1, 1), (2, 1), (2, 2))
        assert triangle.scale(P(), 2) == poly((0, 0), (2, 0), (2, 2))
        assert UNIT_SQUARE.translate_center(P()) == poly((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))
        assert triangle.to_string() == "[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]"
