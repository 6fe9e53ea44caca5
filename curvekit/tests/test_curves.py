import math

import pytest

from curvekit.core.angle import Angle
from curvekit.core.curves import Arc, CubicBezier, Ellipse, QuadCurve
from curvekit.core.point import Point
from curvekit.core.rect import Rect
from curvekit.core.scalar import is_equal

P = Point
deg = Angle.from_degrees


class TestBeziers:
    """Evaluation, extents and transforms of Bezier curves."""

    def test_cubic_point_at(self):
        curve = CubicBezier(P(0, 0), P(0, 1), P(1, 1), P(1, 0))
        assert curve.point_at(0.0) == P(0, 0)
        assert curve.point_at(1.0) == P(1, 0)
        assert curve.point_at(0.5) == P(0.5, 0.75)

    def test_cubic_bounding_box_follows_the_curve(self):
        box = CubicBezier(P(0, 0), P(0, 1), P(1, 1), P(1, 0)).bounding_box
        assert abs(box.min_x) < 1e-9 and abs(box.max_x - 1) < 1e-9
        assert abs(box.min_y) < 1e-9
        # the control points reach y=1 but the curve peaks at 0.75
        assert abs(box.max_y - 0.75) < 1e-9

    def test_quad(self):
        curve = QuadCurve(P(0, 0), P(1, 2), P(2, 0))
        assert curve.point_at(0.5) == P(1, 1)
        assert abs(curve.bounding_box.max_y - 1.0) < 1e-9
        assert not curve.length_is_zero
        assert QuadCurve(P(1, 1), P(1, 1), P(1, 1)).length_is_zero

    def test_length_is_zero(self):
        assert CubicBezier(P(2, 2), P(2, 2), P(2, 2), P(2, 2)).length_is_zero
        assert not CubicBezier(P(2, 2), P(2, 2), P(2, 2), P(2, 3)).length_is_zero

    def test_transforms(self):
        curve = CubicBezier(P(0, 0), P(1, 0), P(2, 0), P(3, 0))
        assert curve.translate(P(0, 1)) == CubicBezier(P(0, 1), P(1, 1), P(2, 1), P(3, 1))
        assert curve.scale(P(), 2).end == P(6, 0)
        assert curve.rotate(P(), deg(90)).end == P(0, 3)
        quad = QuadCurve(P(0, 0), P(1, 1), P(2, 0))
        assert quad.translate(P(1, 0)) == QuadCurve(P(1, 0), P(2, 1), P(3, 0))

    def test_equality_is_per_kind(self):
        cubic = CubicBezier(P(0, 0), P(1, 1), P(1, 1), P(2, 0))
        assert cubic == CubicBezier(P(0, 0), P(1, 1), P(1, 1), P(2, 0))
        assert cubic != CubicBezier(P(0, 0), P(1, 1), P(1, 1.5), P(2, 0))
        assert cubic != QuadCurve(P(0, 0), P(1, 1), P(2, 0))


class TestArc:
    """Circular arcs running counter-clockwise."""

    def test_start_end_points(self):
        arc = Arc(P(), 10.0, deg(0), deg(90))
        assert arc.start_point == P(10, 0)
        assert arc.end_point == P(0, 10)
        arc = Arc(P(5, 10), 1.0, deg(-90), deg(180))
        assert arc.start_point == P(5, 9)
        assert arc.end_point == P(4, 10)

    @pytest.mark.parametrize("start, end, central", [
        (0, 0, 0), (10, 50, 40), (350, 10, 20), (0, 270, 270), (0, 360, 0),
        (-90, 90, 180), (-45, 45, 90), (120, 60, 300), (720, 1080, 0),
    ])
    def test_central_angle(self, start, end, central):
        assert Arc(P(), 1.0, deg(start), deg(end)).central_angle == deg(central)

    def test_measures(self):
        arc = Arc(P(), 2.0, deg(0), deg(90))
        assert is_equal(arc.length, math.pi)
        assert is_equal(arc.circumference, 4 * math.pi)
        assert arc.chord.length == pytest.approx(2 * math.sqrt(2))
        assert Arc(P(), 1.0, deg(30), deg(30)).length_is_zero

    def test_midpoint(self):
        assert Arc(P(), 1, deg(90), deg(270)).midpoint == P(-1, 0)

    def test_point_at_proportion(self):
        arc = Arc(P(), 1, deg(45), deg(225))
        assert arc.point_at_proportion(0.0) == arc.start_point
        assert arc.point_at_proportion(0.25) == P(0, 1)
        assert arc.point_at_proportion(0.75) == P(-1, 0)
        assert arc.point_at_proportion(1.0) == arc.end_point
        assert arc.point_at_proportion(1.25) == P(0, -1)

    def test_adjust_length(self):
        arc = Arc(P(), 5, deg(20), deg(90))
        length = arc.length

        longer = arc.adjust_length(2.0)
        assert is_equal(longer.length, length + 2.0)
        assert longer.start_angle == arc.start_angle

        shorter = arc.adjust_length(-2.0)
        assert is_equal(shorter.length, length - 2.0)
        assert shorter.start_angle == arc.start_angle

        wrapped = arc.adjust_length(arc.circumference + 1.0)
        assert is_equal(wrapped.length, length + 1.0)
        assert wrapped.start_angle == arc.start_angle

        inverted = arc.adjust_length(-10.0)
        assert is_equal(inverted.length, abs(length - 10.0))
        assert inverted.end_angle == arc.start_angle

        wrapped_back = arc.adjust_length(-arc.circumference - 1.0)
        assert is_equal(wrapped_back.length, length - 1.0)
        assert wrapped_back.start_angle == arc.start_angle

    def test_set_length(self):
        arc = Arc(P(), 5, deg(20), deg(90))
        for to in (1.0, arc.circumference + 1.0):
            updated = arc.set_length(to)
            assert is_equal(updated.length, 1.0)
            assert updated.start_angle == arc.start_angle
        for to in (-1.0, -arc.circumference - 1.0):
            updated = arc.set_length(to)
            assert is_equal(updated.length, 1.0)
            assert updated.end_angle == arc.start_angle

    def test_zero_radius_is_unchanged(self):
        arc = Arc(P(1, 1), 0.0, deg(0), deg(90))
        assert arc.adjust_length(3.0) == arc
        assert arc.set_length(3.0) == arc

    def test_bounding_box(self):
        box = Arc(P(), 1.0, deg(0), deg(90)).bounding_box
        assert abs(box.min_x) < 1e-3 and abs(box.min_y) < 1e-3
        assert abs(box.max_x - 1) < 1e-3 and abs(box.max_y - 1) < 1e-3

    def test_transforms(self):
        arc = Arc(P(1, 0), 1.0, deg(0), deg(90))
        rotated = arc.rotate(P(), deg(90))
        assert rotated.center == P(0, 1)
        assert rotated.start_point == arc.start_point.rotate(P(), deg(90))
        assert rotated.end_point == arc.end_point.rotate(P(), deg(90))
        assert arc.rotate_angles(deg(90)) == Arc(P(1, 0), 1.0, deg(90), deg(180))
        assert arc.scale(P(), 2).radius == 2.0
        assert arc.translate(P(1, 1)).center == P(2, 1)
        assert arc.translate_center(P(5, 5)).center == P(5, 5)

    def test_angles_are_normalized(self):
        arc = Arc(P(), 1.0, deg(-90), deg(450))
        assert arc.start_angle == deg(270)
        assert arc.end_angle == deg(90)


class TestEllipse:
    """Axis-aligned ellipses."""

    def test_circumference(self):
        ellipse = Ellipse(Rect.from_center(P(), 20, 10))
        assert abs(ellipse.circumference - 48.44) < 1e-2
        assert abs(ellipse.exact_circumference - 48.44) < 1e-2
        empty = Ellipse(Rect.from_bounds(0, 0, 0, 0))
        assert abs(empty.circumference) < 1e-12
        assert empty.exact_circumference == 0.0

    def test_circle(self):
        circle = Ellipse(Rect.from_center(P(1, 1), 4, 4))
        assert circle.is_circle
        assert circle.center == P(1, 1)
        assert circle.min_radius == circle.max_radius == 2.0
        assert is_equal(circle.circumference, 4 * math.pi)
        assert is_equal(circle.exact_circumference, 4 * math.pi)
        assert is_equal(circle.area, 4 * math.pi)

    def test_validity_and_transforms(self):
        ellipse = Ellipse(Rect.from_center(P(), 20, 10))
        assert ellipse.is_valid
        assert not Ellipse(Rect()).is_valid
        assert ellipse.translate_center(P(3, 3)).center == P(3, 3)
        assert ellipse.scale(P(), 0.5) == Ellipse(Rect.from_center(P(), 10, 5))
