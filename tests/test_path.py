import math

import pytest

from tryoutgeom.geom import Point, Rect
from tryoutgeom.path import (
    EllipseShape,
    Path,
    RectangleShape,
    arc_extremes,
    arc_point,
)


def test_empty_path():
    path = Path()
    assert path.is_empty
    assert path.bounding_rect.is_null


def test_line_segment():
    path = Path.line_segment((0, 0), (10, 5))
    assert path.elements == (('move', Point(0, 0)), ('line', Point(10, 5)))
    assert path.bounding_rect == Rect(0, 0, 10, 5)
    assert Path.line_segment((3, 3), (3, 3)).is_empty


def test_circle():
    path = Path.circle((10, 20), 5)
    assert path.elements == (('ellipse', Rect(5, 15, 10, 10)),)
    assert path.bounding_rect == Rect(5, 15, 10, 10)


def test_rectangle_is_closed():
    path = Path.rectangle(Rect(10, 10, -5, 5))
    kinds = [e[0] for e in path.elements]
    assert kinds == ['move', 'line', 'line', 'line', 'close']
    assert path.elements[0] == ('move', Point(5, 10))
    assert path.bounding_rect == Rect(5, 10, 5, 5)


def test_curve_bounds_include_control_points():
    path = Path()
    path.move_to((0, 0))
    path.curve_to((10, 0), (0, -10), (10, 10))
    assert path.bounding_rect == Rect(0, -10, 10, 20)


def test_path_equality_and_add_path():
    a = Path.line_segment((0, 0), (1, 1))
    b = Path()
    b.add_path(a)
    assert a == b
    b.close_subpath()
    assert a != b


def test_arc_point():
    assert arc_point((0, 0), 2, 90).isclose(Point(0, 2), 1e-12)


def test_arc_extremes():
    points = arc_extremes((0, 0), 1, 45, 135)
    ys = [p.y for p in points]
    # sweeping through 90 degrees reaches the bottom of the circle
    assert max(ys) == pytest.approx(1)
    assert len(points) == 3

    # wrapping arcs are unrolled
    points = arc_extremes((0, 0), 1, 350, 10)
    assert len(points) == 3
    assert max(p.x for p in points) == pytest.approx(1)


class TestRoundedRect:

    def test_bounds_match_rect(self):
        rect = Rect(10, 20, 100, 50)
        path = Path.rounded_rectangle(rect, 10)
        b = path.bounding_rect
        assert (b.x, b.y, b.width, b.height) == pytest.approx((10, 20, 100, 50))

    def test_corner_arcs(self):
        path = Path.rounded_rectangle(Rect(0, 0, 100, 50), 10)
        arcs = [e for e in path.elements if e[0] == 'arc']
        assert [(a[3], a[4]) for a in arcs] == [(270, 360), (0, 90), (90, 180), (180, 270)]
        assert arcs[0][1] == Point(90, 10)

    def test_radius_is_clamped(self):
        path = Path.rounded_rectangle(Rect(0, 0, 100, 20), 50)
        arcs = [e for e in path.elements if e[0] == 'arc']
        assert all(a[2] == 10 for a in arcs)

    def test_zero_radius_is_plain_rect(self):
        rect = Rect(0, 0, 10, 10)
        assert Path.rounded_rectangle(rect, 0) == Path.rectangle(rect)


def test_shapes():
    rect = Rect(0, 0, 40, 20)
    assert RectangleShape().path(rect) == Path.rectangle(rect)
    assert EllipseShape().path(rect).elements == (('ellipse', rect),)
    assert EllipseShape().path(rect).bounding_rect == rect
