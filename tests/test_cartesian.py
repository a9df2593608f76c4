import math

import pytest

from tryoutgeom.cartesian import CartesianSystem, Cursor, orbit_radius, rotation_about
from tryoutgeom.geom import Point, Rect, Size


class TestCursor:

    def test_marks_pass_through_middle(self):
        assert list(Cursor(100, 20)) == [10, 30, 50, 70, 90]
        assert list(Cursor(100, 30)) == [20, 50, 80]

    def test_marks_reach_both_ends(self):
        assert list(Cursor(100, 50)) == [0, 50, 100]

    def test_cursor_is_restartable(self):
        c = Cursor(60, 25)
        assert list(c) == list(c) == [5, 30, 55]

    @pytest.mark.parametrize("stride", [0, -10, math.nan])
    def test_bad_stride_gives_nothing(self, stride):
        assert list(Cursor(100, stride)) == []


class TestCartesianSystem:

    def test_center_is_relative(self):
        system = CartesianSystem(Size(10, 10), Rect(30, 40, 100, 60))
        assert system.center == Point(50, 30)

    def test_grid_segments(self):
        system = CartesianSystem(Size(50, 30), Rect(10, 20, 100, 60))
        segments = system.grid_segments()
        verticals = [(Point(10 + d, 20), Point(10 + d, 80)) for d in (0, 50, 100)]
        horizontals = [(Point(10, 20 + d), Point(110, 20 + d)) for d in (0, 30, 60)]
        assert segments == verticals + horizontals

    def test_axes_segments(self):
        system = CartesianSystem(Size(50, 30), Rect(10, 20, 100, 60))
        y_axis, x_axis = system.axes_segments()
        assert y_axis == (Point(60, 20), Point(60, 80))
        assert x_axis == (Point(10, 50), Point(110, 50))


def test_rotation_about_keeps_pivot():
    t = rotation_about(math.pi / 2, (50, 50))
    assert t.apply((50, 50)).isclose(Point(50, 50), 1e-12)
    assert t.apply((60, 50)).isclose(Point(50, 60), 1e-12)


def test_orbit_radius():
    assert orbit_radius((30, 40), Rect(0, 0, 10, 10)) == pytest.approx(50)
    assert orbit_radius((5, 5), Rect(5, 5, 1, 1)) == 0
