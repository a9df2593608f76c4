"""Tests for the circular text layout."""

import math

import pytest

from tryoutgeom.circular import (
    CircularLayout,
    DrawingOptions,
    TextRunSlice,
    TypographicBounds,
    bounding_guides,
    draw_circular_layout,
    line_size,
    size_that_fits,
)
from tryoutgeom.geom import Point, Size


def runs(widths, height=4.0):
    result = []
    x = 0.0
    for i, w in enumerate(widths):
        result.append(TextRunSlice(w, height, Point(x, 0.0), 'r{}'.format(i)))
        x += w
    return result


class TestLineSize:

    def test_empty(self):
        assert line_size([]) == Size(0, 0)

    def test_width_is_rounded_sum(self):
        assert line_size(runs([10.4, 10.4])) == Size(21, 4)
        # half way rounds away from zero
        assert line_size(runs([10.25, 10.25])) == Size(21, 4)

    def test_height_is_tallest_run(self):
        line = [TextRunSlice(5, 3), TextRunSlice(5, 9), TextRunSlice(5, 6)]
        assert line_size(line).height == 9


class TestTypographicBounds:

    def test_ring_geometry(self):
        bounds = TypographicBounds(Size(20 * math.pi, 5))
        assert bounds.descender == pytest.approx(10)
        assert bounds.ascender == pytest.approx(15)
        assert bounds.rect.size == pytest.approx((30, 30))
        inner = bounds.inner_rect
        assert (inner.x, inner.y, inner.width, inner.height) == pytest.approx((5, 5, 20, 20))

    def test_size_that_fits(self):
        line = runs([10, 10, 10, 10])
        r = TypographicBounds(line_size(line)).ascender
        assert size_that_fits(line) == pytest.approx((2 * r, 2 * r))


class TestCircularLayout:

    def test_single_run_sits_on_top(self):
        layout = CircularLayout(runs([10]))
        (item,) = list(layout)
        r = layout.typographic_bounds.ascender
        # the run centre ends up on the vertical axis, half a line below the top
        centre = item.transform.apply(item.run_slice.rect.center)
        assert centre.isclose(Point(r, 2.0), 1e-9)

    def test_equal_runs_are_evenly_spaced(self):
        layout = CircularLayout(runs([10, 10, 10, 10]))
        r = layout.typographic_bounds.ascender
        centres = [item.transform.apply(item.run_slice.rect.center) for item in layout]
        expected = [Point(r, 2.0), Point(2 * r - 2.0, r),
                    Point(r, 2 * r - 2.0), Point(2.0, r)]
        for got, want in zip(centres, expected):
            assert got.isclose(want, 1e-9)
        for c in centres:
            assert c.distance((r, r)) == pytest.approx(r - 2.0)

    def test_angles_follow_progress(self):
        layout = CircularLayout(runs([10, 30]))
        angles = layout.angles()
        assert angles[0] == pytest.approx(0.0)
        # second run centre is at (10/2 + 30/2) / 40 of the circumference
        assert angles[1] == pytest.approx(math.pi)

    def test_start_angle(self):
        layout = CircularLayout(runs([10, 10]), start_angle=math.pi / 2)
        angles = layout.angles()
        assert angles[0] == pytest.approx(math.pi / 2)
        assert angles[1] == pytest.approx(-math.pi / 2)

    def test_layout_is_restartable(self):
        layout = CircularLayout(runs([10, 20, 5]))
        first = list(layout)
        second = list(layout)
        assert len(first) == len(layout) == 3
        assert first == second

    def test_zero_width_line(self):
        layout = CircularLayout([TextRunSlice(0, 4), TextRunSlice(0, 4)], start_angle=0.3)
        assert layout.angles() == pytest.approx([0.3, 0.3])

    def test_empty_layout(self):
        layout = CircularLayout([])
        assert list(layout) == []
        assert size_that_fits([]) == Size(0, 0)


class TestDrawing:

    def test_bounding_guides(self):
        layout = CircularLayout(runs([10, 10, 10]))
        guides = bounding_guides(layout)
        assert len(guides) == 5
        rect = layout.typographic_bounds.rect
        assert guides[0].bounding_rect == rect
        assert guides[1].elements == (('ellipse', rect),)
        assert guides[2].elements == (('ellipse', layout.typographic_bounds.inner_rect),)

    def test_draw_runs_only(self, recorder):
        layout = CircularLayout(runs([10, 10, 10]))
        draw_circular_layout(layout, recorder)
        assert recorder.kinds() == ['text', 'text', 'text']
        assert [c[1] for c in recorder.calls] == ['r0', 'r1', 'r2']

    def test_draw_with_debug_options(self, recorder):
        layout = CircularLayout(runs([10, 10]))
        options = DrawingOptions.DEBUG_BOUNDING_GUIDES | DrawingOptions.DEBUG_SLICE_BOUNDS
        draw_circular_layout(layout, recorder, options)
        kinds = recorder.kinds()
        assert kinds.count('text') == 2
        # 4 square sides + 2 axes, then 4 sides per run outline
        assert kinds.count('line') == 6 + 2 * 4
        assert kinds.count('arc') == 2


@pytest.mark.parametrize("start_angle", [math.inf, -math.inf, math.nan])
def test_non_finite_start_angle(start_angle):
    layout = CircularLayout(runs([10, 10]), start_angle=start_angle)
    items = list(layout)
    assert len(items) == 2
    for item in items:
        assert all(math.isnan(v) for v in item.transform[:4])
    assert all(math.isnan(a) for a in layout.angles())
