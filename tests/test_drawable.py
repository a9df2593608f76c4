import logging

import pytest

from tryoutgeom.affine import AffineTransform
from tryoutgeom.circular import TextRunSlice
from tryoutgeom.drawable import CURVE_STEPS, Drawable, flatten_curve
from tryoutgeom.geom import Point, Rect
from tryoutgeom.path import Path


class TestProperties:

    def test_defaults(self):
        d = Drawable()
        assert d.layer is False
        assert d.linewidth == 1.0
        assert d.linetype is False
        assert d.linecolor is False

    def test_layer(self):
        d = Drawable()
        d.layer = 'default'
        assert d.layer == 'default'
        with pytest.raises(ValueError):
            d.layer = 'nope'
        with pytest.raises(ValueError):
            d.layerlist = 'default'

    def test_linetype(self):
        d = Drawable()
        d.linetype = 'DASHED'
        assert d.linetype == 'DASHED'
        d.linetype = 'Continuous'
        assert d.linetype is False
        with pytest.raises(ValueError):
            d.linetype = 'DOTTED'

    def test_linewidth(self):
        d = Drawable()
        d.linewidth = 0
        assert d.linewidth > 0
        with pytest.raises(ValueError):
            d.linewidth = 'thick'

    @pytest.mark.parametrize("color", [False, 1, 256, 'Red', (255, 0, 10)])
    def test_good_colors(self, color):
        d = Drawable()
        d.linecolor = color
        assert d.linecolor == color

    @pytest.mark.parametrize("color", [True, -1, 257, 'puce', (256, 0, 0), (1, 2)])
    def test_bad_colors(self, color):
        with pytest.raises(ValueError):
            Drawable().linecolor = color

    def test_color_index(self):
        d = Drawable()
        assert d.color_index(False) == 256
        assert d.color_index('grey') == 8
        assert d.color_index(3) == 3
        assert d.color_index((1, 2, 3)) is None


def test_pure_virtual_methods_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="tryoutgeom.drawable"):
        Drawable().draw_line((0, 0), (1, 1))
        assert Drawable().display()
    assert "pure virtual draw_line" in caplog.text
    assert "pure virtual display" in caplog.text


class TestDrawPath:

    def test_rect(self, recorder):
        recorder.draw_path(Path.rectangle(Rect(0, 0, 10, 5)))
        assert [c[1:3] for c in recorder.calls] == [
            ((0, 0), (10, 0)), ((10, 0), (10, 5)),
            ((10, 5), (0, 5)), ((0, 5), (0, 0))]

    def test_zero_length_segments_are_skipped(self, recorder):
        path = Path()
        path.move_to((1, 1))
        path.line_to((1, 1))
        path.line_to((2, 1))
        recorder.draw_path(path)
        assert recorder.kinds() == ['line']

    def test_circle(self, recorder):
        recorder.draw_path(Path.circle((5, 5), 2))
        assert recorder.calls == [('arc', (5, 5), 2, 0.0, 360.0, False, False)]

    def test_ellipses(self, recorder):
        wide = Path()
        wide.add_ellipse(Rect(0, 0, 20, 10))
        tall = Path()
        tall.add_ellipse(Rect(0, 0, 10, 20))
        recorder.draw_path(wide)
        recorder.draw_path(tall)
        assert recorder.calls == [('ellipse', (10, 5), 10, 5, 0.0),
                                  ('ellipse', (5, 10), 10, 5, 90.0)]

    def test_degenerate_ellipse_is_skipped(self, recorder):
        path = Path()
        path.add_ellipse(Rect(0, 0, 10, 0))
        recorder.draw_path(path)
        assert recorder.calls == []

    def test_curve_is_flattened(self, recorder):
        path = Path()
        path.move_to((0, 0))
        path.curve_to((30, 0), (10, 10), (20, 10))
        recorder.draw_path(path)
        assert recorder.kinds() == ['line'] * CURVE_STEPS
        assert recorder.calls[-1][2] == pytest.approx((30, 0))

    def test_arc_joins_lines(self, recorder):
        path = Path()
        path.add_arc((0, 0), 10, 0, 90)
        path.line_to((-10, 10))
        recorder.draw_path(path)
        assert recorder.kinds() == ['arc', 'line']
        assert recorder.calls[1][1] == pytest.approx((0, 10))

    def test_bad_element(self, recorder):
        with pytest.raises(ValueError):
            recorder.draw_path(Path([('spline', Point(0, 0))]))


def test_draw_run(recorder):
    run = TextRunSlice(10, 4, Point(0, 0), 'A')
    transform = AffineTransform.rotation(0.0).concatenating(AffineTransform.translation(5, 5))
    recorder.draw_run(run, transform)
    assert recorder.calls == [('text', 'A', (5, 9), 4, 0.0)]

    recorder.draw_run(TextRunSlice(10, 4), transform)
    assert len(recorder.calls) == 1


def test_flatten_curve():
    points = flatten_curve((0, 0), (0, 0), (10, 0), (10, 0), 4)
    assert len(points) == 4
    assert points[-1] == Point(10, 0)
    assert points[1] == pytest.approx((5, 0))
