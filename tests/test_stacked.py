import pytest

from tryoutgeom.geom import Point, Size
from tryoutgeom.stacked import DEFAULT_SPACING, layout_options, size_that_fits


def test_first_copy_is_untouched():
    offset, trim = layout_options(20)[0]
    assert offset == Point(0, 0)
    assert trim == 0


def test_trims_and_offsets():
    options = layout_options(20)
    assert [trim for _, trim in options] == [0, 2, 4, 6, 8]
    assert [offset.y for offset, _ in options] == [0, 18.5, 16.5, 14.5, 12.5]
    assert all(offset.x == 0 for offset, _ in options)


def test_line_height_is_rounded_first():
    # 19.5 rounds up to 20, so it stacks like a 20 unit line
    assert layout_options(19.5) == layout_options(20)


def test_custom_spacing():
    options = layout_options(20, spacing=0)
    assert [offset.y for offset, _ in options] == [0, 10.5, 8.5, 6.5, 4.5]


def test_short_lines_have_no_copies():
    assert layout_options(6) == []
    assert layout_options(0) == []


def test_size_that_fits():
    assert DEFAULT_SPACING == 8
    assert size_that_fits(100, 20) == Size(100, 20 + 18.5 + 16.5 + 14.5 + 12.5)
    assert size_that_fits(40, 6) == Size(40, 6)
