"""Circular text layout.

Lays a single line of measured text runs around a circle.  The line is
first measured as if set straight (``line_size``); its width becomes
the circumference of the inner (descender) circle and its height the
thickness of the ring the text occupies.  Each run is then given a 2D
affine transform that stands it upright on the outer circle at the
angle matching its position along the straight line.

The host text system supplies the runs; this module only computes
where they go.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence

from tryoutgeom.affine import AffineTransform
from tryoutgeom.geom import ORIGIN, Point, Rect, Size, pi2, rounded
from tryoutgeom.path import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRunSlice:
    """A measured, indivisible piece of shaped text.

    ``width`` is the typographic advance, ``height`` the line height
    (ascent plus descent) and ``origin`` the top-left corner of its
    typographic bounds in the host's line coordinates.  ``content`` is
    passed through untouched.
    """

    width: float
    height: float
    origin: Point = ORIGIN
    content: Any = None

    @property
    def rect(self) -> Rect:
        return Rect(self.origin[0], self.origin[1], self.width, self.height)

    @property
    def mid_x(self) -> float:
        return self.rect.mid_x

    @property
    def mid_y(self) -> float:
        return self.rect.mid_y


def line_size(runs: Sequence[TextRunSlice]) -> Size:
    """Size of the runs set on one straight line.

    The width is the summed advance rounded to whole units, the height
    the tallest run (zero when there are no runs).
    """
    width = rounded(sum(run.width for run in runs))
    height = max((run.height for run in runs), default=0.0)
    return Size(width, height)


@dataclass(frozen=True)
class TypographicBounds:
    """Ring geometry derived from a straight line's size."""

    line_size: Size

    @property
    def descender(self) -> float:
        """Radius of the circle tangent to the bottom of the runs."""
        return self.line_size.width / pi2

    @property
    def ascender(self) -> float:
        """Radius of the circle tangent to the top of the runs."""
        return self.descender + self.line_size.height

    @property
    def rect(self) -> Rect:
        return Rect(0.0, 0.0, 2 * self.ascender, 2 * self.ascender)

    @property
    def inner_rect(self) -> Rect:
        h = self.line_size.height
        return self.rect.inset_by(h, h)


@dataclass(frozen=True)
class CircularLayoutSlice:
    run_slice: TextRunSlice
    transform: AffineTransform


class DrawingOptions(enum.IntFlag):
    NONE = 0
    DEBUG_BOUNDING_GUIDES = 1 << 0
    DEBUG_SLICE_BOUNDS = 1 << 1


class CircularLayout:
    """Restartable sequence of ``CircularLayoutSlice`` values.

    Every call to ``iter()`` recomputes the placement from the start,
    so the layout can be walked any number of times.  The angle is
    measured from the top of the circle and grows clockwise on screen.
    """

    def __init__(self, runs: Sequence[TextRunSlice], start_angle: float = 0.0):
        self.runs: List[TextRunSlice] = list(runs)
        self.start_angle = start_angle
        self.typographic_bounds = TypographicBounds(line_size(self.runs))

    def __repr__(self):
        return 'CircularLayout({} runs, start_angle={})'.format(len(self.runs),
                                                                self.start_angle)

    def __len__(self):
        return len(self.runs)

    def __iter__(self) -> Iterator[CircularLayoutSlice]:
        radius = self.typographic_bounds.ascender
        line_width = self.typographic_bounds.line_size.width
        if line_width == 0 and self.runs:
            logger.debug('zero-width line, placing every run at the start angle')
        if not math.isfinite(self.start_angle):
            logger.debug('non-finite start angle %r, run transforms will be NaN',
                         self.start_angle)

        offset = 0.0
        for index, run in enumerate(self.runs):
            # centre the first run on the start angle
            if index == 0:
                offset -= run.width / 2

            if line_width == 0:
                progress = 0.0
            else:
                progress = (offset + run.width / 2) / line_width
            angle = self.start_angle + pi2 * progress

            transform = AffineTransform.identity()
            for step in (
                    AffineTransform.translation(-run.mid_x, -run.mid_y),
                    AffineTransform.translation(0.0, -(radius - run.height / 2)),
                    AffineTransform.rotation(angle),
                    AffineTransform.translation(radius, radius)):
                transform = transform.concatenating(step)

            yield CircularLayoutSlice(run, transform)

            offset += run.width

    def angles(self) -> List[float]:
        """Angle of every run, in layout order."""
        result = []
        for item in self:
            t = item.transform
            result.append(math.atan2(t.b, t.a))
        return result


def size_that_fits(runs: Sequence[TextRunSlice]) -> Size:
    return TypographicBounds(line_size(runs)).rect.size


def bounding_guides(layout: CircularLayout) -> List[Path]:
    """Debug guides: bounding square, outer and inner circles, axes."""
    bounds = layout.typographic_bounds
    rect = bounds.rect

    guides = [Path.rectangle(rect)]

    outer = Path()
    outer.add_ellipse(rect)
    guides.append(outer)

    inner = Path()
    inner.add_ellipse(bounds.inner_rect)
    guides.append(inner)

    guides.append(Path.line_segment(Point(rect.mid_x, rect.min_y),
                                    Point(rect.mid_x, rect.max_y)))
    guides.append(Path.line_segment(Point(rect.min_x, rect.mid_y),
                                    Point(rect.max_x, rect.mid_y)))
    return guides


def slice_outline(item: CircularLayoutSlice) -> Path:
    """Transformed typographic bounds of a placed run."""
    r = item.run_slice.rect
    corners = [Point(r.min_x, r.min_y), Point(r.max_x, r.min_y),
               Point(r.max_x, r.max_y), Point(r.min_x, r.max_y)]
    corners = [item.transform.apply(p) for p in corners]
    path = Path()
    path.move_to(corners[0])
    for p in corners[1:]:
        path.line_to(p)
    path.close_subpath()
    return path


def draw_circular_layout(layout: CircularLayout, drawable,
                         options: Optional[DrawingOptions] = None):
    """Hand every placed run, and optional debug guides, to ``drawable``."""
    options = DrawingOptions.NONE if options is None else options

    if options & DrawingOptions.DEBUG_BOUNDING_GUIDES:
        for guide in bounding_guides(layout):
            drawable.draw_path(guide)

    for item in layout:
        if options & DrawingOptions.DEBUG_SLICE_BOUNDS:
            drawable.draw_path(slice_outline(item))
        drawable.draw_run(item.run_slice, item.transform)
