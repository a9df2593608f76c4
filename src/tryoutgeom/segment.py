"""Chords of rectangles: dividing segments at an angle or a distance.

Both operations return a ``(start, end)`` pair of points.  Degenerate
input (an empty or infinite rectangle, an undefined angle) yields the
zero pair rather than an error, so callers can stroke the result
unconditionally.
"""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import List

from tryoutgeom.geom import (
    ORIGIN,
    Point,
    Rect,
    RectEdge,
    Segment,
    close,
    epsilon,
    is_even_multiple,
    is_odd_multiple,
)

logger = logging.getLogger(__name__)

_ZERO_SEGMENT: Segment = (ORIGIN, ORIGIN)


def _horizontal_diameter(rect: Rect) -> Segment:
    return Point(rect.min_x, rect.mid_y), Point(rect.max_x, rect.mid_y)


def _vertical_diameter(rect: Rect) -> Segment:
    return Point(rect.mid_x, rect.min_y), Point(rect.mid_x, rect.max_y)


def segment_dividing_at_angle(rect: Rect, angle: float) -> Segment:
    """Return the chord cut from ``rect`` by the line through its centre
    at ``angle`` radians from the positive x axis.

    Angles where the tangent is zero or undefined are resolved exactly
    to the horizontal or vertical diameter before the general
    computation runs.
    """

    if rect.is_empty:
        return _ZERO_SEGMENT

    if rect.is_infinite:
        return _ZERO_SEGMENT

    # tan is undefined for NaN and infinite angles
    if math.isnan(angle) or math.isinf(angle):
        return _ZERO_SEGMENT

    if angle == 0:
        return _horizontal_diameter(rect)

    if is_odd_multiple(angle, math.pi):
        return _horizontal_diameter(rect)

    # every k*pi is an even multiple of pi/2
    if is_even_multiple(angle, math.pi / 2):
        return _horizontal_diameter(rect)

    if is_odd_multiple(angle, math.pi / 2):
        return _vertical_diameter(rect)

    # line through the centre (x1, y1) with gradient m:
    #   y - y1 = m(x - x1)
    m = math.tan(angle)
    x1, y1 = rect.mid_x, rect.mid_y
    min_x, max_x = rect.min_x, rect.max_x
    min_y, max_y = rect.min_y, rect.max_y

    # a chord through a corner meets two edges a rounding error apart
    tol = epsilon * max(1.0, max_x - min_x, max_y - min_y)

    points: List[Point] = []

    def add(p):
        for q in points:
            if close(p.x, q.x, tol) and close(p.y, q.y, tol):
                return
        points.append(p)

    # leading and trailing edges
    for x in (min_x, max_x):
        y = m * (x - x1) + y1
        if min_y - tol <= y <= max_y + tol:
            add(Point(x, min(max(y, min_y), max_y)))

    # top and bottom edges
    for y in (min_y, max_y):
        x = (y - y1) / m + x1
        if min_x - tol <= x <= max_x + tol:
            add(Point(min(max(x, min_x), max_x), y))

    if len(points) > 2:
        logger.debug('%d intersections of %r at angle %r, keeping the farthest pair',
                     len(points), rect, angle)
        points = list(max(combinations(points, 2),
                          key=lambda pair: pair[0].distance(pair[1])))

    if len(points) != 2:
        logger.warning('expected two intersections of %r at angle %r, found %d',
                       rect, angle, len(points))
        return _ZERO_SEGMENT

    return points[0].flushing_nans, points[1].flushing_nans


def segment_dividing_at_distance(rect: Rect, distance: float,
                                 edge: RectEdge) -> Segment:
    """Return the line slicing ``rect`` at ``distance`` from ``edge``.

    Each edge has a fixed point ordering: vertical cuts run from the
    top (min y) to the bottom, horizontal cuts from left to right.
    """

    slice_, _ = rect.divided(distance, edge)

    if edge == RectEdge.MIN_X:
        start = Point(slice_.max_x, slice_.min_y)
        end = Point(slice_.max_x, slice_.max_y)
    elif edge == RectEdge.MIN_Y:
        start = Point(slice_.min_x, slice_.max_y)
        end = Point(slice_.max_x, slice_.max_y)
    elif edge == RectEdge.MAX_X:
        start = Point(slice_.min_x, slice_.min_y)
        end = Point(slice_.min_x, slice_.max_y)
    elif edge == RectEdge.MAX_Y:
        start = Point(slice_.min_x, slice_.min_y)
        end = Point(slice_.max_x, slice_.min_y)
    else:
        raise ValueError('bad edge passed to segment_dividing_at_distance: {}'.format(edge))

    return start.flushing_nans, end.flushing_nans
