## foundational 2D geometry value types for tryoutgeom
## Copyright (c) 2024 tryoutgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational geometry value types for **tryoutgeom**

====================
OVERVIEW
====================

The tryoutgeom.geom module provides the scalar helpers and the small
immutable value types every other module builds on: points, sizes and
rectangles.

scalars
=======

Scalars are ordinary Python3 ``int`` or ``float`` numbers.  Unlike
plain Python arithmetic, some operations here need IEEE-754 behaviour
for division by zero (an empty rectangle has a NaN aspect ratio, not a
``ZeroDivisionError``), so ``fdiv()`` is provided.

points and sizes
================

``Point`` and ``Size`` are named tuples, so they compare, unpack and
hash like tuples: ::

   p = Point(1.0, 2.0)
   x, y = p

Points may transiently hold NaN or infinite components.
``Point.flushing_nans`` replaces NaN components with zero and leaves
infinities alone.

rectangles
==========

``Rect`` follows the usual 2D graphics rectangle model: a rectangle with a
negative width or height is valid and is interpreted through its
standardized form, and two distinguished rectangles exist besides
ordinary finite ones.  ``Rect.null()`` is the "no rectangle" value
(origin at +inf, zero size) and ``Rect.infinite()`` is the unbounded
rectangle.  Coordinates are screen coordinates, +y points down.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

## constants

epsilon = 0.000005
pi2 = 2.0 * math.pi

# extent of the infinite rectangle, centred on the origin
_INFINITE_EXTENT = 1.797693134862316e308
_INFINITE_ORIGIN = -_INFINITE_EXTENT / 2


## scalar functions

def isgoodnum(n):
    """Return ``True`` for non-bool ints and floats."""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    return abs(a - b) < tol


def fdiv(a, b):
    """IEEE-754 division: division by zero yields +/-inf or NaN."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def is_even_multiple(value, of):
    """Return ``True`` if ``value`` is an even multiple of ``of``.

    Uses the IEEE remainder, so ``k*pi`` tests as an even multiple of
    ``pi/2`` for any integer ``k`` representable without rounding
    drift.  Non-finite inputs and a zero divisor are never multiples.
    """
    if not (math.isfinite(value) and math.isfinite(of)) or of == 0:
        return False
    return math.remainder(value, 2 * of) == 0


def is_odd_multiple(value, of):
    """Return ``True`` if ``value`` is an odd multiple of ``of``."""
    if not (math.isfinite(value) and math.isfinite(of)) or of == 0:
        return False
    return abs(math.remainder(value, 2 * of)) == abs(of)


def isapprox(a, b, tolerance=math.sqrt(2.220446049250313e-16)):
    """Tolerant scalar equality, relative for large values and absolute
    near zero."""
    if a == b:
        return True
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


def rounded(x):
    """Round half away from zero, unlike the builtin banker's ``round``."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


## points and sizes

class Point(NamedTuple):
    """A 2D point in screen coordinates."""

    x: float = 0.0
    y: float = 0.0

    @property
    def flushing_nans(self) -> "Point":
        """Copy of the point with NaN components replaced by zero."""
        return Point(0.0 if math.isnan(self.x) else self.x,
                     0.0 if math.isnan(self.y) else self.y)

    def isclose(self, other, tolerance=math.sqrt(2.220446049250313e-16)) -> bool:
        if not isinstance(other, Point):
            other = Point(other, other)
        return isapprox(self.x, other.x, tolerance) and \
            isapprox(self.y, other.y, tolerance)

    def applying(self, transform) -> "Point":
        """Map the point through a 2D affine transform."""
        return transform.apply(self)

    def distance(self, other) -> float:
        return math.hypot(other[0] - self.x, other[1] - self.y)


ORIGIN = Point(0.0, 0.0)


class Size(NamedTuple):
    width: float = 0.0
    height: float = 0.0

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.width) or math.isnan(self.height)


Segment = Tuple[Point, Point]


class RectEdge(Enum):
    """Edges of a rectangle, named by the coordinate they bound."""
    MIN_X = "minX"
    MIN_Y = "minY"
    MAX_X = "maxX"
    MAX_Y = "maxY"


## rectangles

@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in screen coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def zero(cls) -> "Rect":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def null(cls) -> "Rect":
        return cls(math.inf, math.inf, 0.0, 0.0)

    @classmethod
    def infinite(cls) -> "Rect":
        return cls(_INFINITE_ORIGIN, _INFINITE_ORIGIN,
                   _INFINITE_EXTENT, _INFINITE_EXTENT)

    @classmethod
    def from_points(cls, p1, p2) -> "Rect":
        return cls(p1[0], p1[1], p2[0] - p1[0], p2[1] - p1[1]).standardized

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    ## classification

    @property
    def is_null(self) -> bool:
        return math.isinf(self.x) and self.x > 0 or \
            math.isinf(self.y) and self.y > 0

    @property
    def is_infinite(self) -> bool:
        return self == Rect.infinite()

    @property
    def is_empty(self) -> bool:
        return self.is_null or self.width == 0 or self.height == 0

    ## extents

    @property
    def standardized(self) -> "Rect":
        if self.is_null:
            return self
        x, w = (self.x + self.width, -self.width) if self.width < 0 \
            else (self.x, self.width)
        y, h = (self.y + self.height, -self.height) if self.height < 0 \
            else (self.y, self.height)
        return Rect(x, y, w, h)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def contains(self, p) -> bool:
        return self.min_x <= p[0] <= self.max_x and \
            self.min_y <= p[1] <= self.max_y

    ## derived rectangles

    def offset_by(self, dx, dy) -> "Rect":
        if self.is_null:
            return self
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def inset_by(self, dx, dy) -> "Rect":
        """Shrink (or grow, for negative insets) about the centre.

        A rectangle whose size would become negative collapses to the
        null rectangle.
        """
        if self.is_null:
            return self
        r = self.standardized
        w = r.width - 2 * dx
        h = r.height - 2 * dy
        if w < 0 or h < 0:
            return Rect.null()
        return Rect(r.x + dx, r.y + dy, w, h)

    def centered(self, at) -> "Rect":
        if self.is_infinite:
            return self
        return self.offset_by(at[0] - self.mid_x, at[1] - self.mid_y)

    def scaled(self, by) -> "Rect":
        """Scale about the centre; negative factors leave the rect as is."""
        if self.is_infinite:
            return self
        if not by >= 0:
            return self
        inset_w = (self.width - self.width * by) / 2
        inset_h = (self.height - self.height * by) / 2
        return self.inset_by(inset_w, inset_h)

    def aspect_ratio(self, ratio: Optional[Union[float, Size]] = None,
                     inside: Optional["Rect"] = None) -> "Rect":
        """Largest rectangle of the given aspect ratio centred in ``inside``.

        ``ratio`` is a width/height number, a ``Size`` giving the
        proportions, or ``None`` to keep this rectangle's own ratio.
        """
        bounds = self if inside is None else inside
        if isinstance(ratio, Size):
            target = ratio
        else:
            if ratio is None:
                ratio = fdiv(self.width, self.height)
            target = Size(ratio, 1.0)

        target_ratio = fdiv(target.width, target.height)
        bounding_ratio = fdiv(bounds.width, bounds.height)

        if target_ratio > bounding_ratio:
            factor = fdiv(bounds.width, target.width)
        else:
            factor = fdiv(bounds.height, target.height)

        w = target.width * factor
        h = target.height * factor
        x = bounds.x + (bounds.width - w) / 2
        y = bounds.y + (bounds.height - h) / 2
        return Rect(x, y, w, h)

    def divided(self, distance, edge: RectEdge) -> Tuple["Rect", "Rect"]:
        """Split into ``(slice, remainder)`` at ``distance`` from ``edge``."""
        if self.is_null:
            return Rect.null(), Rect.null()
        r = self.standardized
        amount = distance if distance > 0 else 0.0

        if edge in (RectEdge.MIN_X, RectEdge.MAX_X):
            amount = min(amount, r.width)
            rest = r.width - amount
            if edge == RectEdge.MIN_X:
                return (Rect(r.x, r.y, amount, r.height),
                        Rect(r.x + amount, r.y, rest, r.height))
            return (Rect(r.x + rest, r.y, amount, r.height),
                    Rect(r.x, r.y, rest, r.height))

        amount = min(amount, r.height)
        rest = r.height - amount
        if edge == RectEdge.MIN_Y:
            return (Rect(r.x, r.y, r.width, amount),
                    Rect(r.x, r.y + amount, r.width, rest))
        return (Rect(r.x, r.y + rest, r.width, amount),
                Rect(r.x, r.y, r.width, rest))
