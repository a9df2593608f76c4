"""Resolution-independent path data and the shapes that produce it.

A ``Path`` is an ordered list of elements, each a tuple whose first
item names the element kind:

* ``('move', p)``
* ``('line', p)``
* ``('curve', p, control1, control2)``
* ``('arc', center, radius, start, end)`` -- angles in
  degrees, sweeping from +x towards +y
* ``('ellipse', rect)`` -- a closed ellipse inscribed in ``rect``
* ``('close',)``

Paths are built up by the host (shapes, guides) and consumed by a
``Drawable``; nothing here rasterises.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Tuple

from tryoutgeom.geom import Point, Rect


def arc_point(center, radius: float, angle: float) -> Point:
    """Point on an arc at ``angle`` degrees."""
    a = math.radians(angle)
    return Point(center[0] + radius * math.cos(a), center[1] + radius * math.sin(a))


def arc_extremes(center, radius: float, start: float, end: float) -> List[Point]:
    """End points of an arc plus any axis extremes it sweeps through."""
    while end < start:
        end += 360.0
    points = [arc_point(center, radius, start), arc_point(center, radius, end)]
    quadrant = math.ceil(start / 90.0) * 90.0
    while quadrant < end:
        points.append(arc_point(center, radius, quadrant))
        quadrant += 90.0
    return points


class Path:
    """Mutable path builder with value equality."""

    def __init__(self, elements=None):
        self._elements: List[Tuple] = list(elements) if elements else []

    def __repr__(self):
        return 'Path({})'.format(self._elements)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None

    @classmethod
    def line_segment(cls, start, end) -> "Path":
        """Path stroking from ``start`` to ``end``, empty if they coincide."""
        path = cls()
        if tuple(start) != tuple(end):
            path.move_to(start)
            path.line_to(end)
        return path

    @classmethod
    def circle(cls, center, radius: float) -> "Path":
        path = cls()
        path.add_ellipse(Rect(center[0] - radius, center[1] - radius,
                              radius * 2, radius * 2))
        return path

    @classmethod
    def rectangle(cls, rect: Rect) -> "Path":
        path = cls()
        path.add_rect(rect)
        return path

    @classmethod
    def rounded_rectangle(cls, rect: Rect, radius: float) -> "Path":
        path = cls()
        path.add_rounded_rect(rect, radius)
        return path

    @property
    def elements(self) -> Tuple[Tuple, ...]:
        return tuple(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def move_to(self, p):
        self._elements.append(('move', Point(*p[:2])))

    def line_to(self, p):
        self._elements.append(('line', Point(*p[:2])))

    def curve_to(self, p, control1, control2):
        self._elements.append(('curve', Point(*p[:2]),
                               Point(*control1[:2]), Point(*control2[:2])))

    def close_subpath(self):
        self._elements.append(('close',))

    def add_rect(self, rect: Rect):
        r = rect.standardized
        self.move_to((r.min_x, r.min_y))
        self.line_to((r.max_x, r.min_y))
        self.line_to((r.max_x, r.max_y))
        self.line_to((r.min_x, r.max_y))
        self.close_subpath()

    def add_arc(self, center, radius: float, start: float, end: float):
        self._elements.append(('arc', Point(*center[:2]), radius, start, end))

    def add_rounded_rect(self, rect: Rect, radius: float):
        """Rectangle with quarter-circle corners, clockwise on screen.

        The radius is clamped to half the shorter side; a non-positive
        radius gives a plain rectangle.
        """
        r = rect.standardized
        radius = min(radius, r.width / 2, r.height / 2)
        if radius <= 0:
            self.add_rect(r)
            return
        self.move_to((r.min_x + radius, r.min_y))
        self.line_to((r.max_x - radius, r.min_y))
        self.add_arc((r.max_x - radius, r.min_y + radius), radius, 270.0, 360.0)
        self.line_to((r.max_x, r.max_y - radius))
        self.add_arc((r.max_x - radius, r.max_y - radius), radius, 0.0, 90.0)
        self.line_to((r.min_x + radius, r.max_y))
        self.add_arc((r.min_x + radius, r.max_y - radius), radius, 90.0, 180.0)
        self.line_to((r.min_x, r.min_y + radius))
        self.add_arc((r.min_x + radius, r.min_y + radius), radius, 180.0, 270.0)
        self.close_subpath()

    def add_ellipse(self, rect: Rect):
        self._elements.append(('ellipse', rect.standardized))

    def add_path(self, other: "Path"):
        self._elements.extend(other.elements)

    @property
    def bounding_rect(self) -> Rect:
        """Smallest rect enclosing every point and control point.

        An empty path has the null rect as its bounds.
        """
        xs: List[float] = []
        ys: List[float] = []
        for element in self._elements:
            kind = element[0]
            if kind == 'ellipse':
                r = element[1]
                xs += [r.min_x, r.max_x]
                ys += [r.min_y, r.max_y]
            elif kind == 'arc':
                for p in arc_extremes(*element[1:]):
                    xs.append(p.x)
                    ys.append(p.y)
            elif kind != 'close':
                for p in element[1:]:
                    xs.append(p.x)
                    ys.append(p.y)
        if not xs:
            return Rect.null()
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class Shape(ABC):
    """Anything that can describe its outline inside a bounding rect."""

    @abstractmethod
    def path(self, rect: Rect) -> Path:
        ...


class RectangleShape(Shape):

    def path(self, rect: Rect) -> Path:
        return Path.rectangle(rect)


class EllipseShape(Shape):

    def path(self, rect: Rect) -> Path:
        path = Path()
        path.add_ellipse(rect)
        return path
