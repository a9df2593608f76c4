"""A 2D Cartesian grid for debugging transforms.

The system covers ``bounding_rect`` with grid lines every
``unit_size`` and places one grid line exactly through the middle of
each axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List

from tryoutgeom.affine import AffineTransform
from tryoutgeom.geom import Point, Rect, Segment, Size


@dataclass(frozen=True)
class Cursor:
    """Marks along ``length`` every ``stride``, one of them at ``length/2``."""

    length: float
    stride: float

    def __iter__(self) -> Iterator[float]:
        if not self.stride > 0:
            return
        offset = math.fmod(self.length / 2, self.stride)
        while offset <= self.length:
            yield offset
            offset += self.stride


@dataclass(frozen=True)
class CartesianSystem:
    unit_size: Size
    bounding_rect: Rect

    @property
    def center(self) -> Point:
        """Centre in the system's own coordinates."""
        return Point(self.bounding_rect.width / 2, self.bounding_rect.height / 2)

    @property
    def horizontal_cursor(self) -> Cursor:
        return Cursor(self.bounding_rect.width, self.unit_size[0])

    @property
    def vertical_cursor(self) -> Cursor:
        return Cursor(self.bounding_rect.height, self.unit_size[1])

    def _vertical(self, distance: float) -> Segment:
        r = self.bounding_rect
        return (Point(r.x + distance, r.y), Point(r.x + distance, r.y + r.height))

    def _horizontal(self, distance: float) -> Segment:
        r = self.bounding_rect
        return (Point(r.x, r.y + distance), Point(r.x + r.width, r.y + distance))

    def grid_segments(self) -> List[Segment]:
        """Vertical grid lines left to right, then horizontal ones top down."""
        segments = [self._vertical(d) for d in self.horizontal_cursor]
        segments += [self._horizontal(d) for d in self.vertical_cursor]
        return segments

    def axes_segments(self) -> List[Segment]:
        """The y axis, then the x axis."""
        return [self._vertical(self.center.x), self._horizontal(self.center.y)]


def rotation_about(angle: float, point) -> AffineTransform:
    """Rotation by ``angle`` radians pivoting around ``point``."""
    offset = AffineTransform.translation(-point[0], -point[1])
    return (AffineTransform.identity()
            .concatenating(offset)
            .concatenating(AffineTransform.rotation(angle))
            .concatenating(offset.inverted()))


def orbit_radius(point, rect: Rect) -> float:
    """Radius of the circle ``rect``'s origin sweeps when rotated about ``point``."""
    return math.hypot(point[0] - rect.x, point[1] - rect.y)
