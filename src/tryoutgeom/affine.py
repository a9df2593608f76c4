"""2D affine transforms.

``AffineTransform(a, b, c, d, tx, ty)`` maps a point as ::

   x' = a*x + c*y + tx
   y' = b*x + d*y + ty

and ``t1.concatenating(t2)`` applies ``t1`` first, then ``t2``.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from tryoutgeom.geom import Point, epsilon, isapprox
from tryoutgeom.xform import Matrix


class AffineTransform(NamedTuple):
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """Rotation by ``angle`` radians, turning +x towards +y.

        A non-finite angle has no defined rotation; its linear part is
        all NaN, which propagates through concatenation.
        """
        if not math.isfinite(angle):
            return cls(math.nan, math.nan, math.nan, math.nan, 0.0, 0.0)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)

    @classmethod
    def scale(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform.identity()

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def concatenating(self, t: "AffineTransform") -> "AffineTransform":
        return AffineTransform(
            self.a * t.a + self.b * t.c,
            self.a * t.b + self.b * t.d,
            self.c * t.a + self.d * t.c,
            self.c * t.b + self.d * t.d,
            self.tx * t.a + self.ty * t.c + t.tx,
            self.tx * t.b + self.ty * t.d + t.ty,
        )

    def inverted(self) -> "AffineTransform":
        """Inverse transform; a singular transform is returned unchanged."""
        det = self.determinant
        if det == 0:
            return self
        return AffineTransform(
            self.d / det,
            -self.b / det,
            -self.c / det,
            self.a / det,
            (self.c * self.ty - self.d * self.tx) / det,
            (self.b * self.tx - self.a * self.ty) / det,
        )

    def apply(self, p) -> Point:
        return Point(self.a * p[0] + self.c * p[1] + self.tx,
                     self.b * p[0] + self.d * p[1] + self.ty)

    def to_matrix(self) -> Matrix:
        """Embed into a 4x4 homogeneous matrix acting on column vectors."""
        return Matrix([[self.a, self.c, 0.0, self.tx],
                       [self.b, self.d, 0.0, self.ty],
                       [0.0, 0.0, 1.0, 0.0],
                       [0.0, 0.0, 0.0, 1.0]])

    def isclose(self, other: "AffineTransform", tol: float = epsilon) -> bool:
        return all(isapprox(u, v, tol) for u, v in zip(self, other))
