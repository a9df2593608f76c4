"""Unit quaternions for 3D rotations.

Quaternions are stored vector part first, ``(x, y, z, w)``, with ``w``
the real part, so ``Quaternion(0, 0, 0, 1)`` is the identity rotation.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple

from tryoutgeom.geom import epsilon


class Quaternion(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle: float) -> "Quaternion":
        """Rotation of ``angle`` radians about ``axis`` (normalised here).

        A non-finite angle gives the all-NaN quaternion.
        """
        m = math.sqrt(axis[0] ** 2 + axis[1] ** 2 + axis[2] ** 2)
        if m < epsilon:
            raise ValueError('zero-length rotation axis not allowed')
        if not math.isfinite(angle):
            return cls(math.nan, math.nan, math.nan, math.nan)
        s = math.sin(angle / 2.0) / m
        return cls(axis[0] * s, axis[1] * s, axis[2] * s, math.cos(angle / 2.0))

    @classmethod
    def from_euler(cls, pitch: float = 0.0, yaw: float = 0.0,
                   roll: float = 0.0) -> "Quaternion":
        """Compose rotations about x (pitch), y (yaw) and z (roll)."""
        qx = cls.from_axis_angle((1, 0, 0), pitch)
        qy = cls.from_axis_angle((0, 1, 0), yaw)
        qz = cls.from_axis_angle((0, 0, 1), roll)
        return qx.mul(qy).mul(qz)

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y +
                         self.z * self.z + self.w * self.w)

    def normalized(self) -> "Quaternion":
        n = self.length
        if n < epsilon:
            raise ValueError('zero-length quaternion cannot be normalized: {}'.format(self))
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def mul(self, q: "Quaternion") -> "Quaternion":
        """Hamilton product ``self * q`` (apply ``q`` first)."""
        x1, y1, z1, w1 = self
        x2, y2, z2, w2 = q
        return Quaternion(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )

    def rotate(self, v: Sequence[float]) -> Tuple[float, float, float]:
        """Rotate a 3-vector by this (normalised) quaternion."""
        q = self.normalized()
        p = Quaternion(v[0], v[1], v[2], 0.0)
        r = q.mul(p).mul(q.conjugate())
        return r.x, r.y, r.z
