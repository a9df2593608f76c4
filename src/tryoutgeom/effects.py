"""Affine and projective 3D transform effects.

An effect turns a ``Transform`` (scale, rotation, translation), an
anchor point and a view size into a 4x4 ``Matrix`` that a 2D
projection step can apply to view content.  Rotation and scale pivot
about the anchor, which is given as a fraction of the view size.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from tryoutgeom.geom import Size
from tryoutgeom.quaternion import Quaternion
from tryoutgeom.xform import Matrix, Perspective, Rotation, Scale, Translation

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class UnitPoint3D:
    """Normalized 3D point in a view's coordinate space.

    Each component is the fraction of the view's size along that axis,
    measured from the view's origin.  Values outside ``[0, 1]`` are
    allowed and project outside the view.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_xy(cls, xy: Sequence[float], z: float = 0.0) -> "UnitPoint3D":
        return cls(float(xy[0]), float(xy[1]), float(z))

    @property
    def vector(self) -> Vec3:
        return self.x, self.y, self.z

    @property
    def animatable_data(self) -> Vec3:
        return self.vector

    @classmethod
    def from_animatable_data(cls, data: Sequence[float]) -> "UnitPoint3D":
        return cls(*data[:3])


UnitPoint3D.ZERO = UnitPoint3D(0.0, 0.0, 0.0)
UnitPoint3D.CENTER = UnitPoint3D(0.5, 0.5, 0.5)
UnitPoint3D.FRONT = UnitPoint3D(0.5, 0.5, 0.0)


@dataclass(frozen=True)
class Transform:
    """Scale, rotation (unit quaternion) and translation of an effect."""

    scale: Vec3 = (1.0, 1.0, 1.0)
    rotation: Quaternion = field(default_factory=Quaternion.identity)
    translation: Vec3 = (0.0, 0.0, 0.0)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def from_euler(cls, pitch: float = 0.0, yaw: float = 0.0,
                   roll: float = 0.0) -> "Transform":
        return cls(rotation=Quaternion.from_euler(pitch, yaw, roll))

    @classmethod
    def from_angle_axis(cls, angle: float, axis: Sequence[float]) -> "Transform":
        return cls(rotation=Quaternion.from_axis_angle(axis, angle))

    @property
    def animatable_data(self) -> Tuple[float, ...]:
        """Flat tuple an animation driver can interpolate component-wise."""
        return tuple(self.scale) + tuple(self.rotation) + tuple(self.translation)

    @classmethod
    def from_animatable_data(cls, data: Sequence[float]) -> "Transform":
        if len(data) != 10:
            raise ValueError('transform data needs 10 components, got {}'.format(len(data)))
        return cls(scale=tuple(data[0:3]),
                   rotation=Quaternion(*data[3:7]),
                   translation=tuple(data[7:10]))


def anchor_offset(anchor: UnitPoint3D, size: Size) -> Vec3:
    return anchor.x * size[0], anchor.y * size[1], anchor.z


def perspective_matrix(perspective: float, size: Size) -> Matrix:
    z = -perspective / max(size[0], size[1], 1)
    return Perspective((0.0, 0.0, z))


def build_matrix(transform: Transform, anchor: UnitPoint3D, size: Size,
                 perspective: Optional[float] = None) -> Matrix:
    """Compose the effect matrix for a view of the given size.

    The result is ``A . [P .] T . R . S . A^-1`` where ``A`` moves the
    origin to the anchor point.  With ``perspective=None`` the
    perspective factor is omitted (affine variant).
    """
    offset = anchor_offset(anchor, size)

    matrix = Matrix()
    if perspective is not None:
        matrix = matrix.mul(perspective_matrix(perspective, size))
    matrix = matrix.mul(Translation(transform.translation))

    # rotate and scale around the anchor point
    matrix = Translation(offset).mul(matrix)
    matrix = matrix.mul(Rotation(transform.rotation))
    matrix = matrix.mul(Scale(transform.scale))

    # reset anchor point
    return matrix.mul(Translation(offset, inverse=True))


class GeometryEffect(ABC):
    """An effect that maps a view size to a 4x4 projection matrix."""

    @abstractmethod
    def compute_transform(self, size: Size) -> Matrix:
        ...


@dataclass(frozen=True)
class AffineTransformEffect(GeometryEffect):
    transform: Transform = field(default_factory=Transform.identity)
    anchor: UnitPoint3D = UnitPoint3D.FRONT

    def compute_transform(self, size: Size) -> Matrix:
        return build_matrix(self.transform, self.anchor, size)


@dataclass(frozen=True)
class ProjectiveTransformEffect(GeometryEffect):
    transform: Transform = field(default_factory=Transform.identity)
    anchor: UnitPoint3D = UnitPoint3D.FRONT
    perspective: float = 1.0

    @classmethod
    def perspective_rotation(cls, angle: float, axis: Sequence[float],
                             anchor: Sequence[float] = (0.5, 0.5),
                             anchor_z: float = 0.0,
                             perspective: float = 1.0) -> "ProjectiveTransformEffect":
        """Rotate content in 3D about ``axis`` as seen from a vanishing
        point ``perspective`` view-sizes away."""
        return cls(transform=Transform.from_angle_axis(angle, axis),
                   anchor=UnitPoint3D.from_xy(anchor, anchor_z),
                   perspective=perspective)

    def compute_transform(self, size: Size) -> Matrix:
        return build_matrix(self.transform, self.anchor, size, self.perspective)
