"""Unit quaternions for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from partiview.matrix import Matrix4x4
from partiview.vector import Vector3, Vector4, cross, dot, length, normalize

_DOT_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quaternion:
    """Quaternion stored as ``(x, y, z, w)`` with ``w`` the scalar part."""

    q: Vector4 = Vector4()

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """Rotation of ``angle`` radians around ``axis``; identity for a zero axis."""
        norm = length(axis)
        if norm == 0:
            return cls(Vector4(0.0, 0.0, 0.0, 1.0))
        half_sin = math.sin(0.5 * angle)
        return cls(
            Vector4(
                half_sin * axis.x / norm,
                half_sin * axis.y / norm,
                half_sin * axis.z / norm,
                math.cos(0.5 * angle),
            )
        )

    def axis_angle(self) -> tuple[Vector3, float]:
        """Rotation axis and angle in radians."""
        x, y, z, w = self.q
        half_sin = math.sqrt(x * x + y * y + z * z)
        angle = 2.0 * math.atan2(half_sin, w)
        r = 1.0 / half_sin if half_sin > 0 else 0.0
        return Vector3(r * x, r * y, r * z), angle

    def to_matrix(self) -> Matrix4x4:
        """Rotation matrix for row vectors (``v * M``)."""
        x, y, z, w = self.q
        xx2, yy2, zz2 = 2.0 * x * x, 2.0 * y * y, 2.0 * z * z
        xy2, xz2, yz2 = 2.0 * x * y, 2.0 * x * z, 2.0 * y * z
        wx2, wy2, wz2 = 2.0 * w * x, 2.0 * w * y, 2.0 * w * z
        return Matrix4x4(
            [
                [1.0 - yy2 - zz2, xy2 + wz2, xz2 - wy2, 0.0],
                [xy2 - wz2, 1.0 - xx2 - zz2, yz2 + wx2, 0.0],
                [xz2 + wy2, yz2 - wx2, 1.0 - xx2 - yy2, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def rotate_vector(self, v: Vector3) -> Vector3:
        """Apply this rotation to ``v``."""
        axis = self.q.xyz()
        return v + 2.0 * cross(axis, cross(axis, v) + self.q.w * v)

    def normalized(self) -> "Quaternion":
        """Quaternion scaled to unit length."""
        return Quaternion(normalize(self.q))

    def __mul__(self, other: object) -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        x1, y1, z1, w1 = self.q
        x2, y2, z2, w2 = other.q
        return Quaternion(
            Vector4(
                x1 * w2 + y1 * z2 - z1 * y2 + w1 * x2,
                -x1 * z2 + y1 * w2 + z1 * x2 + w1 * y2,
                x1 * y2 - y1 * x2 + z1 * w2 + w1 * z2,
                -x1 * x2 - y1 * y2 - z1 * z2 + w1 * w2,
            )
        )


def slerp(
    v0: Quaternion, v1: Quaternion, t: float, do_not_normalize: bool = False
) -> Quaternion:
    """Spherical linear interpolation between two rotations along the shorter arc."""
    if not do_not_normalize:
        v0 = v0.normalized()
        v1 = v1.normalized()

    dp = dot(v0.q, v1.q)
    q1 = v1.q
    if dp < 0:
        q1 = -q1
        dp = -dp

    if dp > _DOT_THRESHOLD:
        return Quaternion(normalize(v0.q + t * (q1 - v0.q)))

    theta_0 = math.acos(dp)
    theta = theta_0 * t
    sin_theta = math.sin(theta)
    sin_theta_0 = math.sin(theta_0)

    s0 = math.cos(theta) - dp * sin_theta / sin_theta_0
    s1 = sin_theta / sin_theta_0

    result = Quaternion(v0.q * s0 + q1 * s1)
    if not do_not_normalize:
        result = result.normalized()
    return result