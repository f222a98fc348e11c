"""Quaternions for 3D rotations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Sequence


class Quat:
    """Quaternion a + b*i + c*j + d*k, stored as (b, c, d, a)."""

    __hash__ = None

    def __init__(self, a=0.0, b=0.0, c=0.0, d=0.0):
        self._value = (b, c, d, a)

    def data(self) -> tuple:
        """Return the components in storage order (b, c, d, a)."""
        return self._value

    def _parts(self):
        b, c, d, a = self._value
        return a, b, c, d

    def __add__(self, other: "Quat") -> "Quat":
        a1, b1, c1, d1 = self._parts()
        a2, b2, c2, d2 = other._parts()
        return Quat(a1 + a2, b1 + b2, c1 + c2, d1 + d2)

    def __sub__(self, other: "Quat") -> "Quat":
        a1, b1, c1, d1 = self._parts()
        a2, b2, c2, d2 = other._parts()
        return Quat(a1 - a2, b1 - b2, c1 - c2, d1 - d2)

    def __mul__(self, other) -> "Quat":
        if isinstance(other, Real):
            other = Quat(other, 0, 0, 0)
        elif not isinstance(other, Quat):
            x, y, z = other
            other = Quat(0, x, y, z)
        a1, b1, c1, d1 = self._parts()
        a2, b2, c2, d2 = other._parts()
        return Quat(
            a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
            a1 * b2 + a2 * b1 + c1 * d2 - c2 * d1,
            a1 * c2 + a2 * c1 + d1 * b2 - d2 * b1,
            a1 * d2 + a2 * d1 + b1 * c2 - b2 * c1,
        )

    def __invert__(self) -> "Quat":
        a, b, c, d = self._parts()
        return Quat(a, -b, -c, -d)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self._value == other._value

    def __abs__(self) -> float:
        return math.sqrt(sum(v * v for v in self._value))

    def __repr__(self) -> str:
        a, b, c, d = self._parts()
        return f"Quat({a!r}, {b!r}, {c!r}, {d!r})"

    def _normalized(self) -> "Quat":
        return self * (1 / abs(self))

    def rotation_matrix(self) -> list:
        """Return the 4x4 rotation matrix as a flat column-major list."""
        b, c, d, a = self._normalized()._value
        return [
            1 - 2 * c * c - 2 * d * d, 2 * b * c + 2 * d * a, 2 * b * d - 2 * c * a, 0,
            2 * b * c - 2 * d * a, 1 - 2 * b * b - 2 * d * d, 2 * c * d + 2 * b * a, 0,
            2 * b * d + 2 * c * a, 2 * c * d - 2 * b * a, 1 - 2 * b * b - 2 * c * c, 0,
            0, 0, 0, 1,
        ]

    def matrix(self) -> list:
        """Return the 4x4 matrix form of the quaternion as a flat list."""
        b, c, d, a = self._value
        return [
            a, -b, -c, -d,
            b, a, -d, c,
            c, d, a, -b,
            d, -c, b, a,
        ]

    def angle(self, in_radians=True) -> float:
        """Return the rotation angle, in radians or degrees."""
        factor = 1 if in_radians else 180 / math.pi
        return math.acos(self._value[3] / abs(self)) * 2 * factor

    def apply(self, vector: Sequence[float]) -> tuple:
        """Rotate a 3-vector by the normalised quaternion."""
        unit = self._normalized()
        b, c, d, _ = (unit * vector * ~unit)._value
        return (b, c, d)


def axis_angle(angle, in_radians, axis) -> Quat:
    """Build the rotation quaternion for an angle about an axis."""
    x, y, z = axis
    norm = math.sqrt(x * x + y * y + z * z)
    half = (angle if in_radians else angle * math.pi / 180) / 2
    s = math.sin(half)
    return Quat(math.cos(half), x / norm * s, y / norm * s, z / norm * s)