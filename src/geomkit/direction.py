## unit-length directions for geomkit

## Copyright (c) 2026 geomkit contributors
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

"""Directions are vectors of unit length.

A direction is obtained either by normalizing a vector
(``Vector2d.direction()``, ``Direction2d.of()``), which returns
``None`` for the zero vector, or by constructing one directly from
components that already have unit length.  Direct construction with
any other components raises ``ValueError``, so a ``Direction`` value
is always unit length.  There is no "no direction" value; code that
may not have a direction uses ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, sin
from typing import ClassVar, Optional, Sequence, Tuple

from geomkit.tolerance import epsilon, unit_tolerance
from geomkit.vector import Vector2d, Vector3d, components_of

__all__ = ["Direction2d", "Direction3d"]


def _check_unit(kind: str, squared_norm: float) -> None:
    ## |n - 1| <= tol is equivalent to |n^2 - 1| <= ~2 tol near one
    if abs(squared_norm - 1.0) > 2.0 * unit_tolerance():
        raise ValueError(f"{kind} components must have unit length, squared norm is {squared_norm!r}")


@dataclass(frozen=True)
class Direction2d:
    """Unit vector in two dimensions."""

    x: float
    y: float

    X: ClassVar["Direction2d"]
    Y: ClassVar["Direction2d"]
    NEGATIVE_X: ClassVar["Direction2d"]
    NEGATIVE_Y: ClassVar["Direction2d"]

    def __post_init__(self):
        _check_unit(type(self).__name__, self.x * self.x + self.y * self.y)

    @classmethod
    def of(cls, vector: Vector2d) -> Optional["Direction2d"]:
        """Direction of ``vector``, or ``None`` if it is the zero vector."""
        unit = vector.normalize()
        if unit is None:
            return None
        return cls(unit.x, unit.y)

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Direction2d":
        return cls(*components_of(values, 2, cls.__name__))

    @classmethod
    def from_angle(cls, angle: float) -> "Direction2d":
        """Direction at ``angle`` radians counterclockwise from +X."""
        return cls(cos(angle), sin(angle))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def vector(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def angle(self) -> float:
        return atan2(self.y, self.x)

    def angle_to(self, other) -> float:
        return self.vector().angle_to(other)

    def negated(self) -> "Direction2d":
        return Direction2d(-self.x, -self.y)

    def times(self, c: float) -> Vector2d:
        """Scaled direction; generally not unit length, hence a plain vector."""
        return Vector2d(self.x * c, self.y * c)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        return self.x * other.y - self.y * other.x

    def perpendicular_direction(self) -> "Direction2d":
        """This direction rotated 90 degrees counterclockwise."""
        return Direction2d(-self.y, self.x)

    def is_close(self, other, tol: Optional[float] = None) -> bool:
        return self.vector().is_close(other.vector(), tol)

    def with_z(self) -> "Direction3d":
        return Direction3d(self.x, self.y, 0.0)

    def __neg__(self) -> "Direction2d":
        return self.negated()


@dataclass(frozen=True)
class Direction3d:
    """Unit vector in three dimensions."""

    x: float
    y: float
    z: float

    X: ClassVar["Direction3d"]
    Y: ClassVar["Direction3d"]
    Z: ClassVar["Direction3d"]
    NEGATIVE_X: ClassVar["Direction3d"]
    NEGATIVE_Y: ClassVar["Direction3d"]
    NEGATIVE_Z: ClassVar["Direction3d"]

    def __post_init__(self):
        _check_unit(type(self).__name__, self.x * self.x + self.y * self.y + self.z * self.z)

    @classmethod
    def of(cls, vector: Vector3d) -> Optional["Direction3d"]:
        """Direction of ``vector``, or ``None`` if it is the zero vector."""
        unit = vector.normalize()
        if unit is None:
            return None
        return cls(unit.x, unit.y, unit.z)

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Direction3d":
        return cls(*components_of(values, 3, cls.__name__))

    @classmethod
    def from_spherical(cls, azimuth: float, elevation: float) -> "Direction3d":
        ce = cos(elevation)
        return cls(ce * cos(azimuth), ce * sin(azimuth), sin(elevation))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def vector(self) -> Vector3d:
        return Vector3d(self.x, self.y, self.z)

    def negated(self) -> "Direction3d":
        return Direction3d(-self.x, -self.y, -self.z)

    def times(self, c: float) -> Vector3d:
        """Scaled direction; generally not unit length, hence a plain vector."""
        return Vector3d(self.x * c, self.y * c, self.z * c)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> Vector3d:
        return self.vector().cross(other)

    def perpendicular_direction(self) -> "Direction3d":
        """Some direction perpendicular to this one."""
        perp = Direction3d.of(self.vector().perpendicular_vector())
        if perp is None:
            raise ValueError(f"no perpendicular for {self!r}")
        return perp

    def perpendicular_basis(self) -> Tuple["Direction3d", "Direction3d"]:
        """Two directions ``(x, y)`` such that ``(x, y, self)`` is right-handed and orthonormal."""
        x_dir = self.perpendicular_direction()
        y_dir = Direction3d.of(self.cross(x_dir))
        if y_dir is None:
            raise ValueError(f"no perpendicular basis for {self!r}")
        return (x_dir, y_dir)

    def is_close(self, other, tol: Optional[float] = None) -> bool:
        return self.vector().is_close(other.vector(), tol)

    def is_parallel_to(self, other, tol: Optional[float] = None) -> bool:
        """True if the directions are parallel or antiparallel within ``tol``."""
        if tol is None:
            tol = epsilon()
        return self.cross(other).squared_length() < tol * tol

    def __neg__(self) -> "Direction3d":
        return self.negated()


Direction2d.X = Direction2d(1.0, 0.0)
Direction2d.Y = Direction2d(0.0, 1.0)
Direction2d.NEGATIVE_X = Direction2d(-1.0, 0.0)
Direction2d.NEGATIVE_Y = Direction2d(0.0, -1.0)

Direction3d.X = Direction3d(1.0, 0.0, 0.0)
Direction3d.Y = Direction3d(0.0, 1.0, 0.0)
Direction3d.Z = Direction3d(0.0, 0.0, 1.0)
Direction3d.NEGATIVE_X = Direction3d(-1.0, 0.0, 0.0)
Direction3d.NEGATIVE_Y = Direction3d(0.0, -1.0, 0.0)
Direction3d.NEGATIVE_Z = Direction3d(0.0, 0.0, -1.0)
