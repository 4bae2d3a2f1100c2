## vector algebra in two and three dimensions for geomkit

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

"""Vector algebra for **geomkit**.

Vectors are displacements: they have a magnitude and an orientation
but no position.  ``Vector2d`` and ``Vector3d`` are immutable value
types; every operation returns a new vector.

Normalizing the zero vector is the one degenerate case.  It is
detected by an exact comparison against zero (not a tolerance check)
and reported by returning ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, hypot, sin, sqrt
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence, Tuple

from geomkit.tolerance import epsilon, isgoodnum

if TYPE_CHECKING:  # pragma: no cover
    from geomkit.direction import Direction2d, Direction3d

__all__ = ["Vector2d", "Vector3d", "components_of"]


def components_of(values: Sequence[float], count: int, kind: str) -> Tuple[float, ...]:
    """Validate and convert a raw component sequence to a float tuple."""
    if len(values) != count:
        raise ValueError(f"{kind} needs {count} components, got {len(values)}: {values!r}")
    for v in values:
        if not isgoodnum(v):
            raise ValueError(f"bad component passed to {kind}: {v!r}")
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class Vector2d:
    """Two-dimensional vector."""

    x: float
    y: float

    ZERO: ClassVar["Vector2d"]

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Vector2d":
        return cls(*components_of(values, 2, cls.__name__))

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Vector2d":
        """Vector with the given length and counterclockwise angle (radians) from +X."""
        return cls(radius * cos(angle), radius * sin(angle))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def polar_components(self) -> Tuple[float, float]:
        """Return ``(radius, angle)``; the angle of the zero vector is 0."""
        return (self.length(), atan2(self.y, self.x))

    ## arithmetic
    def plus(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x + other.x, self.y + other.y)

    def minus(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x - other.x, self.y - other.y)

    def times(self, c: float) -> "Vector2d":
        return Vector2d(self.x * c, self.y * c)

    def negated(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        """z component of the 3D cross product, i.e. the signed parallelogram area."""
        return self.x * other.y - self.y * other.x

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return sqrt(self.squared_length())

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def is_close(self, other: "Vector2d", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = epsilon()
        return self.minus(other).squared_length() < tol * tol

    def normalize(self) -> Optional["Vector2d"]:
        """Unit vector parallel to this one, or ``None`` for the zero vector."""
        if self.is_zero():
            return None
        ## rescale first so subnormal components keep their precision
        m = max(abs(self.x), abs(self.y))
        x = self.x / m
        y = self.y / m
        n = hypot(x, y)
        return Vector2d(x / n, y / n)

    def direction(self) -> Optional["Direction2d"]:
        from geomkit.direction import Direction2d

        return Direction2d.of(self)

    def perpendicular_vector(self) -> "Vector2d":
        """This vector rotated 90 degrees counterclockwise."""
        return Vector2d(-self.y, self.x)

    def perpendicular_direction(self) -> Optional["Direction2d"]:
        return self.perpendicular_vector().direction()

    def rotate_by(self, angle: float) -> "Vector2d":
        c = cos(angle)
        s = sin(angle)
        return Vector2d(self.x * c - self.y * s, self.x * s + self.y * c)

    def angle_to(self, other) -> float:
        """Signed counterclockwise angle from this vector to ``other``, in ``(-pi, pi]``."""
        return atan2(self.cross(other), self.dot(other))

    def with_z(self, z: float = 0.0) -> "Vector3d":
        return Vector3d(self.x, self.y, z)

    ## operators
    def __add__(self, other):
        if isinstance(other, Vector2d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2d):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, c):
        if isgoodnum(c):
            return self.times(c)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2d":
        return self.negated()


@dataclass(frozen=True)
class Vector3d:
    """Three-dimensional vector."""

    x: float
    y: float
    z: float

    ZERO: ClassVar["Vector3d"]

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Vector3d":
        return cls(*components_of(values, 3, cls.__name__))

    @classmethod
    def from_spherical(cls, radius: float, azimuth: float, elevation: float) -> "Vector3d":
        """Vector from a length, an azimuth measured in the XY plane
        counterclockwise from +X, and an elevation above the XY plane
        (both in radians)."""
        r_xy = radius * cos(elevation)
        return cls(r_xy * cos(azimuth), r_xy * sin(azimuth), radius * sin(elevation))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def spherical_components(self) -> Tuple[float, float, float]:
        """Return ``(radius, azimuth, elevation)``, the inverse of ``from_spherical``."""
        r_xy = hypot(self.x, self.y)
        return (self.length(), atan2(self.y, self.x), atan2(self.z, r_xy))

    ## arithmetic
    def plus(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def minus(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def times(self, c: float) -> "Vector3d":
        return Vector3d(self.x * c, self.y * c, self.z * c)

    def negated(self) -> "Vector3d":
        return Vector3d(-self.x, -self.y, -self.z)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> "Vector3d":
        return Vector3d(self.y * other.z - self.z * other.y,
                        self.z * other.x - self.x * other.z,
                        self.x * other.y - self.y * other.x)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return sqrt(self.squared_length())

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def is_close(self, other: "Vector3d", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = epsilon()
        return self.minus(other).squared_length() < tol * tol

    def normalize(self) -> Optional["Vector3d"]:
        """Unit vector parallel to this one, or ``None`` for the zero vector."""
        if self.is_zero():
            return None
        m = max(abs(self.x), abs(self.y), abs(self.z))
        x = self.x / m
        y = self.y / m
        z = self.z / m
        n = hypot(x, y, z)
        return Vector3d(x / n, y / n, z / n)

    def direction(self) -> Optional["Direction3d"]:
        from geomkit.direction import Direction3d

        return Direction3d.of(self)

    def perpendicular_vector(self) -> "Vector3d":
        """Some vector perpendicular to this one; zero only for the zero vector.

        The component of smallest magnitude is dropped, which keeps the
        result well conditioned.
        """
        ax = abs(self.x)
        ay = abs(self.y)
        az = abs(self.z)
        if ax <= ay and ax <= az:
            return Vector3d(0.0, -self.z, self.y)
        elif ay <= az:
            return Vector3d(self.z, 0.0, -self.x)
        return Vector3d(-self.y, self.x, 0.0)

    def xy(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    ## operators
    def __add__(self, other):
        if isinstance(other, Vector3d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3d):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, c):
        if isgoodnum(c):
            return self.times(c)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3d":
        return self.negated()


Vector2d.ZERO = Vector2d(0.0, 0.0)
Vector3d.ZERO = Vector3d(0.0, 0.0, 0.0)
