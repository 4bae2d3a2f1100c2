## affine points for geomkit

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

"""Points are positions.

The difference of two points is a ``Vector``; a point plus or minus a
vector is a point.  Points cannot be added to each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence, Tuple

from geomkit.tolerance import epsilon
from geomkit.vector import Vector2d, Vector3d, components_of

if TYPE_CHECKING:  # pragma: no cover
    from geomkit.bounding_box import BoundingBox2d, BoundingBox3d

__all__ = ["Point2d", "Point3d"]


@dataclass(frozen=True)
class Point2d:
    """Position in two dimensions."""

    x: float
    y: float

    ORIGIN: ClassVar["Point2d"]

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Point2d":
        return cls(*components_of(values, 2, cls.__name__))

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Point2d":
        return cls(radius * cos(angle), radius * sin(angle))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def plus(self, v: Vector2d) -> "Point2d":
        return Point2d(self.x + v.x, self.y + v.y)

    def minus(self, other):
        """``p - q`` is a vector for a point ``q``, a point for a vector ``q``."""
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        return Point2d(self.x - other.x, self.y - other.y)

    def vector_from(self, other: "Point2d") -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def vector_to(self, other: "Point2d") -> Vector2d:
        return Vector2d(other.x - self.x, other.y - self.y)

    def squared_distance_to(self, other: "Point2d") -> float:
        return self.vector_from(other).squared_length()

    def distance_to(self, other: "Point2d") -> float:
        return self.vector_from(other).length()

    def interpolate(self, other: "Point2d", t: float) -> "Point2d":
        """Point at parameter ``t`` along the segment from this point (0) to ``other`` (1)."""
        return Point2d(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))

    def midpoint(self, other: "Point2d") -> "Point2d":
        return self.interpolate(other, 0.5)

    def is_close(self, other: "Point2d", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = epsilon()
        return self.squared_distance_to(other) < tol * tol

    def hull(self, other: "Point2d") -> "BoundingBox2d":
        """Smallest axis-aligned box containing both points."""
        from geomkit.bounding_box import BoundingBox2d

        return BoundingBox2d(min(self.x, other.x), max(self.x, other.x),
                             min(self.y, other.y), max(self.y, other.y))

    def with_z(self, z: float = 0.0) -> "Point3d":
        return Point3d(self.x, self.y, z)

    def __add__(self, other):
        if isinstance(other, Vector2d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Point2d, Vector2d)):
            return self.minus(other)
        return NotImplemented


@dataclass(frozen=True)
class Point3d:
    """Position in three dimensions."""

    x: float
    y: float
    z: float

    ORIGIN: ClassVar["Point3d"]

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "Point3d":
        return cls(*components_of(values, 3, cls.__name__))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def plus(self, v: Vector3d) -> "Point3d":
        return Point3d(self.x + v.x, self.y + v.y, self.z + v.z)

    def minus(self, other):
        """``p - q`` is a vector for a point ``q``, a point for a vector ``q``."""
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def vector_from(self, other: "Point3d") -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def vector_to(self, other: "Point3d") -> Vector3d:
        return Vector3d(other.x - self.x, other.y - self.y, other.z - self.z)

    def squared_distance_to(self, other: "Point3d") -> float:
        return self.vector_from(other).squared_length()

    def distance_to(self, other: "Point3d") -> float:
        return self.vector_from(other).length()

    def interpolate(self, other: "Point3d", t: float) -> "Point3d":
        return Point3d(self.x + t * (other.x - self.x),
                       self.y + t * (other.y - self.y),
                       self.z + t * (other.z - self.z))

    def midpoint(self, other: "Point3d") -> "Point3d":
        return self.interpolate(other, 0.5)

    def is_close(self, other: "Point3d", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = epsilon()
        return self.squared_distance_to(other) < tol * tol

    def hull(self, other: "Point3d") -> "BoundingBox3d":
        """Smallest axis-aligned box containing both points."""
        from geomkit.bounding_box import BoundingBox3d

        return BoundingBox3d(min(self.x, other.x), max(self.x, other.x),
                             min(self.y, other.y), max(self.y, other.y),
                             min(self.z, other.z), max(self.z, other.z))

    def xy(self) -> Point2d:
        return Point2d(self.x, self.y)

    def __add__(self, other):
        if isinstance(other, Vector3d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Point3d, Vector3d)):
            return self.minus(other)
        return NotImplemented


Point2d.ORIGIN = Point2d(0.0, 0.0)
Point3d.ORIGIN = Point3d(0.0, 0.0, 0.0)
