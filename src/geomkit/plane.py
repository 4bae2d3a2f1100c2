## planes for geomkit

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

"""A plane is an origin point plus two in-plane directions.

The normal direction is derived as the cross product of the X and Y
directions.  As with frames, the two directions must be perpendicular;
this is only checked when debug validation is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from geomkit.axis import Axis3d
from geomkit.direction import Direction3d
from geomkit.point import Point3d
from geomkit.tolerance import validate_frames

__all__ = ["Plane3d"]


@dataclass(frozen=True)
class Plane3d:
    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    XY: ClassVar["Plane3d"]
    YZ: ClassVar["Plane3d"]
    ZX: ClassVar["Plane3d"]

    def __post_init__(self):
        if validate_frames():
            from geomkit.geometry_checks import ensure_orthonormal

            ensure_orthonormal(self)

    @classmethod
    def from_point_and_normal(cls, origin: Point3d, normal: Direction3d) -> "Plane3d":
        """Plane through ``origin`` with the given normal and arbitrary in-plane X direction."""
        x_dir, y_dir = normal.perpendicular_basis()
        return cls(origin, x_dir, y_dir)

    @classmethod
    def from_components(cls, values) -> "Plane3d":
        """Build from ``[origin, x_direction, y_direction]`` component lists."""
        if len(values) != 3:
            raise ValueError(f"Plane3d needs origin and two directions, got {values!r}")
        return cls(Point3d.from_components(values[0]),
                   Direction3d.from_components(values[1]),
                   Direction3d.from_components(values[2]))

    def components(self):
        return (self.origin.components(),
                self.x_direction.components(),
                self.y_direction.components())

    @property
    def normal_direction(self) -> Direction3d:
        normal = self.x_direction.cross(self.y_direction).direction()
        if normal is None:
            raise ValueError(f"plane directions are parallel: {self!r}")
        return normal

    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.normal_direction)

    def signed_distance_to(self, p: Point3d) -> float:
        """Distance of ``p`` from the plane, positive on the normal side."""
        return p.vector_from(self.origin).dot(self.normal_direction)

    def offset_by(self, distance: float) -> "Plane3d":
        """Plane moved ``distance`` along its normal."""
        return self.move_to(self.origin.plus(self.normal_direction.times(distance)))

    def flip(self) -> "Plane3d":
        """Same plane with the normal reversed; the X direction is kept."""
        return Plane3d(self.origin, self.x_direction, self.y_direction.negated())

    def move_to(self, origin: Point3d) -> "Plane3d":
        return Plane3d(origin, self.x_direction, self.y_direction)


Plane3d.XY = Plane3d(Point3d.ORIGIN, Direction3d.X, Direction3d.Y)
Plane3d.YZ = Plane3d(Point3d.ORIGIN, Direction3d.Y, Direction3d.Z)
Plane3d.ZX = Plane3d(Point3d.ORIGIN, Direction3d.Z, Direction3d.X)
