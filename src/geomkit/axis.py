## axes (origin plus direction) for geomkit

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

"""An axis is an infinite directed line: an origin point and a direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from geomkit.direction import Direction2d, Direction3d
from geomkit.point import Point2d, Point3d

__all__ = ["Axis2d", "Axis3d"]


@dataclass(frozen=True)
class Axis2d:
    origin: Point2d
    direction: Direction2d

    X: ClassVar["Axis2d"]
    Y: ClassVar["Axis2d"]

    @classmethod
    def from_components(cls, values) -> "Axis2d":
        """Build from ``[origin_components, direction_components]``."""
        if len(values) != 2:
            raise ValueError(f"Axis2d needs origin and direction, got {values!r}")
        return cls(Point2d.from_components(values[0]), Direction2d.from_components(values[1]))

    def components(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return (self.origin.components(), self.direction.components())

    def point_at(self, distance: float) -> Point2d:
        return self.origin.plus(self.direction.times(distance))

    def flip(self) -> "Axis2d":
        return Axis2d(self.origin, self.direction.negated())

    def move_to(self, origin: Point2d) -> "Axis2d":
        return Axis2d(origin, self.direction)

    def with_z(self) -> "Axis3d":
        return Axis3d(self.origin.with_z(), self.direction.with_z())


@dataclass(frozen=True)
class Axis3d:
    origin: Point3d
    direction: Direction3d

    X: ClassVar["Axis3d"]
    Y: ClassVar["Axis3d"]
    Z: ClassVar["Axis3d"]

    @classmethod
    def from_components(cls, values) -> "Axis3d":
        if len(values) != 2:
            raise ValueError(f"Axis3d needs origin and direction, got {values!r}")
        return cls(Point3d.from_components(values[0]), Direction3d.from_components(values[1]))

    def components(self):
        return (self.origin.components(), self.direction.components())

    def point_at(self, distance: float) -> Point3d:
        return self.origin.plus(self.direction.times(distance))

    def flip(self) -> "Axis3d":
        return Axis3d(self.origin, self.direction.negated())

    def move_to(self, origin: Point3d) -> "Axis3d":
        return Axis3d(origin, self.direction)


Axis2d.X = Axis2d(Point2d.ORIGIN, Direction2d.X)
Axis2d.Y = Axis2d(Point2d.ORIGIN, Direction2d.Y)

Axis3d.X = Axis3d(Point3d.ORIGIN, Direction3d.X)
Axis3d.Y = Axis3d(Point3d.ORIGIN, Direction3d.Y)
Axis3d.Z = Axis3d(Point3d.ORIGIN, Direction3d.Z)
