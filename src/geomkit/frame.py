## local coordinate frames for geomkit

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

"""Frames are local coordinate systems.

A frame is an origin point plus a basis of directions.  The basis is
expected to be orthonormal; this is an obligation of the caller and
is not checked on construction unless debug validation is enabled
(``GEOMKIT_VALIDATE_FRAMES``, see ``geomkit.tolerance``).  Flipped and
mirrored frames are left-handed and remain valid.
``relative_to``/``place_in`` in ``geomkit.projection`` rely on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from geomkit.axis import Axis2d, Axis3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d
from geomkit.tolerance import validate_frames

__all__ = ["Frame2d", "Frame3d"]


def _maybe_validate(frame) -> None:
    if validate_frames():
        from geomkit.geometry_checks import ensure_orthonormal

        ensure_orthonormal(frame)


@dataclass(frozen=True)
class Frame2d:
    origin: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    XY: ClassVar["Frame2d"]

    def __post_init__(self):
        _maybe_validate(self)

    @classmethod
    def at(cls, origin: Point2d) -> "Frame2d":
        """Frame at ``origin`` with global X and Y directions."""
        return cls(origin, Direction2d.X, Direction2d.Y)

    @classmethod
    def with_x_direction(cls, origin: Point2d, x_direction: Direction2d) -> "Frame2d":
        """Right-handed frame whose Y direction is ``x_direction`` rotated 90 degrees."""
        return cls(origin, x_direction, x_direction.perpendicular_direction())

    @classmethod
    def from_components(cls, values) -> "Frame2d":
        """Build from ``[origin, x_direction, y_direction]`` component lists."""
        if len(values) != 3:
            raise ValueError(f"Frame2d needs origin and two directions, got {values!r}")
        return cls(Point2d.from_components(values[0]),
                   Direction2d.from_components(values[1]),
                   Direction2d.from_components(values[2]))

    def components(self):
        return (self.origin.components(),
                self.x_direction.components(),
                self.y_direction.components())

    def x_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.x_direction)

    def y_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.y_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction) > 0.0

    def flip_x(self) -> "Frame2d":
        return Frame2d(self.origin, self.x_direction.negated(), self.y_direction)

    def flip_y(self) -> "Frame2d":
        return Frame2d(self.origin, self.x_direction, self.y_direction.negated())

    def move_to(self, origin: Point2d) -> "Frame2d":
        return Frame2d(origin, self.x_direction, self.y_direction)


@dataclass(frozen=True)
class Frame3d:
    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    XYZ: ClassVar["Frame3d"]

    def __post_init__(self):
        _maybe_validate(self)

    @classmethod
    def at(cls, origin: Point3d) -> "Frame3d":
        return cls(origin, Direction3d.X, Direction3d.Y, Direction3d.Z)

    @classmethod
    def with_z_direction(cls, origin: Point3d, z_direction: Direction3d) -> "Frame3d":
        """Right-handed frame with the given Z direction and arbitrary X and Y."""
        x_dir, y_dir = z_direction.perpendicular_basis()
        return cls(origin, x_dir, y_dir, z_direction)

    @classmethod
    def from_components(cls, values) -> "Frame3d":
        """Build from ``[origin, x_direction, y_direction, z_direction]`` component lists."""
        if len(values) != 4:
            raise ValueError(f"Frame3d needs origin and three directions, got {values!r}")
        return cls(Point3d.from_components(values[0]),
                   Direction3d.from_components(values[1]),
                   Direction3d.from_components(values[2]),
                   Direction3d.from_components(values[3]))

    def components(self):
        return (self.origin.components(),
                self.x_direction.components(),
                self.y_direction.components(),
                self.z_direction.components())

    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.y_direction)

    def z_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.z_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).dot(self.z_direction) > 0.0

    def xy_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.x_direction, self.y_direction)

    def yz_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.y_direction, self.z_direction)

    def zx_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.z_direction, self.x_direction)

    def flip_x(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction.negated(), self.y_direction, self.z_direction)

    def flip_y(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction, self.y_direction.negated(), self.z_direction)

    def flip_z(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction, self.y_direction, self.z_direction.negated())

    def move_to(self, origin: Point3d) -> "Frame3d":
        return Frame3d(origin, self.x_direction, self.y_direction, self.z_direction)


Frame2d.XY = Frame2d(Point2d.ORIGIN, Direction2d.X, Direction2d.Y)
Frame3d.XYZ = Frame3d(Point3d.ORIGIN, Direction3d.X, Direction3d.Y, Direction3d.Z)
