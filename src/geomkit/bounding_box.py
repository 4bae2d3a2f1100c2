## axis-aligned bounding boxes for geomkit

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

"""Axis-aligned bounding boxes.

A bounding box is stored as its extrema, ``min_x, max_x, min_y, max_y``
(and ``min_z, max_z`` in 3D), and is always valid: ``min <= max`` on
every axis.  Operations that can come up empty, ``intersection`` of
disjoint boxes and ``containing`` an empty point list, return ``None``
rather than an invalid box.

All interval tests are closed, so boxes that only touch at a boundary
overlap, and points on the boundary are contained.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional, Sequence, Tuple

from geomkit.point import Point2d, Point3d
from geomkit.vector import Vector2d, Vector3d, components_of

__all__ = ["BoundingBox2d", "BoundingBox3d"]


def _check_extrema(kind: str, pairs) -> None:
    for axis, (lo, hi) in zip("xyz", pairs):
        if lo > hi:
            raise ValueError(f"{kind} needs min_{axis} <= max_{axis}, got {lo!r} > {hi!r}")


def _mid(lo: float, hi: float) -> float:
    ## clamped so rounding never leaves the closed interval
    return min(max(0.5 * lo + 0.5 * hi, lo), hi)


@dataclass(frozen=True)
class BoundingBox2d:
    """Axis-aligned box in two dimensions."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        _check_extrema(type(self).__name__,
                       ((self.min_x, self.max_x), (self.min_y, self.max_y)))

    ## construction
    @classmethod
    def from_components(cls, values: Sequence[float]) -> "BoundingBox2d":
        """Build from ``[min_x, max_x, min_y, max_y]``."""
        return cls(*components_of(values, 4, cls.__name__))

    @classmethod
    def from_extrema(cls, min_x: float, max_x: float, min_y: float, max_y: float) -> "BoundingBox2d":
        return cls(min_x, max_x, min_y, max_y)

    @classmethod
    def from_corners(cls, p1: Point2d, p2: Point2d) -> "BoundingBox2d":
        """Box spanned by two opposite corners given in any order."""
        return p1.hull(p2)

    @classmethod
    def singleton(cls, p: Point2d) -> "BoundingBox2d":
        return cls(p.x, p.x, p.y, p.y)

    @classmethod
    def containing(cls, points: Iterable[Point2d]) -> Optional["BoundingBox2d"]:
        """Smallest box containing every point, or ``None`` for no points."""
        boxes = [cls.singleton(p) for p in points]
        return cls.hull_of(boxes)

    @classmethod
    def hull_of(cls, boxes: Iterable["BoundingBox2d"]) -> Optional["BoundingBox2d"]:
        """Hull of a collection of boxes, or ``None`` for an empty collection."""
        boxes = list(boxes)
        if not boxes:
            return None
        return reduce(lambda a, b: a.hull(b), boxes)

    ## accessors
    def components(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def extrema(self) -> Tuple[float, float, float, float]:
        return self.components()

    def min_point(self) -> Point2d:
        return Point2d(self.min_x, self.min_y)

    def max_point(self) -> Point2d:
        return Point2d(self.max_x, self.max_y)

    def dimensions(self) -> Tuple[float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    def centroid(self) -> Point2d:
        return Point2d(_mid(self.min_x, self.max_x), _mid(self.min_y, self.max_y))

    ## queries
    def contains(self, p: Point2d) -> bool:
        return (self.min_x <= p.x <= self.max_x and
                self.min_y <= p.y <= self.max_y)

    def is_contained_in(self, other: "BoundingBox2d") -> bool:
        return (other.min_x <= self.min_x and self.max_x <= other.max_x and
                other.min_y <= self.min_y and self.max_y <= other.max_y)

    def overlaps(self, other: "BoundingBox2d") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x and
                self.min_y <= other.max_y and other.min_y <= self.max_y)

    ## combination
    def hull(self, other: "BoundingBox2d") -> "BoundingBox2d":
        return BoundingBox2d(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                             min(self.min_y, other.min_y), max(self.max_y, other.max_y))

    def intersection(self, other: "BoundingBox2d") -> Optional["BoundingBox2d"]:
        """Overlapping region, or ``None`` exactly when the boxes do not overlap."""
        if not self.overlaps(other):
            return None
        return BoundingBox2d(max(self.min_x, other.min_x), min(self.max_x, other.max_x),
                             max(self.min_y, other.min_y), min(self.max_y, other.max_y))

    def expand_by(self, margin: float) -> "BoundingBox2d":
        """Grow every side by ``margin``; a negative margin may not invert the box."""
        return BoundingBox2d(self.min_x - margin, self.max_x + margin,
                             self.min_y - margin, self.max_y + margin)

    def translate_by(self, v: Vector2d) -> "BoundingBox2d":
        return BoundingBox2d(self.min_x + v.x, self.max_x + v.x,
                             self.min_y + v.y, self.max_y + v.y)

    def corners(self) -> Tuple[Point2d, ...]:
        return (Point2d(self.min_x, self.min_y), Point2d(self.max_x, self.min_y),
                Point2d(self.max_x, self.max_y), Point2d(self.min_x, self.max_y))


@dataclass(frozen=True)
class BoundingBox3d:
    """Axis-aligned box in three dimensions."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    def __post_init__(self):
        _check_extrema(type(self).__name__,
                       ((self.min_x, self.max_x), (self.min_y, self.max_y),
                        (self.min_z, self.max_z)))

    @classmethod
    def from_components(cls, values: Sequence[float]) -> "BoundingBox3d":
        """Build from ``[min_x, max_x, min_y, max_y, min_z, max_z]``."""
        return cls(*components_of(values, 6, cls.__name__))

    @classmethod
    def from_extrema(cls, min_x: float, max_x: float, min_y: float, max_y: float,
                     min_z: float, max_z: float) -> "BoundingBox3d":
        return cls(min_x, max_x, min_y, max_y, min_z, max_z)

    @classmethod
    def from_corners(cls, p1: Point3d, p2: Point3d) -> "BoundingBox3d":
        return p1.hull(p2)

    @classmethod
    def singleton(cls, p: Point3d) -> "BoundingBox3d":
        return cls(p.x, p.x, p.y, p.y, p.z, p.z)

    @classmethod
    def containing(cls, points: Iterable[Point3d]) -> Optional["BoundingBox3d"]:
        boxes = [cls.singleton(p) for p in points]
        return cls.hull_of(boxes)

    @classmethod
    def hull_of(cls, boxes: Iterable["BoundingBox3d"]) -> Optional["BoundingBox3d"]:
        boxes = list(boxes)
        if not boxes:
            return None
        return reduce(lambda a, b: a.hull(b), boxes)

    def components(self) -> Tuple[float, float, float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z)

    def extrema(self) -> Tuple[float, float, float, float, float, float]:
        return self.components()

    def min_point(self) -> Point3d:
        return Point3d(self.min_x, self.min_y, self.min_z)

    def max_point(self) -> Point3d:
        return Point3d(self.max_x, self.max_y, self.max_z)

    def dimensions(self) -> Tuple[float, float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)

    def centroid(self) -> Point3d:
        return Point3d(_mid(self.min_x, self.max_x),
                       _mid(self.min_y, self.max_y),
                       _mid(self.min_z, self.max_z))

    def contains(self, p: Point3d) -> bool:
        return (self.min_x <= p.x <= self.max_x and
                self.min_y <= p.y <= self.max_y and
                self.min_z <= p.z <= self.max_z)

    def is_contained_in(self, other: "BoundingBox3d") -> bool:
        return (other.min_x <= self.min_x and self.max_x <= other.max_x and
                other.min_y <= self.min_y and self.max_y <= other.max_y and
                other.min_z <= self.min_z and self.max_z <= other.max_z)

    def overlaps(self, other: "BoundingBox3d") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x and
                self.min_y <= other.max_y and other.min_y <= self.max_y and
                self.min_z <= other.max_z and other.min_z <= self.max_z)

    def hull(self, other: "BoundingBox3d") -> "BoundingBox3d":
        return BoundingBox3d(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                             min(self.min_y, other.min_y), max(self.max_y, other.max_y),
                             min(self.min_z, other.min_z), max(self.max_z, other.max_z))

    def intersection(self, other: "BoundingBox3d") -> Optional["BoundingBox3d"]:
        if not self.overlaps(other):
            return None
        return BoundingBox3d(max(self.min_x, other.min_x), min(self.max_x, other.max_x),
                             max(self.min_y, other.min_y), min(self.max_y, other.max_y),
                             max(self.min_z, other.min_z), min(self.max_z, other.max_z))

    def expand_by(self, margin: float) -> "BoundingBox3d":
        return BoundingBox3d(self.min_x - margin, self.max_x + margin,
                             self.min_y - margin, self.max_y + margin,
                             self.min_z - margin, self.max_z + margin)

    def translate_by(self, v: Vector3d) -> "BoundingBox3d":
        return BoundingBox3d(self.min_x + v.x, self.max_x + v.x,
                             self.min_y + v.y, self.max_y + v.y,
                             self.min_z + v.z, self.max_z + v.z)

    def corners(self) -> Tuple[Point3d, ...]:
        return tuple(Point3d(x, y, z)
                     for z in (self.min_z, self.max_z)
                     for y in (self.min_y, self.max_y)
                     for x in (self.min_x, self.max_x))

    def xy(self) -> BoundingBox2d:
        """Projection of this box onto the XY plane."""
        return BoundingBox2d(self.min_x, self.max_x, self.min_y, self.max_y)
