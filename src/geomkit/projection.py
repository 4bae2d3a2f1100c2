## relative coordinates, placement and projection for geomkit

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

"""Moving geometry between coordinate systems.

``relative_to(frame, g)`` expresses global geometry ``g`` in the local
coordinates of ``frame``; ``place_in(frame, g)`` takes local geometry
back to global coordinates.  Both work by dot products and linear
combinations against the frame's basis directions, so they are exact
inverses only for orthonormal frames (the usual caller obligation).

Projection comes in three flavours:

- ``project_onto(axis_or_plane, g)`` -- orthogonal projection onto an
  axis or plane, staying in the same dimension;
- ``projected_onto_plane(plane, g)`` -- 3D geometry flattened onto the
  plane, still 3D;
- ``projected_into_plane(plane, g)`` -- 3D geometry re-expressed in the
  plane's own 2D coordinates.

``place_onto(plane, g)`` is the reverse of ``projected_into_plane``:
it lifts 2D geometry into 3D using the plane's basis.

Projecting a direction can degenerate, when the direction is
perpendicular to the axis or normal to the plane.  Those projections
return ``None``, and so do axis projections built on them.
"""

from __future__ import annotations

from typing import Optional

from geomkit.axis import Axis2d, Axis3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.frame import Frame2d, Frame3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d
from geomkit.tolerance import epsilon
from geomkit.vector import Vector2d, Vector3d

__all__ = [
    "relative_to",
    "place_in",
    "project_onto",
    "place_onto",
    "projected_onto_plane",
    "projected_into_plane",
]


def _unit2(v: Vector2d) -> Direction2d:
    d = v.direction()
    if d is None:
        raise ValueError('degenerate frame basis maps a direction to zero')
    return d


def _unit3(v: Vector3d) -> Direction3d:
    d = v.direction()
    if d is None:
        raise ValueError('degenerate frame basis maps a direction to zero')
    return d


## relative_to
## -----------

def _local2(frame: Frame2d, v) -> Vector2d:
    return Vector2d(v.dot(frame.x_direction), v.dot(frame.y_direction))


def _local3(frame: Frame3d, v) -> Vector3d:
    return Vector3d(v.dot(frame.x_direction), v.dot(frame.y_direction), v.dot(frame.z_direction))


def _relative_to_2d(frame: Frame2d, g):
    if isinstance(g, Vector2d):
        return _local2(frame, g)
    elif isinstance(g, Direction2d):
        return _unit2(_local2(frame, g))
    elif isinstance(g, Point2d):
        return Point2d(*_local2(frame, g.vector_from(frame.origin)).components())
    elif isinstance(g, Axis2d):
        return Axis2d(_relative_to_2d(frame, g.origin), _relative_to_2d(frame, g.direction))
    elif isinstance(g, Frame2d):
        return Frame2d(_relative_to_2d(frame, g.origin),
                       _relative_to_2d(frame, g.x_direction),
                       _relative_to_2d(frame, g.y_direction))
    raise ValueError("don't know how to express {} relative to a 2D frame".format(g))


def _relative_to_3d(frame: Frame3d, g):
    if isinstance(g, Vector3d):
        return _local3(frame, g)
    elif isinstance(g, Direction3d):
        return _unit3(_local3(frame, g))
    elif isinstance(g, Point3d):
        return Point3d(*_local3(frame, g.vector_from(frame.origin)).components())
    elif isinstance(g, Axis3d):
        return Axis3d(_relative_to_3d(frame, g.origin), _relative_to_3d(frame, g.direction))
    elif isinstance(g, Frame3d):
        return Frame3d(_relative_to_3d(frame, g.origin),
                       _relative_to_3d(frame, g.x_direction),
                       _relative_to_3d(frame, g.y_direction),
                       _relative_to_3d(frame, g.z_direction))
    elif isinstance(g, Plane3d):
        return Plane3d(_relative_to_3d(frame, g.origin),
                       _relative_to_3d(frame, g.x_direction),
                       _relative_to_3d(frame, g.y_direction))
    raise ValueError("don't know how to express {} relative to a 3D frame".format(g))


def relative_to(frame, g):
    """Express global geometry ``g`` in the local coordinates of ``frame``."""
    if isinstance(frame, Frame2d):
        return _relative_to_2d(frame, g)
    elif isinstance(frame, Frame3d):
        return _relative_to_3d(frame, g)
    raise ValueError('bad frame passed to relative_to: {}'.format(frame))


## place_in
## --------

def _global2(frame: Frame2d, v) -> Vector2d:
    return frame.x_direction.times(v.x).plus(frame.y_direction.times(v.y))


def _global3(frame: Frame3d, v) -> Vector3d:
    return (frame.x_direction.times(v.x)
            .plus(frame.y_direction.times(v.y))
            .plus(frame.z_direction.times(v.z)))


def _place_in_2d(frame: Frame2d, g):
    if isinstance(g, Vector2d):
        return _global2(frame, g)
    elif isinstance(g, Direction2d):
        return _unit2(_global2(frame, g))
    elif isinstance(g, Point2d):
        return frame.origin.plus(_global2(frame, g))
    elif isinstance(g, Axis2d):
        return Axis2d(_place_in_2d(frame, g.origin), _place_in_2d(frame, g.direction))
    elif isinstance(g, Frame2d):
        return Frame2d(_place_in_2d(frame, g.origin),
                       _place_in_2d(frame, g.x_direction),
                       _place_in_2d(frame, g.y_direction))
    raise ValueError("don't know how to place {} in a 2D frame".format(g))


def _place_in_3d(frame: Frame3d, g):
    if isinstance(g, Vector3d):
        return _global3(frame, g)
    elif isinstance(g, Direction3d):
        return _unit3(_global3(frame, g))
    elif isinstance(g, Point3d):
        return frame.origin.plus(_global3(frame, g))
    elif isinstance(g, Axis3d):
        return Axis3d(_place_in_3d(frame, g.origin), _place_in_3d(frame, g.direction))
    elif isinstance(g, Frame3d):
        return Frame3d(_place_in_3d(frame, g.origin),
                       _place_in_3d(frame, g.x_direction),
                       _place_in_3d(frame, g.y_direction),
                       _place_in_3d(frame, g.z_direction))
    elif isinstance(g, Plane3d):
        return Plane3d(_place_in_3d(frame, g.origin),
                       _place_in_3d(frame, g.x_direction),
                       _place_in_3d(frame, g.y_direction))
    raise ValueError("don't know how to place {} in a 3D frame".format(g))


def place_in(frame, g):
    """Take geometry ``g`` given in ``frame``'s local coordinates to global coordinates."""
    if isinstance(frame, Frame2d):
        return _place_in_2d(frame, g)
    elif isinstance(frame, Frame3d):
        return _place_in_3d(frame, g)
    raise ValueError('bad frame passed to place_in: {}'.format(frame))


## projection onto an axis
## -----------------------

def _project_onto_axis(axis, g):
    d = axis.direction
    if isinstance(g, (Vector2d, Vector3d)):
        return d.times(g.dot(d))
    elif isinstance(g, (Point2d, Point3d)):
        return axis.origin.plus(d.times(g.vector_from(axis.origin).dot(d)))
    raise ValueError("don't know how to project {} onto an axis".format(g))


def project_onto(target, g):
    """Orthogonal projection of ``g`` onto an axis (points, vectors) or a plane."""
    if isinstance(target, (Axis2d, Axis3d)):
        if isinstance(target, Axis2d) != isinstance(g, (Vector2d, Point2d)):
            raise ValueError('dimension mismatch projecting {} onto {}'.format(g, target))
        return _project_onto_axis(target, g)
    elif isinstance(target, Plane3d):
        return projected_onto_plane(target, g)
    raise ValueError('bad projection target: {}'.format(target))


## projection onto and into a plane
## --------------------------------

def _flat_direction(v):
    ## rounding leaves a tiny residue when a direction is normal to the plane
    if v.squared_length() < epsilon() * epsilon():
        return None
    return v.direction()


def projected_onto_plane(plane: Plane3d, g):
    """Flatten 3D geometry onto ``plane``, keeping it in 3D.

    Directions and axes perpendicular to the plane, within
    ``epsilon()``, have no projection and give ``None``.
    """
    n = plane.normal_direction
    if isinstance(g, Vector3d):
        return g.minus(n.times(g.dot(n)))
    elif isinstance(g, Direction3d):
        return _flat_direction(projected_onto_plane(plane, g.vector()))
    elif isinstance(g, Point3d):
        return g.minus(n.times(g.vector_from(plane.origin).dot(n)))
    elif isinstance(g, Axis3d):
        d = projected_onto_plane(plane, g.direction)
        if d is None:
            return None
        return Axis3d(projected_onto_plane(plane, g.origin), d)
    raise ValueError("don't know how to project {} onto a plane".format(g))


def projected_into_plane(plane: Plane3d, g):
    """Express 3D geometry in ``plane``'s 2D coordinates, dropping the normal component.

    Directions and axes perpendicular to the plane, within ``epsilon()``,
    give ``None``.
    """
    if isinstance(g, Vector3d):
        return Vector2d(g.dot(plane.x_direction), g.dot(plane.y_direction))
    elif isinstance(g, Direction3d):
        return _flat_direction(projected_into_plane(plane, g.vector()))
    elif isinstance(g, Point3d):
        return Point2d(*projected_into_plane(plane, g.vector_from(plane.origin)).components())
    elif isinstance(g, Axis3d):
        d = projected_into_plane(plane, g.direction)
        if d is None:
            return None
        return Axis2d(projected_into_plane(plane, g.origin), d)
    raise ValueError("don't know how to project {} into a plane".format(g))


def place_onto(plane: Plane3d, g):
    """Lift 2D geometry into 3D on ``plane`` using its basis directions.

    A ``Frame2d`` becomes the ``Plane3d`` spanned by its placed axes.
    """
    x_dir = plane.x_direction
    y_dir = plane.y_direction
    if isinstance(g, Vector2d):
        return x_dir.times(g.x).plus(y_dir.times(g.y))
    elif isinstance(g, Direction2d):
        return _unit3(place_onto(plane, g.vector()))
    elif isinstance(g, Point2d):
        return plane.origin.plus(place_onto(plane, Vector2d(g.x, g.y)))
    elif isinstance(g, Axis2d):
        return Axis3d(place_onto(plane, g.origin), place_onto(plane, g.direction))
    elif isinstance(g, Frame2d):
        return Plane3d(place_onto(plane, g.origin),
                       place_onto(plane, g.x_direction),
                       place_onto(plane, g.y_direction))
    raise ValueError("don't know how to place {} onto a plane".format(g))
