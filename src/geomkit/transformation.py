## composable affine transformations for geomkit

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

"""Affine transformations of geomkit geometry.

Transformations are tagged, immutable values that carry their own
parameters:

- ``Identity()``
- ``Translation(vector)``
- ``Rotation(center, axis, angle)`` -- ``angle`` in radians,
  counterclockwise looking down ``axis``
- ``Mirror(origin, normal)`` -- reflection through a plane
- ``Scaling(center, factors)`` -- per-axis factors about a point
- ``Composition(steps)`` -- ``steps`` applied in order

Because the parameters are kept, transformations can be inspected,
inverted, compared and serialized.  The 4x4 homogeneous matrix of a
transformation is derived on demand from a dispatch table keyed by
tag, and ``transform()`` applies it to any geometry through a second
dispatch table keyed by geometry type:

- points use the full affine map (w = 1);
- vectors use the linear part only, so translations leave them alone;
- directions use the linear part and are renormalized.  This is only
  allowed for transformations that scale uniformly; anything else
  would change angles between directions and raises ``ValueError``;
- axes, frames and planes map their origin as a point and their
  directions as directions;
- bounding boxes become the hull of their transformed corners.

2D geometry is transformed by embedding it in the z = 0 plane.  The
2D constructors (``translation``, ``rotation_about``,
``mirror_across``, ``scaling_about`` given 2D arguments) always
produce transformations that keep that plane; applying any other
transformation to 2D geometry raises ``ValueError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Tuple, Union

import geomkit.matrix as xform
from geomkit.axis import Axis2d, Axis3d
from geomkit.bounding_box import BoundingBox2d, BoundingBox3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.frame import Frame2d, Frame3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d
from geomkit.tolerance import epsilon, isgoodnum
from geomkit.vector import Vector2d, Vector3d

__all__ = [
    "Identity",
    "Translation",
    "Rotation",
    "Mirror",
    "Scaling",
    "Composition",
    "Transformation",
    "IDENTITY",
    "translation",
    "rotation_about",
    "rotation_around",
    "mirror_across",
    "scaling_about",
    "scaling",
    "compose",
    "inverse",
    "matrix_of",
    "is_rigid",
    "is_uniform",
    "transform",
]


## the tags
## --------

@dataclass(frozen=True)
class Identity:
    pass


@dataclass(frozen=True)
class Translation:
    vector: Vector3d


@dataclass(frozen=True)
class Rotation:
    center: Point3d
    axis: Direction3d
    angle: float


@dataclass(frozen=True)
class Mirror:
    origin: Point3d
    normal: Direction3d


@dataclass(frozen=True)
class Scaling:
    center: Point3d
    factors: Tuple[float, float, float]

    def __post_init__(self):
        if len(self.factors) != 3 or not all(isgoodnum(f) for f in self.factors):
            raise ValueError('bad scaling factors: {}'.format(self.factors))


@dataclass(frozen=True)
class Composition:
    steps: Tuple["Transformation", ...]


Transformation = Union[Identity, Translation, Rotation, Mirror, Scaling, Composition]

IDENTITY = Identity()


## constructors
## ------------

def _point3(p) -> Point3d:
    return p.with_z() if isinstance(p, Point2d) else p


def translation(v: Union[Vector2d, Vector3d]) -> Translation:
    if isinstance(v, Vector2d):
        v = v.with_z()
    return Translation(v)


def rotation_about(center: Union[Point2d, Point3d], angle: float) -> Rotation:
    """Counterclockwise rotation in the XY plane about ``center``."""
    return Rotation(_point3(center), Direction3d.Z, angle)


def rotation_around(axis: Axis3d, angle: float) -> Rotation:
    """Right-handed rotation by ``angle`` radians around a 3D axis."""
    return Rotation(axis.origin, axis.direction, angle)


def mirror_across(mirror: Union[Axis2d, Plane3d]) -> Mirror:
    """Reflection across a 2D axis (a line in the XY plane) or a 3D plane."""
    if isinstance(mirror, Axis2d):
        normal = mirror.direction.perpendicular_direction().with_z()
        return Mirror(mirror.origin.with_z(), normal)
    if isinstance(mirror, Plane3d):
        return Mirror(mirror.origin, mirror.normal_direction)
    raise ValueError('bad mirror passed to mirror_across: {}'.format(mirror))


def scaling_about(center: Union[Point2d, Point3d], factor: float) -> Scaling:
    """Uniform scaling about ``center``."""
    return Scaling(_point3(center), (factor, factor, factor))


def scaling(center: Point3d, sx: float, sy: float, sz: float) -> Scaling:
    """Per-axis scaling about ``center``; must not be applied to directions."""
    return Scaling(center, (sx, sy, sz))


def compose(*transformations: Transformation) -> Transformation:
    """Transformation applying each argument in turn, first argument first."""
    steps = []
    for t in transformations:
        if isinstance(t, Composition):
            steps.extend(t.steps)
        elif not isinstance(t, Identity):
            steps.append(t)
    if not steps:
        return IDENTITY
    if len(steps) == 1:
        return steps[0]
    return Composition(tuple(steps))


## matrices
## --------

def _about(center: Point3d, m: xform.Matrix) -> xform.Matrix:
    if center == Point3d.ORIGIN:
        return m
    c = center.components()
    return xform.Translation(c).mul(m).mul(xform.Translation(c, inverse=True))


_MATRIX_BUILDERS: Dict[type, Callable[..., xform.Matrix]] = {
    Identity: lambda t: xform.IDENTITY,
    Translation: lambda t: xform.Translation(t.vector.components()),
    Rotation: lambda t: _about(t.center, xform.Rotation(t.axis.components(), t.angle)),
    Mirror: lambda t: xform.Mirror(t.origin.components(), t.normal.components()),
    Scaling: lambda t: _about(t.center, xform.Scale(*t.factors)),
    ## later steps multiply on the left
    Composition: lambda t: reduce(lambda acc, s: matrix_of(s).mul(acc), t.steps, xform.IDENTITY),
}


def matrix_of(t: Transformation) -> xform.Matrix:
    """Homogeneous 4x4 matrix of a transformation."""
    try:
        builder = _MATRIX_BUILDERS[type(t)]
    except KeyError:
        raise ValueError('bad transformation: {}'.format(t)) from None
    return builder(t)


## classification and inversion
## ----------------------------

def is_rigid(t: Transformation) -> bool:
    """True if ``t`` preserves lengths (rotations, translations, mirrors)."""
    if isinstance(t, Scaling):
        return all(abs(f) == 1.0 for f in t.factors)
    if isinstance(t, Composition):
        return all(is_rigid(s) for s in t.steps)
    return True


def is_uniform(t: Transformation) -> bool:
    """True if ``t`` scales every direction by the same nonzero amount."""
    if isinstance(t, Scaling):
        a = abs(t.factors[0])
        return a != 0.0 and all(abs(f) == a for f in t.factors)
    if isinstance(t, Composition):
        return all(is_uniform(s) for s in t.steps)
    return True


_INVERTERS: Dict[type, Callable[..., Transformation]] = {
    Identity: lambda t: t,
    Translation: lambda t: Translation(t.vector.negated()),
    Rotation: lambda t: Rotation(t.center, t.axis, -t.angle),
    Mirror: lambda t: t,
    Scaling: lambda t: Scaling(t.center, tuple(1.0 / f for f in t.factors)),
    Composition: lambda t: Composition(tuple(inverse(s) for s in reversed(t.steps))),
}


def inverse(t: Transformation) -> Transformation:
    """The transformation undoing ``t``; scalings with a zero factor have none."""
    if isinstance(t, Scaling) and any(f == 0 for f in t.factors):
        raise ValueError('cannot invert a scaling with a zero factor')
    try:
        inverter = _INVERTERS[type(t)]
    except KeyError:
        raise ValueError('bad transformation: {}'.format(t)) from None
    return inverter(t)


## application
## -----------

def _point(m, p: Point3d) -> Point3d:
    return Point3d(*m.apply_point(p.x, p.y, p.z))


def _vector(m, v: Vector3d) -> Vector3d:
    return Vector3d(*m.apply_vector(v.x, v.y, v.z))


def _direction(m, d: Direction3d) -> Direction3d:
    moved = Direction3d.of(_vector(m, d.vector()))
    if moved is None:
        raise ValueError('transformation collapses direction {}'.format(d))
    return moved


def _point2(m, p: Point2d) -> Point2d:
    x, y, _ = m.apply_point(p.x, p.y, 0.0)
    return Point2d(x, y)


def _vector2(m, v: Vector2d) -> Vector2d:
    x, y, _ = m.apply_vector(v.x, v.y, 0.0)
    return Vector2d(x, y)


def _direction2(m, d: Direction2d) -> Direction2d:
    moved = Direction2d.of(_vector2(m, d.vector()))
    if moved is None:
        raise ValueError('transformation collapses direction {}'.format(d))
    return moved


_APPLIERS: Dict[type, Callable] = {
    Point3d: _point,
    Vector3d: _vector,
    Direction3d: _direction,
    Axis3d: lambda m, a: Axis3d(_point(m, a.origin), _direction(m, a.direction)),
    Frame3d: lambda m, f: Frame3d(_point(m, f.origin), _direction(m, f.x_direction),
                                  _direction(m, f.y_direction), _direction(m, f.z_direction)),
    Plane3d: lambda m, p: Plane3d(_point(m, p.origin), _direction(m, p.x_direction),
                                  _direction(m, p.y_direction)),
    BoundingBox3d: lambda m, b: BoundingBox3d.containing(_point(m, c) for c in b.corners()),
    Point2d: _point2,
    Vector2d: _vector2,
    Direction2d: _direction2,
    Axis2d: lambda m, a: Axis2d(_point2(m, a.origin), _direction2(m, a.direction)),
    Frame2d: lambda m, f: Frame2d(_point2(m, f.origin), _direction2(m, f.x_direction),
                                  _direction2(m, f.y_direction)),
    BoundingBox2d: lambda m, b: BoundingBox2d.containing(_point2(m, c) for c in b.corners()),
}

_TWO_D = (Point2d, Vector2d, Direction2d, Axis2d, Frame2d, BoundingBox2d)
_HAS_DIRECTIONS = (Direction2d, Direction3d, Axis2d, Axis3d, Frame2d, Frame3d, Plane3d)


def transform(t: Transformation, g):
    """Apply transformation ``t`` to geometry ``g`` and return the new geometry."""
    try:
        applier = _APPLIERS[type(g)]
    except KeyError:
        raise ValueError("don't know how to transform {}".format(g)) from None
    if isinstance(t, Identity):
        return g
    if isinstance(g, _HAS_DIRECTIONS) and not is_uniform(t):
        raise ValueError('non-uniform scaling cannot be applied to directions: {}'.format(t))
    m = matrix_of(t)
    if isinstance(g, _TWO_D) and not m.keeps_xy_plane(epsilon()):
        raise ValueError('transformation does not keep the XY plane: {}'.format(t))
    return applier(m, g)
