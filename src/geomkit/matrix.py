## homogeneous 4x4 matrices for geomkit transformations

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

"""4x4 matrices acting on homogeneous 3D coordinates.

A matrix is stored as a tuple of four rows.  Homogeneous vectors are
four-element sequences ``[x, y, z, w]`` and are treated as column
vectors, so ``M.mul(v)`` computes ``Mv``.  Points are lifted with
``w = 1`` and pick up the translation column; displacement vectors
are lifted with ``w = 0`` and do not.

Matrices are immutable; every operation returns a new matrix.
"""

from __future__ import annotations

from math import cos, sin, sqrt
from typing import Sequence, Tuple

from geomkit.tolerance import close, epsilon, isgoodnum

__all__ = [
    "Matrix",
    "IDENTITY",
    "Rotation",
    "Translation",
    "Scale",
    "Mirror",
    "dot4",
]

Row = Tuple[float, float, float, float]


def dot4(a: Sequence[float], b: Sequence[float]) -> float:
    """4 vector dot product"""
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


def _isvect4(x) -> bool:
    return isinstance(x, (list, tuple)) and len(x) == 4 and all(isgoodnum(c) for c in x)


class Matrix:
    """4x4 transformation matrix for transforming homogeneous 3D coordinates"""

    __slots__ = ("m",)

    def __init__(self, a=None):
        if a is None:
            rows = ((1.0, 0.0, 0.0, 0.0),
                    (0.0, 1.0, 0.0, 0.0),
                    (0.0, 0.0, 1.0, 0.0),
                    (0.0, 0.0, 0.0, 1.0))
        elif isinstance(a, Matrix):
            rows = a.m
        elif isinstance(a, (tuple, list)) and len(a) == 4:
            for r in a:
                if not _isvect4(r):
                    raise ValueError('bad row in matrix initialization: {}'.format(r))
            rows = tuple(tuple(float(x) for x in r) for r in a)
        elif isinstance(a, (tuple, list)) and len(a) == 16:
            for x in a:
                if not isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
            rows = tuple(tuple(float(a[i*4+j]) for j in range(4)) for i in range(4))
        else:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        object.__setattr__(self, "m", rows)

    def __setattr__(self, name, value):
        raise AttributeError("Matrix is immutable")

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    def __hash__(self):
        return hash(self.m)

    #return value indexed by i,j
    def get(self, i: int, j: int) -> float:
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i: int) -> Row:
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self, j: int) -> Row:
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return (self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j])

    def transpose(self) -> "Matrix":
        return Matrix([self.getcol(j) for j in range(4)])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # homogeneous vector, compute Mx. If x is a scalar, compute xM.
    def mul(self, x):
        if isinstance(x, Matrix):
            return Matrix([[dot4(self.m[i], x.getcol(j)) for j in range(4)]
                           for i in range(4)])
        elif _isvect4(x):
            return [dot4(self.m[i], x) for i in range(4)]
        elif isgoodnum(x):
            return Matrix([[c * x for c in row] for row in self.m])
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def apply_point(self, x: float, y: float, z: float) -> Tuple[float, float, float]:
        """Transform the position ``(x, y, z)`` (w = 1)."""
        r = self.mul([x, y, z, 1.0])
        if r[3] != 1.0:
            return (r[0] / r[3], r[1] / r[3], r[2] / r[3])
        return (r[0], r[1], r[2])

    def apply_vector(self, x: float, y: float, z: float) -> Tuple[float, float, float]:
        """Transform the displacement ``(x, y, z)`` (w = 0, translation ignored)."""
        r = self.mul([x, y, z, 0.0])
        return (r[0], r[1], r[2])

    def linear_part(self) -> Tuple[Tuple[float, float, float], ...]:
        """Upper-left 3x3 block."""
        return tuple(tuple(self.m[i][:3]) for i in range(3))

    def determinant3(self) -> float:
        """Determinant of the linear part."""
        (a, b, c), (d, e, f), (g, h, i) = self.linear_part()
        return a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)

    def is_identity(self, tol: float = 0.0) -> bool:
        return all(abs(self.m[i][j] - (1.0 if i == j else 0.0)) <= tol
                   for i in range(4) for j in range(4))

    def keeps_xy_plane(self, tol: float = 0.0) -> bool:
        """True if points with z = 0 are mapped to points with z = 0."""
        m = self.m
        return (abs(m[2][0]) <= tol and abs(m[2][1]) <= tol and abs(m[2][3]) <= tol
                and m[3] == (0.0, 0.0, 0.0, 1.0))


IDENTITY = Matrix()


# return the generalized 4x4 arbitrary axis rotation matrix.  angle
# is in radians, counterclockwise when looking down the axis.
def Rotation(axis: Sequence[float], angle: float, inverse: bool = False) -> Matrix:
    m = sqrt(axis[0]*axis[0] + axis[1]*axis[1] + axis[2]*axis[2])
    if m < epsilon():
        raise ValueError('zero-length rotation axis not allowed')
    ux, uy, uz = axis[0], axis[1], axis[2]
    if not close(m, 1.0):
        ux, uy, uz = ux/m, uy/m, uz/m

    if inverse:
        angle = -angle

    cang = cos(angle)
    sang = sin(angle)
    cmin = 1.0 - cang

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0.0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0.0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0.0],
         [0.0, 0.0, 0.0, 1.0]]

    return Matrix(R)


def Translation(delta: Sequence[float], inverse: bool = False) -> Matrix:
    dx, dy, dz = delta[0], delta[1], delta[2]
    if inverse:
        dx, dy, dz = -dx, -dy, -dz
    T = [[1.0, 0.0, 0.0, dx],
         [0.0, 1.0, 0.0, dy],
         [0.0, 0.0, 1.0, dz],
         [0.0, 0.0, 0.0, 1.0]]
    return Matrix(T)


def Scale(x, y=None, z=None, inverse: bool = False) -> Matrix:
    if isgoodnum(x):
        sx = x
        if isgoodnum(y) and isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, (list, tuple)) and len(x) >= 3:
        sx, sy, sz = x[0], x[1], x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        if sx == 0 or sy == 0 or sz == 0:
            raise ValueError('cannot invert a scaling with a zero factor')
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0.0, 0.0, 0.0],
         [0.0, sy, 0.0, 0.0],
         [0.0, 0.0, sz, 0.0],
         [0.0, 0.0, 0.0, 1.0]]
    return Matrix(S)


# reflection through the plane containing point p with unit normal n:
# x' = x - 2 ((x - p) . n) n
def Mirror(p: Sequence[float], n: Sequence[float]) -> Matrix:
    nx, ny, nz = n[0], n[1], n[2]
    d = p[0]*nx + p[1]*ny + p[2]*nz
    M = [[1.0 - 2*nx*nx, -2*nx*ny, -2*nx*nz, 2*d*nx],
         [-2*ny*nx, 1.0 - 2*ny*ny, -2*ny*nz, 2*d*ny],
         [-2*nz*nx, -2*nz*ny, 1.0 - 2*nz*nz, 2*d*nz],
         [0.0, 0.0, 0.0, 1.0]]
    return Matrix(M)
