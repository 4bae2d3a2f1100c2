import math

import pytest
from hypothesis import given

from geomkit.bounding_box import BoundingBox2d, BoundingBox3d
from geomkit.point import Point2d, Point3d
from geomkit.vector import Vector2d, Vector3d

from strategies import points2d, points3d
## unit tests for geomkit point.py


class TestPoint:
    """unit tests for affine point arithmetic"""

    def test_point_vector_arithmetic(self):
        p = Point2d(1, 2)
        q = Point2d(4, 6)
        v = Vector2d(1, 1)
        assert q - p == Vector2d(3, 4)
        assert p + v == Point2d(2, 3)
        assert p - v == Point2d(0, 1)
        assert p.plus(v) == p + v
        assert p.vector_to(q) == Vector2d(3, 4)
        assert p.vector_from(q) == Vector2d(-3, -4)

    def test_points_do_not_add(self):
        with pytest.raises(TypeError):
            Point2d(1, 2) + Point2d(3, 4)
        with pytest.raises(TypeError):
            Point3d(1, 2, 3) + Point3d(3, 4, 5)
        with pytest.raises(TypeError):
            Point3d(1, 2, 3) + Vector2d(1, 1)

    def test_distance(self):
        p = Point2d(1, 2)
        q = Point2d(4, 6)
        assert p.squared_distance_to(q) == 25
        assert p.distance_to(q) == 5
        assert Point3d(1, 2, 3).distance_to(Point3d(3, 5, 9)) == 7

    def test_interpolate(self):
        p = Point3d(0, 0, 0)
        q = Point3d(2, 4, 6)
        assert p.interpolate(q, 0.25) == Point3d(0.5, 1, 1.5)
        assert p.midpoint(q) == Point3d(1, 2, 3)
        assert p.interpolate(q, 0) == p
        assert p.interpolate(q, 1) == q

    def test_polar(self):
        p = Point2d.from_polar(2, math.pi)
        assert p.is_close(Point2d(-2, 0))

    def test_hull(self):
        box = Point2d(3, -1).hull(Point2d(1, 2))
        assert box == BoundingBox2d(1, 3, -1, 2)
        box3 = Point3d(3, -1, 0).hull(Point3d(1, 2, -5))
        assert box3 == BoundingBox3d(1, 3, -1, 2, -5, 0)

    def test_dimension_change(self):
        assert Point2d(1, 2).with_z(3) == Point3d(1, 2, 3)
        assert Point3d(1, 2, 3).xy() == Point2d(1, 2)
        assert Point3d.from_components([1, 2, 3]).components() == (1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            Point2d.from_components([1, 2, 3])


@given(points2d, points2d)
def test_difference_then_sum(p, q):
    assert (q + (p - q)).is_close(p, 1e-9)


@given(points3d, points3d)
def test_hull_contains_both_points(p, q):
    box = p.hull(q)
    assert box.contains(p)
    assert box.contains(q)
