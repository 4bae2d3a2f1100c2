import math

import pytest
from hypothesis import given

from geomkit.direction import Direction2d, Direction3d
from geomkit.vector import Vector2d, Vector3d

from strategies import directions2d, directions3d, nonzero_vectors3d
## unit tests for geomkit direction.py


class TestDirection2d:

    def test_construction_checks_unit_length(self):
        Direction2d(1.0, 0.0)
        Direction2d(math.sqrt(0.5), -math.sqrt(0.5))
        with pytest.raises(ValueError):
            Direction2d(1.0, 1.0)
        with pytest.raises(ValueError):
            Direction2d(0.0, 0.0)
        with pytest.raises(ValueError):
            Direction2d.from_components([0.6, 0.81])

    def test_of(self):
        assert Direction2d.of(Vector2d(0, 0)) is None
        assert Direction2d.of(Vector2d(0, -7)) == Direction2d.NEGATIVE_Y
        d = Direction2d.of(Vector2d(3, 4))
        assert d.is_close(Direction2d(0.6, 0.8))

    def test_angle(self):
        d = Direction2d.from_angle(math.pi / 3)
        assert math.isclose(d.angle(), math.pi / 3)
        assert math.isclose(Direction2d.X.angle_to(Direction2d.Y), math.pi / 2)

    def test_operations(self):
        d = Direction2d.X
        assert d.negated() == Direction2d.NEGATIVE_X
        assert -d == Direction2d.NEGATIVE_X
        assert d.times(3) == Vector2d(3, 0)
        assert d.perpendicular_direction() == Direction2d.Y
        assert d.dot(Direction2d.Y) == 0
        assert d.cross(Direction2d.Y) == 1
        assert d.with_z() == Direction3d.X
        assert d.vector() == Vector2d(1, 0)


class TestDirection3d:

    def test_construction_checks_unit_length(self):
        with pytest.raises(ValueError):
            Direction3d(1.0, 1.0, 0.0)
        with pytest.raises(ValueError):
            Direction3d.from_components([0.0, 0.0])
        assert Direction3d.from_components([0, 0, 1]) == Direction3d.Z

    def test_of(self):
        assert Direction3d.of(Vector3d.ZERO) is None
        assert Direction3d.of(Vector3d(5, 0, 0)) == Direction3d.X

    def test_cross_of_axes(self):
        assert Direction3d.X.cross(Direction3d.Y) == Vector3d(0, 0, 1)
        assert Direction3d.X.is_parallel_to(Direction3d.NEGATIVE_X)
        assert not Direction3d.X.is_parallel_to(Direction3d.Z)

    @pytest.mark.parametrize("d", [Direction3d.X, Direction3d.NEGATIVE_Y, Direction3d.Z,
                                   Direction3d.NEGATIVE_Z])
    def test_perpendicular_basis_of_axes(self, d):
        x_dir, y_dir = d.perpendicular_basis()
        assert x_dir.dot(d) == pytest.approx(0.0, abs=1e-15)
        assert y_dir.dot(d) == pytest.approx(0.0, abs=1e-15)
        assert x_dir.cross(y_dir).is_close(d.vector(), 1e-12)
        assert abs(d.perpendicular_direction().dot(d)) < 1e-15

    def test_spherical(self):
        d = Direction3d.from_spherical(math.pi / 2, 0.0)
        assert d.is_close(Direction3d.Y)
        assert Direction3d.from_spherical(0.0, -math.pi / 2).is_close(Direction3d.NEGATIVE_Z)


@given(directions2d)
def test_perpendicular_direction_2d(d):
    p = d.perpendicular_direction()
    assert abs(d.dot(p)) < 1e-12
    assert math.isclose(d.cross(p), 1.0)


@given(directions3d)
def test_perpendicular_basis_is_right_handed(d):
    x_dir, y_dir = d.perpendicular_basis()
    assert abs(x_dir.dot(d)) < 1e-12
    assert abs(y_dir.dot(d)) < 1e-12
    assert abs(x_dir.dot(y_dir)) < 1e-12
    assert x_dir.cross(y_dir).is_close(d.vector(), 1e-9)


@given(nonzero_vectors3d)
def test_direction_of_vector_is_unit(v):
    d = Direction3d.of(v)
    assert math.isclose(d.vector().length(), 1.0, abs_tol=1e-12)
