import math

import pytest
from hypothesis import given

from geomkit.axis import Axis2d, Axis3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.frame import Frame2d, Frame3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d
from geomkit.projection import (
    place_in,
    place_onto,
    project_onto,
    projected_into_plane,
    projected_onto_plane,
    relative_to,
)
from geomkit.vector import Vector2d, Vector3d

from strategies import (
    directions3d,
    frames2d,
    frames3d,
    planes3d,
    points2d,
    points3d,
    vectors3d,
)
## unit tests for geomkit projection.py


class TestRelativeTo:

    def test_point_in_shifted_frame(self):
        frame = Frame2d.at(Point2d(1, 1))
        assert relative_to(frame, Point2d(3, 4)) == Point2d(2, 3)
        assert place_in(frame, Point2d(2, 3)) == Point2d(3, 4)

    def test_rotated_frame(self):
        frame = Frame2d.with_x_direction(Point2d.ORIGIN, Direction2d.Y)
        assert relative_to(frame, Point2d(0, 2)).is_close(Point2d(2, 0))
        assert relative_to(frame, Vector2d(1, 0)).is_close(Vector2d(0, -1))
        assert relative_to(frame, Direction2d.Y).is_close(Direction2d.X)

    def test_vectors_ignore_origin(self):
        frame = Frame3d.at(Point3d(5, 5, 5))
        assert relative_to(frame, Vector3d(1, 2, 3)) == Vector3d(1, 2, 3)
        assert place_in(frame, Vector3d(1, 2, 3)) == Vector3d(1, 2, 3)

    def test_frame_relative_to_itself(self):
        frame = Frame3d.with_z_direction(Point3d(1, 2, 3), Direction3d.X)
        local = relative_to(frame, frame)
        assert local.origin.is_close(Point3d.ORIGIN)
        assert local.x_direction.is_close(Direction3d.X)
        assert local.y_direction.is_close(Direction3d.Y)
        assert local.z_direction.is_close(Direction3d.Z)

    def test_axis_and_plane(self):
        frame = Frame3d.at(Point3d(0, 0, 1))
        axis = relative_to(frame, Axis3d.Z)
        assert axis == Axis3d(Point3d(0, 0, -1), Direction3d.Z)
        plane = place_in(frame, Plane3d.XY)
        assert plane.origin == Point3d(0, 0, 1)

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            relative_to(Axis2d.X, Point2d(1, 1))
        with pytest.raises(ValueError):
            relative_to(Frame2d.XY, Point3d(1, 1, 1))
        with pytest.raises(ValueError):
            place_in(Frame3d.XYZ, Point2d(1, 1))


class TestProjectOnto:

    def test_onto_axis(self):
        axis = Axis2d(Point2d(0, 1), Direction2d.X)
        assert project_onto(axis, Point2d(3, 5)) == Point2d(3, 1)
        assert project_onto(axis, Vector2d(3, 5)) == Vector2d(3, 0)
        assert project_onto(Axis3d.Z, Point3d(1, 2, 3)) == Point3d(0, 0, 3)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            project_onto(Axis2d.X, Point3d(1, 2, 3))
        with pytest.raises(ValueError):
            project_onto(Axis3d.X, Vector2d(1, 2))
        with pytest.raises(ValueError):
            project_onto(Frame3d.XYZ, Point3d(1, 2, 3))

    def test_onto_plane(self):
        plane = Plane3d.XY.offset_by(2)
        assert project_onto(plane, Point3d(1, 2, 3)) == Point3d(1, 2, 2)
        assert projected_onto_plane(plane, Vector3d(1, 2, 3)) == Vector3d(1, 2, 0)

    def test_degenerate_projections(self):
        assert projected_onto_plane(Plane3d.XY, Direction3d.Z) is None
        assert projected_onto_plane(Plane3d.XY, Axis3d.Z) is None
        assert projected_into_plane(Plane3d.XY, Direction3d.NEGATIVE_Z) is None
        assert projected_into_plane(Plane3d.XY, Axis3d.Z) is None

    def test_normal_of_tilted_plane(self):
        normal = Vector3d(1, 2, 3).direction()
        plane = Plane3d.from_point_and_normal(Point3d(1, -1, 2), normal)
        assert projected_onto_plane(plane, normal) is None
        assert projected_into_plane(plane, normal) is None
        assert projected_onto_plane(plane, Axis3d(Point3d.ORIGIN, normal)) is None
        assert projected_into_plane(plane, Axis3d(Point3d.ORIGIN, -normal)) is None

    def test_axis_onto_plane(self):
        axis = Axis3d(Point3d(1, 1, 1), Direction3d.of(Vector3d(1, 0, 1)))
        flat = projected_onto_plane(Plane3d.XY, axis)
        assert flat == Axis3d(Point3d(1, 1, 0), Direction3d.X)


class TestIntoAndOntoPlane:

    def test_into_plane_coordinates(self):
        plane = Plane3d.YZ
        assert projected_into_plane(plane, Point3d(7, 2, 3)) == Point2d(2, 3)
        assert projected_into_plane(plane, Vector3d(7, 2, 3)) == Vector2d(2, 3)
        axis = projected_into_plane(plane, Axis3d(Point3d(1, 1, 1), Direction3d.Z))
        assert axis == Axis2d(Point2d(1, 1), Direction2d.Y)

    def test_place_onto(self):
        plane = Plane3d.YZ.move_to(Point3d(1, 0, 0))
        assert place_onto(plane, Point2d(2, 3)) == Point3d(1, 2, 3)
        assert place_onto(plane, Vector2d(2, 3)) == Vector3d(0, 2, 3)
        assert place_onto(plane, Direction2d.X) == Direction3d.Y
        assert place_onto(plane, Axis2d.Y) == Axis3d(Point3d(1, 0, 0), Direction3d.Z)

    def test_frame_onto_plane_is_plane(self):
        result = place_onto(Plane3d.XY, Frame2d.at(Point2d(1, 2)))
        assert isinstance(result, Plane3d)
        assert result.origin == Point3d(1, 2, 0)
        assert result.normal_direction == Direction3d.Z

    def test_bad_geometry(self):
        with pytest.raises(ValueError):
            place_onto(Plane3d.XY, Point3d(1, 2, 3))
        with pytest.raises(ValueError):
            projected_into_plane(Plane3d.XY, Point2d(1, 2))


@given(frames2d, points2d)
def test_place_in_undoes_relative_to_2d(frame, p):
    assert place_in(frame, relative_to(frame, p)).is_close(p, 1e-6)


@given(frames3d, points3d)
def test_place_in_undoes_relative_to_3d(frame, p):
    assert place_in(frame, relative_to(frame, p)).is_close(p, 1e-6)


@given(frames3d, directions3d)
def test_relative_direction_round_trip(frame, d):
    assert place_in(frame, relative_to(frame, d)).is_close(d, 1e-9)


@given(frames3d, vectors3d)
def test_relative_to_preserves_length(frame, v):
    assert math.isclose(relative_to(frame, v).length(), v.length(), rel_tol=1e-9, abs_tol=1e-9)


@given(planes3d, points2d)
def test_place_onto_then_into(plane, p):
    assert projected_into_plane(plane, place_onto(plane, p)).is_close(p, 1e-6)


@given(planes3d, points3d)
def test_projection_lies_in_plane(plane, p):
    q = projected_onto_plane(plane, p)
    assert abs(plane.signed_distance_to(q)) < 1e-6
    assert projected_onto_plane(plane, q).is_close(q, 1e-6)


@given(planes3d)
def test_normal_direction_has_no_projection(plane):
    n = plane.normal_direction
    assert projected_onto_plane(plane, n) is None
    assert projected_into_plane(plane, n) is None
    assert projected_onto_plane(plane, Axis3d(plane.origin, n)) is None
    assert projected_into_plane(plane, Axis3d(plane.origin, n)) is None
