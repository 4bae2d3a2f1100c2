import math

import pytest
from hypothesis import given

from geomkit.axis import Axis2d, Axis3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.frame import Frame2d, Frame3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d

from strategies import frames2d, frames3d, planes3d, points3d
## unit tests for geomkit axis.py, frame.py and plane.py


class TestAxis:

    def test_point_at(self):
        axis = Axis2d(Point2d(1, 1), Direction2d.Y)
        assert axis.point_at(2) == Point2d(1, 3)
        assert axis.flip().point_at(2) == Point2d(1, -1)
        assert Axis3d.Z.point_at(-1) == Point3d(0, 0, -1)

    def test_components(self):
        axis = Axis3d.from_components([[1, 2, 3], [0, 0, 1]])
        assert axis == Axis3d(Point3d(1, 2, 3), Direction3d.Z)
        assert axis.components() == ((1, 2, 3), (0, 0, 1))
        with pytest.raises(ValueError):
            Axis2d.from_components([[0, 0]])
        with pytest.raises(ValueError):
            Axis2d.from_components([[0, 0], [1, 1]])

    def test_move_and_lift(self):
        axis = Axis2d.X.move_to(Point2d(0, 5))
        assert axis.origin == Point2d(0, 5)
        assert axis.with_z() == Axis3d(Point3d(0, 5, 0), Direction3d.X)


class TestFrame:

    def test_global_frames(self):
        assert Frame2d.XY.is_right_handed()
        assert Frame3d.XYZ.is_right_handed()
        assert Frame2d.at(Point2d(1, 2)).origin == Point2d(1, 2)
        assert Frame3d.at(Point3d(1, 2, 3)).z_direction == Direction3d.Z

    def test_flips_change_handedness(self):
        assert not Frame2d.XY.flip_x().is_right_handed()
        assert not Frame3d.XYZ.flip_z().is_right_handed()
        assert Frame3d.XYZ.flip_x().flip_y().is_right_handed()

    def test_axes(self):
        frame = Frame2d.with_x_direction(Point2d(1, 0), Direction2d.Y)
        assert frame.y_direction == Direction2d.NEGATIVE_X
        assert frame.x_axis() == Axis2d(Point2d(1, 0), Direction2d.Y)
        assert Frame3d.XYZ.z_axis() == Axis3d.Z

    def test_planes_of_frame(self):
        frame = Frame3d.XYZ
        assert frame.xy_plane().normal_direction == Direction3d.Z
        assert frame.yz_plane().normal_direction == Direction3d.X
        assert frame.zx_plane().normal_direction == Direction3d.Y

    def test_components(self):
        frame = Frame3d.from_components([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert frame == Frame3d.XYZ
        assert Frame2d.from_components(Frame2d.XY.components()) == Frame2d.XY
        with pytest.raises(ValueError):
            Frame3d.from_components([[0, 0, 0], [1, 0, 0]])

    def test_move_to(self):
        moved = Frame3d.XYZ.move_to(Point3d(1, 1, 1))
        assert moved.origin == Point3d(1, 1, 1)
        assert moved.x_direction == Direction3d.X


class TestPlane:

    def test_from_point_and_normal(self):
        plane = Plane3d.from_point_and_normal(Point3d(0, 0, 2), Direction3d.Z)
        assert plane.normal_direction.is_close(Direction3d.Z)
        assert math.isclose(plane.signed_distance_to(Point3d(5, -3, 5)), 3)
        assert math.isclose(plane.signed_distance_to(Point3d(0, 0, 0)), -2)

    def test_offset_and_flip(self):
        plane = Plane3d.XY.offset_by(2)
        assert plane.origin == Point3d(0, 0, 2)
        flipped = Plane3d.XY.flip()
        assert flipped.normal_direction == Direction3d.NEGATIVE_Z
        assert flipped.x_direction == Direction3d.X

    def test_parallel_directions(self):
        plane = Plane3d(Point3d.ORIGIN, Direction3d.X, Direction3d.NEGATIVE_X)
        with pytest.raises(ValueError):
            plane.normal_direction

    def test_normal_axis(self):
        assert Plane3d.YZ.normal_axis() == Axis3d.X


@given(frames2d)
def test_constructed_frames_2d_are_right_handed(frame):
    assert frame.is_right_handed()


@given(frames3d)
def test_constructed_frames_3d_are_right_handed(frame):
    assert frame.is_right_handed()
    assert frame.xy_plane().normal_direction.is_close(frame.z_direction, 1e-9)


@given(planes3d, points3d)
def test_offset_moves_signed_distance(plane, p):
    d = plane.signed_distance_to(p)
    assert math.isclose(plane.offset_by(1.5).signed_distance_to(p), d - 1.5, abs_tol=1e-9)
