import math

import pytest

from geomkit.matrix import IDENTITY, Matrix, Mirror, Rotation, Scale, Translation, dot4
## unit tests for geomkit matrix.py


class TestMatrix:
    """unit tests for homogeneous matrix operations"""

    def test_matrix(self):
        foo = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16])
        bar = Matrix([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1], [0, 0, 0, 1]])
        baz = [1, 2, 3, 1]
        I = Matrix()
        a = 10.0
        assert I.mul(bar) == bar
        assert I.mul(foo) == foo
        assert I.mul(foo.transpose()) == foo.transpose().mul(I)
        assert I.mul(I) == I == IDENTITY
        assert foo.mul(bar).m == ((1, 2, 3, 10), (5, 6, 7, 26), (9, 10, 11, 42), (13, 14, 15, 58))
        assert foo.mul(baz) == [18, 46, 74, 102]
        assert foo.mul(a).m == ((10.0, 20.0, 30.0, 40.0),
                                (50.0, 60.0, 70.0, 80.0),
                                (90.0, 100.0, 110.0, 120.0),
                                (130.0, 140.0, 150.0, 160.0))
        assert I.mul(baz) == baz
        ## homogeneous coordinates test
        assert foo.apply_point(1, 2, 3) == (18.0 / 102.0, 46.0 / 102.0, 74.0 / 102.0)

    def test_bad_input(self):
        with pytest.raises(ValueError):
            Matrix([1, 2, 3])
        with pytest.raises(ValueError):
            Matrix([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0]])
        with pytest.raises(ValueError):
            Matrix().mul("nope")
        with pytest.raises(ValueError):
            Matrix().get(4, 0)

    def test_immutable(self):
        m = Matrix()
        with pytest.raises(AttributeError):
            m.m = None
        assert hash(m) == hash(Matrix())

    def test_accessors(self):
        foo = Matrix(list(range(16)))
        assert foo.get(1, 2) == 6
        assert foo.getrow(3) == (12, 13, 14, 15)
        assert foo.getcol(0) == (0, 4, 8, 12)
        assert foo.transpose().getrow(0) == foo.getcol(0)
        assert foo.linear_part() == ((0, 1, 2), (4, 5, 6), (8, 9, 10))
        assert dot4([1, 2, 3, 4], [1, 1, 1, 1]) == 10


class TestBuilders:

    def test_rotation(self):
        r = Rotation([0, 0, 1], math.pi / 2)
        x, y, z = r.apply_point(1, 0, 0)
        assert math.isclose(x, 0, abs_tol=1e-12)
        assert math.isclose(y, 1)
        assert z == 0
        assert math.isclose(r.determinant3(), 1.0)
        assert r.mul(Rotation([0, 0, 1], math.pi / 2, inverse=True)).is_identity(1e-12)
        ## a non-unit axis is normalized
        assert Rotation([0, 0, 5], 0.3) == Rotation([0, 0, 1], 0.3)
        with pytest.raises(ValueError):
            Rotation([0, 0, 0], 1.0)

    def test_translation(self):
        t = Translation([1, 2, 3])
        assert t.apply_point(1, 1, 1) == (2, 3, 4)
        assert t.apply_vector(1, 1, 1) == (1, 1, 1)
        assert t.mul(Translation([1, 2, 3], inverse=True)) == IDENTITY

    def test_scale(self):
        assert Scale(2).apply_point(1, 2, 3) == (2, 4, 6)
        assert Scale(1, 2, 3).apply_vector(1, 1, 1) == (1, 2, 3)
        assert Scale([2, 4, 8], inverse=True).apply_point(2, 4, 8) == (1, 1, 1)
        assert Scale(2).determinant3() == 8
        with pytest.raises(ValueError):
            Scale(0, 1, 1, inverse=True)
        with pytest.raises(ValueError):
            Scale("big")

    def test_mirror(self):
        m = Mirror([0, 0, 1], [0, 0, 1])
        assert m.apply_point(1, 2, 3) == (1, 2, -1)
        assert m.apply_vector(1, 2, 3) == (1, 2, -3)
        assert m.determinant3() == -1
        assert m.mul(m).is_identity()

    def test_keeps_xy_plane(self):
        assert Rotation([0, 0, 1], 1.0).keeps_xy_plane()
        assert Translation([1, 1, 0]).keeps_xy_plane()
        assert not Translation([0, 0, 1]).keeps_xy_plane()
        assert not Rotation([1, 0, 0], 0.5).keeps_xy_plane()
        assert Scale(2).keeps_xy_plane()
