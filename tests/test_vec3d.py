import math

import pytest

from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D, is_near

A = Vec3D(1, 2, 3)
B = Vec3D(3, 4, 5)


def test_components():
    assert (A.x, A.y, A.z) == (1, 2, 3)
    assert tuple(B) == (3, 4, 5)


def test_negation():
    neg = -A
    assert is_near(neg.x, -A.x) and is_near(neg.y, -A.y) and is_near(neg.z, -A.z)


def test_equality():
    c = Vec3D(3, 4, 5)
    assert c != A
    assert c == B


def test_add_sub():
    assert tuple(A + B) == (4, 6, 8)
    assert tuple(A - B) == (-2, -2, -2)


def test_scaling():
    assert tuple(A * 2) == (2, 4, 6)
    assert tuple(A / 2) == (0.5, 1, 1.5)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        A / 0.0
    assert tuple(A / 0.5) == (2, 4, 6)


def test_dot():
    assert is_near(A.dot(B), 26)


def test_cross():
    cross = A.cross(B)
    cross_neg = B.cross(A)
    assert is_near(A.dot(cross), 0) and is_near(B.dot(cross), 0)
    assert cross == -cross_neg


def test_abs_and_normalized():
    assert is_near(B.abs(), math.sqrt(50))
    assert is_near(B.normalized().abs(), 1)
    assert Vec3D().normalized() == Vec3D()


def test_point_4d_round_trip():
    p = A.make_point_4d()
    assert p.w == 1.0
    assert Vec3D.from_vec4d(p) == A


def test_from_vec4d_drops_w():
    assert Vec3D.from_vec4d(Vec4D(7, 8, 9, 10)) == Vec3D(7, 8, 9)


def test_random_in_unit_cube():
    v = Vec3D.random()
    assert all(0.0 <= c <= 1.0 for c in v)