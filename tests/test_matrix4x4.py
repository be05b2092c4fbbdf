import math

import pytest

from zavrengine.consts import PI
from zavrengine.matrix4x4 import Matrix4x4
from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D, is_near


def _all_entries(m):
    return [m[i, j] for i in range(4) for j in range(4)]


def _matrices_near(a, b):
    return all(is_near(x, y) for x, y in zip(_all_entries(a), _all_entries(b)))


V = Vec4D(4, 2, 3, 1)


def test_identity_times_vector():
    assert Matrix4x4.identity() * V == Vec4D(4, 2, 3, 1)


def test_scale_times_vector():
    assert Matrix4x4.scale(Vec3D(1, 2, 3)) * V == Vec4D(4, 4, 9, 1)


def test_zero_times_vector():
    assert Matrix4x4.zero() * V == Vec4D(0, 0, 0, 0)


def test_translation_times_vector():
    assert Matrix4x4.translation(Vec3D(5, 4, 3)) * V == Vec4D(9, 6, 6, 1)


def test_constant_times_identity():
    c1 = Matrix4x4.constant(5) * Matrix4x4.identity()
    assert all(is_near(value, 5) for value in _all_entries(c1))


def test_zero_times_constant():
    c2 = Matrix4x4.zero() * Matrix4x4.constant(1)
    assert all(is_near(value, 0) for value in _all_entries(c2))


def test_scale_times_identity():
    c3 = Matrix4x4.scale(Vec3D(3, 3, 3)) * Matrix4x4.identity()
    for i in range(4):
        for j in range(4):
            if i == j:
                assert is_near(c3[i, j], 3 if i < 3 else 1)
            else:
                assert is_near(c3[i, j], 0)


I = Vec4D(1, 0, 0)
J = Vec4D(0, 1, 0)
K = Vec4D(0, 0, 1)


def test_rotation_x():
    r = Matrix4x4.rotation_x(PI / 2)
    assert r * I == I
    assert r * J == K
    assert r * K == -J


def test_rotation_y():
    r = Matrix4x4.rotation_y(PI / 2)
    assert r * I == -K
    assert r * J == J
    assert r * K == I


def test_rotation_z():
    r = Matrix4x4.rotation_z(PI / 2)
    assert r * I == J
    assert r * J == -I
    assert r * K == K


def test_rotation_is_product_of_axis_rotations():
    r = Vec3D(0.3, -1.1, 2.0)
    expected = Matrix4x4.rotation_x(0.3) * Matrix4x4.rotation_y(-1.1) * Matrix4x4.rotation_z(2.0)
    assert _matrices_near(Matrix4x4.rotation(r), expected)


@pytest.mark.parametrize(
    "axis, builder",
    [
        (Vec3D(1, 0, 0), Matrix4x4.rotation_x),
        (Vec3D(0, 2, 0), Matrix4x4.rotation_y),
        (Vec3D(0, 0, 5), Matrix4x4.rotation_z),
    ],
)
def test_rotation_around_matches_axis_rotation(axis, builder):
    assert _matrices_near(Matrix4x4.rotation_around(axis, 0.7), builder(0.7))


def test_rotation_preserves_length():
    v = Vec3D(1, 2, 3)
    rotated = Matrix4x4.rotation_around(Vec3D(1, 1, 1), 1.3) * v
    assert is_near(rotated.abs(), v.abs())


def test_vec3d_product_ignores_translation():
    v = Vec3D(1, 2, 3)
    assert Matrix4x4.translation(Vec3D(10, 20, 30)) * v == v


def test_columns():
    t = Matrix4x4.translation(Vec3D(5, 4, 3))
    assert t.w() == Vec3D(5, 4, 3)
    assert t.x() == Vec3D(1, 0, 0)
    assert t.y() == Vec3D(0, 1, 0)
    assert t.z() == Vec3D(0, 0, 1)


def test_view_maps_eye_to_origin():
    eye = Vec3D(1, 2, 3)
    view = Matrix4x4.view(Vec3D(1, 0, 0), Vec3D(0, 1, 0), Vec3D(0, 0, 1), eye)
    assert view * eye.make_point_4d() == Vec4D(0, 0, 0, 1)


def test_projection_perspective_row():
    p = Matrix4x4.projection()
    assert p[3] == (0.0, 0.0, 1.0, 0.0)


def test_projection_near_and_far_planes():
    z_near, z_far = 1.0, 10.0
    p = Matrix4x4.projection(90.0, 1.0, z_near, z_far)
    near = p * Vec4D(0, 0, z_near, 1)
    far = p * Vec4D(0, 0, z_far, 1)
    assert is_near(near.z / near.w, 0)
    assert is_near(far.z / far.w, 1)


def test_projection_fov_90_keeps_diagonal_at_edge():
    p = Matrix4x4.projection(90.0, 1.0, 1.0, 10.0)
    edge = p * Vec4D(2, 2, 2, 1)
    assert is_near(edge.x / edge.w, 1)
    assert is_near(edge.y / edge.w, 1)


def test_screen_space_corners():
    s = Matrix4x4.screen_space(800, 600)
    assert s * Vec4D(1, 1, 0, 1) == Vec4D(0, 0, 0, 1)
    assert s * Vec4D(-1, -1, 0, 1) == Vec4D(800, 600, 0, 1)


def test_default_matrix_is_zero():
    assert all(value == 0.0 for value in _all_entries(Matrix4x4()))


def test_row_access():
    m = Matrix4x4(((1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16)))
    assert m[1] == (5.0, 6.0, 7.0, 8.0)
    assert m[2, 3] == 12.0


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4x4(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Matrix4x4.identity() * "text"


def test_rotation_by_full_turn_is_identity():
    assert _matrices_near(Matrix4x4.rotation_z(2 * math.pi), Matrix4x4.identity())