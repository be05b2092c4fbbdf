import pytest

from zavrengine.hitbox import HitBox
from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D


def _cube_triangles(size=1.0):
    c = [Vec3D(x, y, z) for x in (0, size) for y in (0, size) for z in (0, size)]
    # Each face as two triangles; vertices repeat heavily.
    faces = [
        (0, 1, 3, 2), (4, 5, 7, 6), (0, 1, 5, 4),
        (2, 3, 7, 6), (0, 2, 6, 4), (1, 3, 7, 5),
    ]
    tris = []
    for a, b, cc, d in faces:
        tris.append((c[a], c[b], c[cc]))
        tris.append((c[a], c[cc], c[d]))
    return tris


def test_default_hitbox_is_empty():
    assert len(HitBox()) == 0
    assert list(HitBox()) == []


def test_detailed_removes_duplicates():
    box = HitBox(_cube_triangles(), use_simple_box=False)
    assert len(box) == 8


def test_detailed_is_sorted():
    points = list(HitBox(_cube_triangles(2.0), use_simple_box=False))
    assert points == sorted(points, key=lambda p: (p.x, p.y, p.z))


def test_detailed_merges_points_within_eps():
    tris = [(Vec3D(0, 0, 0), Vec3D(1, 0, 0), Vec3D(1e-9, 0, 0))]
    points = list(HitBox(tris, use_simple_box=False))
    assert len(points) == 2
    assert points[1] == Vec3D(1, 0, 0)


def test_simple_box_corners():
    tris = [(Vec3D(-1, 2, 0), Vec3D(3, -4, 5), Vec3D(0, 0, -6))]
    points = list(HitBox(tris))
    assert len(points) == 8
    assert {p.x for p in points} == {-1, 3}
    assert {p.y for p in points} == {-4, 2}
    assert {p.z for p in points} == {-6, 5}
    assert points[0] == Vec3D(-1, -4, -6)
    assert points[-1] == Vec3D(3, 2, 5)


def test_simple_box_contains_all_vertices():
    tris = _cube_triangles(3.0)
    points = list(HitBox(tris, use_simple_box=True))
    for triangle in tris:
        for v in triangle:
            assert min(p.x for p in points) <= v.x <= max(p.x for p in points)
            assert min(p.y for p in points) <= v.y <= max(p.y for p in points)
            assert min(p.z for p in points) <= v.z <= max(p.z for p in points)


def test_accepts_vec4d_and_tuples():
    tris = [(Vec4D(1, 2, 3, 1), (4, 5, 6), Vec4D(1, 2, 3, 1))]
    points = list(HitBox(tris, use_simple_box=False))
    assert points == [Vec3D(1, 2, 3), Vec3D(4, 5, 6)]


@pytest.mark.parametrize("simple", [True, False])
def test_iteration_matches_len(simple):
    box = HitBox(_cube_triangles(), use_simple_box=simple)
    assert len(list(box)) == len(box)