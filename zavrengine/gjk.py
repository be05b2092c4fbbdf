"""GJK collision detection and EPA penetration solving over support functions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from zavrengine.consts import EPA_EPS, EPS
from zavrengine.simplex import Simplex, SimplexType
from zavrengine.vec3d import Vec3D

SupportFunction = Callable[[Vec3D], Vec3D]
Edge = Tuple[int, int]

_MAX = sys.float_info.max

# Faces of the initial tetrahedron, as index triples into the polytope.
_TETRAHEDRON_FACES = (
    0, 1, 2,
    0, 3, 1,
    0, 2, 3,
    1, 3, 2,
)


@dataclass(frozen=True)
class CollisionInfo:
    """Result of EPA: push direction and depth; depth 0 means unresolved."""

    normal: Vec3D
    depth: float
    object: Optional[Any] = None


@dataclass(frozen=True)
class FaceNormal:
    """Outward unit normal of a polytope face and its distance from the origin."""

    normal: Vec3D
    distance: float


@dataclass(frozen=True)
class NextSimplex:
    """One GJK step: the reduced simplex, the next search direction, and whether the origin is enclosed."""

    simplex: Simplex
    direction: Vec3D
    finish_searching: bool


def find_furthest_point(points: Iterable[Vec3D], direction: Vec3D) -> Vec3D:
    """Point with the largest projection on direction; the first one wins ties."""
    unit = direction.normalized()
    best = Vec3D(0.0, 0.0, 0.0)
    best_distance = -_MAX
    for point in points:
        distance = point.dot(unit)
        if distance > best_distance:
            best_distance = distance
            best = point
    return best


def minkowski_support(
    points_a: Sequence[Vec3D], points_b: Sequence[Vec3D], direction: Vec3D
) -> Vec3D:
    """Support point of the Minkowski difference A - B in the given direction."""
    return find_furthest_point(points_a, direction) - find_furthest_point(points_b, -direction)


def next_simplex(points: Simplex) -> NextSimplex:
    """Reduce a line, triangle or tetrahedron and pick the next search direction."""
    kind = points.type()
    if kind is SimplexType.LINE:
        return line_case(points)
    if kind is SimplexType.TRIANGLE:
        return triangle_case(points)
    if kind is SimplexType.TETRAHEDRON:
        return tetrahedron_case(points)
    raise ValueError("simplex is not a line, triangle or tetrahedron")


def line_case(points: Simplex) -> NextSimplex:
    """GJK step for a two-point simplex."""
    a, b = points[0], points[1]
    ab = b - a
    ao = -a
    if ab.dot(ao) > 0:
        return NextSimplex(Simplex(*points), ab.cross(ao).cross(ab), False)
    return NextSimplex(Simplex(a), ao, False)


def triangle_case(points: Simplex) -> NextSimplex:
    """GJK step for a three-point simplex."""
    a, b, c = points[0], points[1], points[2]
    ab = b - a
    ac = c - a
    ao = -a
    abc = ab.cross(ac)

    if abc.cross(ac).dot(ao) > 0:
        if ac.dot(ao) > 0:
            return NextSimplex(Simplex(a, c), abc.cross(ao).cross(ac), False)
        return line_case(Simplex(a, b))
    if ab.cross(abc).dot(ao) > 0:
        return line_case(Simplex(a, b))
    if abc.dot(ao) > 0:
        return NextSimplex(Simplex(*points), abc, False)
    return NextSimplex(Simplex(a, c, b), -abc, False)


def tetrahedron_case(points: Simplex) -> NextSimplex:
    """GJK step for a four-point simplex; finishes when the origin is inside."""
    a, b, c, d = points[0], points[1], points[2], points[3]
    ab = b - a
    ac = c - a
    ad = d - a
    ao = -a

    if ab.cross(ac).dot(ao) > 0:
        return triangle_case(Simplex(a, b, c))
    if ac.cross(ad).dot(ao) > 0:
        return triangle_case(Simplex(a, c, d))
    if ad.cross(ab).dot(ao) > 0:
        return triangle_case(Simplex(a, d, b))
    return NextSimplex(Simplex(*points), Vec3D(), True)


def _triples(faces: Sequence[int]) -> List[Tuple[int, int, int]]:
    iterator = iter(faces)
    return list(zip(iterator, iterator, iterator))


def face_normals(
    polytope: Sequence[Vec3D], faces: Sequence[int]
) -> Tuple[List[FaceNormal], int]:
    """Normals of every face, turned away from the origin, and the index of the nearest face."""
    normals: List[FaceNormal] = []
    nearest = 0
    min_distance = _MAX
    for index, (i, j, k) in enumerate(_triples(faces)):
        a, b, c = polytope[i], polytope[j], polytope[k]
        normal = (b - a).cross(c - a).normalized()
        distance = normal.dot(a)
        if distance < -EPS:
            normal = -normal
            distance = -distance
        normals.append(FaceNormal(normal, distance))
        if distance < min_distance:
            nearest = index
            min_distance = distance
    return normals, nearest


def add_if_unique_edge(
    edges: Sequence[Edge], faces: Sequence[int], a: int, b: int
) -> List[Edge]:
    """Add the edge faces[a]->faces[b], or drop its reverse if already present."""
    result = list(edges)
    reverse = (faces[b], faces[a])
    if reverse in result:
        result.remove(reverse)
    else:
        result.append((faces[a], faces[b]))
    return result


def gjk_collision(support: SupportFunction, max_iterations: int) -> Tuple[bool, Simplex]:
    """Check whether the Minkowski difference described by support contains the origin."""
    point = support(Vec3D(1.0, 0.0, 0.0))
    points = Simplex()
    points.push_front(point)
    direction = -point

    for _ in range(max_iterations):
        point = support(direction)
        if point.dot(direction) <= 0:
            return False, points
        points.push_front(point)
        step = next_simplex(points)
        direction = step.direction
        points = step.simplex
        if step.finish_searching:
            return True, points
    return False, points


def epa(simplex: Simplex, support: SupportFunction, max_iterations: int) -> CollisionInfo:
    """Expand a GJK tetrahedron to find the penetration normal and depth."""
    if len(simplex) != 4:
        raise ValueError("EPA needs a tetrahedron simplex")

    polytope: List[Vec3D] = list(simplex)
    faces: List[int] = list(_TETRAHEDRON_FACES)
    normals, min_face = face_normals(polytope, faces)

    min_normal = normals[min_face].normal
    min_distance = _MAX

    iterations = 0
    while min_distance == _MAX and iterations < max_iterations:
        iterations += 1
        min_normal = normals[min_face].normal
        min_distance = normals[min_face].distance
        support_point = support(min_normal)
        s_distance = min_normal.dot(support_point)

        if abs(s_distance - min_distance) > EPA_EPS:
            min_distance = _MAX
            edges: List[Edge] = []
            kept: List[int] = []
            for face_normal, face in zip(normals, _triples(faces)):
                if face_normal.normal.dot(support_point) > 0:
                    for first, second in ((0, 1), (1, 2), (2, 0)):
                        edges = add_if_unique_edge(edges, face, first, second)
                else:
                    kept.extend(face)

            new_index = len(polytope)
            polytope.append(support_point)
            kept.extend(i for i1, i2 in edges for i in (i1, i2, new_index))
            faces = kept
            normals, min_face = face_normals(polytope, faces)

    if abs(min_distance - _MAX) < EPS:
        return CollisionInfo(min_normal, 0.0)
    return CollisionInfo(min_normal, min_distance + EPA_EPS)