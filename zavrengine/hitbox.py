"""Collision point sets built from mesh triangles."""

from __future__ import annotations

import functools
import sys
from bisect import bisect_left
from typing import Iterable, Iterator, List, Sequence

from zavrengine.consts import EPS
from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D


def _to_vec3d(point) -> Vec3D:
    if isinstance(point, Vec3D):
        return point
    if isinstance(point, Vec4D):
        return Vec3D.from_vec4d(point)
    x, y, z = tuple(point)[:3]
    return Vec3D(x, y, z)


def _less(lhs: Vec3D, rhs: Vec3D) -> bool:
    """Lexicographic order that treats components within EPS as equal."""
    for a, b in ((lhs.x, rhs.x), (lhs.y, rhs.y), (lhs.z, rhs.z)):
        if abs(a - b) >= EPS:
            return a < b
    return False


def _compare(lhs: Vec3D, rhs: Vec3D) -> int:
    if _less(lhs, rhs):
        return -1
    if _less(rhs, lhs):
        return 1
    return 0


_key = functools.cmp_to_key(_compare)


class HitBox:
    """Points used as a body's shape in collision detection.

    With use_simple_box the points are the eight corners of the axis-aligned
    bounding box; otherwise they are the distinct triangle vertices, sorted.
    """

    __slots__ = ("_points",)

    def __init__(
        self,
        triangles: Iterable[Sequence] | None = None,
        use_simple_box: bool = True,
    ) -> None:
        self._points: List[Vec3D] = []
        if triangles is None:
            return
        vertices = [_to_vec3d(p) for triangle in triangles for p in tuple(triangle)[:3]]
        if use_simple_box:
            self._generate_simple(vertices)
        else:
            self._generate_detailed(vertices)

    def _generate_simple(self, vertices: List[Vec3D]) -> None:
        big = sys.float_info.max
        min_x = min((v.x for v in vertices), default=big)
        min_y = min((v.y for v in vertices), default=big)
        min_z = min((v.z for v in vertices), default=big)
        max_x = max((v.x for v in vertices), default=-big)
        max_y = max((v.y for v in vertices), default=-big)
        max_z = max((v.z for v in vertices), default=-big)
        self._points = [
            Vec3D(x, y, z)
            for z in (min_z, max_z)
            for x, y in ((min_x, min_y), (min_x, max_y), (max_x, min_y), (max_x, max_y))
        ]

    def _generate_detailed(self, vertices: List[Vec3D]) -> None:
        keys: list = []
        points: List[Vec3D] = []
        for vertex in vertices:
            key = _key(vertex)
            index = bisect_left(keys, key)
            if index < len(points) and _compare(vertex, points[index]) == 0:
                continue
            keys.insert(index, key)
            points.insert(index, vertex)
        self._points = points

    def __iter__(self) -> Iterator[Vec3D]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"HitBox({self._points!r})"