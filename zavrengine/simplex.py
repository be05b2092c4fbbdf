"""Simplex of up to four points for the GJK search."""

from __future__ import annotations

import enum
from collections import deque
from typing import Iterator

from zavrengine.vec3d import Vec3D

_MAX_POINTS = 4


class SimplexType(enum.IntEnum):
    """Kind of simplex, named by its number of points."""

    ZERO = 0
    POINT = 1
    LINE = 2
    TRIANGLE = 3
    TETRAHEDRON = 4


class Simplex:
    """Ordered list of at most four points.

    Points given to the constructor are appended, keeping the last four;
    push_front prepends, dropping the last point when full.
    """

    __slots__ = ("_points",)

    def __init__(self, *args: Vec3D) -> None:
        self._points: deque[Vec3D] = deque(args, maxlen=_MAX_POINTS)

    def push_front(self, point: Vec3D) -> None:
        """Insert a point at the front."""
        self._points.appendleft(point)

    def __getitem__(self, index: int) -> Vec3D:
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vec3D]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Simplex({', '.join(repr(p) for p in self._points)})"

    def type(self) -> SimplexType:
        """Kind of simplex given by the number of points."""
        return SimplexType(len(self._points))