"""Three-component vector."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator

from zavrengine.consts import EPS
from zavrengine.vec4d import Vec4D


@dataclass(frozen=True, eq=False)
class Vec3D:
    """Immutable 3D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_vec4d(cls, vec: Vec4D) -> Vec3D:
        """Drop the w component of a 4D vector."""
        return cls(vec.x, vec.y, vec.z)

    @classmethod
    def random(cls) -> Vec3D:
        """Vector with each component uniform in [0, 1)."""
        return cls(_random.random(), _random.random(), _random.random())

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __neg__(self) -> Vec3D:
        return Vec3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    def __add__(self, other: Vec3D) -> Vec3D:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return Vec3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3D) -> Vec3D:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return Vec3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, number: float) -> Vec3D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec3D(self.x * number, self.y * number, self.z * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec3D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        if abs(number) > EPS:
            return Vec3D(self.x / number, self.y / number, self.z / number)
        raise ZeroDivisionError("Vec3D division by zero")

    def dot(self, other: Vec3D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3D) -> Vec3D:
        """Cross product."""
        return Vec3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sqr_abs(self) -> float:
        """Squared length."""
        return self.dot(self)

    def abs(self) -> float:
        """Length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec3D:
        """Unit vector in the same direction, or the zero vector."""
        length = self.abs()
        if length > EPS:
            return self / length
        return Vec3D()

    def make_point_4d(self) -> Vec4D:
        """Homogeneous point with w = 1."""
        return Vec4D(self.x, self.y, self.z, 1.0)