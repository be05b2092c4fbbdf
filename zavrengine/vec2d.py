"""Two-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from zavrengine.consts import EPS
from zavrengine.vec4d import Vec4D


@dataclass(frozen=True, eq=False)
class Vec2D:
    """Immutable 2D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_vec4d(cls, vec: Vec4D) -> Vec2D:
        """Take the x and y components of a 4D vector."""
        return cls(vec.x, vec.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, number: float) -> Vec2D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec2D(self.x * number, self.y * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec2D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        if abs(number) > EPS:
            return Vec2D(self.x / number, self.y / number)
        raise ZeroDivisionError("Vec2D division by zero")

    def dot(self, other: Vec2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def sqr_abs(self) -> float:
        """Squared length."""
        return self.dot(self)

    def abs(self) -> float:
        """Length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec2D:
        """Unit vector in the same direction, or the zero vector."""
        length = self.abs()
        if length > EPS:
            return self / length
        return Vec2D()