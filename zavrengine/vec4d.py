"""Four-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from zavrengine.consts import EPS


def is_near(a: float, b: float) -> bool:
    """Return True when two numbers differ by less than EPS."""
    return abs(a - b) < EPS


@dataclass(frozen=True, eq=False)
class Vec4D:
    """Immutable 4D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __neg__(self) -> Vec4D:
        return Vec4D(-self.x, -self.y, -self.z, -self.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    def __add__(self, other: Vec4D) -> Vec4D:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return Vec4D(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4D) -> Vec4D:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return Vec4D(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, number: float) -> Vec4D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec4D(self.x * number, self.y * number, self.z * number, self.w * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec4D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        if abs(number) > EPS:
            return Vec4D(self.x / number, self.y / number, self.z / number, self.w / number)
        raise ZeroDivisionError("Vec4D division by zero")

    def sqr_abs(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def abs(self) -> float:
        """Length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec4D:
        """Unit vector in the same direction, or the zero vector."""
        length = self.abs()
        if length > EPS:
            return self / length
        return Vec4D()