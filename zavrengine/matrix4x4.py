"""4x4 transformation matrices."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Sequence, Tuple, Union

from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D

_Row = Tuple[float, float, float, float]


class Matrix4x4:
    """Immutable 4x4 matrix of floats, stored row by row."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Sequence[float]] | None = None) -> None:
        if rows is None:
            self._rows: Tuple[_Row, ...] = tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))
            return
        converted = tuple(tuple(float(value) for value in row) for row in rows)
        if len(converted) != 4 or any(len(row) != 4 for row in converted):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        self._rows = converted  # type: ignore[assignment]

    @classmethod
    def _from_entries(cls, entries: Mapping[Tuple[int, int], float]) -> Matrix4x4:
        return cls(
            tuple(entries.get((i, j), 0.0) for j in range(4)) for i in range(4)
        )

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        if isinstance(index, tuple):
            row, column = index
            return self._rows[row][column]
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"Matrix4x4({[list(row) for row in self._rows]!r})"

    def __mul__(self, other):
        if isinstance(other, Matrix4x4):
            columns = tuple(zip(*other._rows))
            return Matrix4x4(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self._rows
            )
        if isinstance(other, Vec4D):
            return Vec4D(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        if isinstance(other, Vec3D):
            return Vec3D(
                *(row[0] * other.x + row[1] * other.y + row[2] * other.z for row in self._rows[:3])
            )
        return NotImplemented

    def _column(self, index: int) -> Vec3D:
        return Vec3D(self._rows[0][index], self._rows[1][index], self._rows[2][index])

    def x(self) -> Vec3D:
        """First column, without the bottom row."""
        return self._column(0)

    def y(self) -> Vec3D:
        """Second column, without the bottom row."""
        return self._column(1)

    def z(self) -> Vec3D:
        """Third column, without the bottom row."""
        return self._column(2)

    def w(self) -> Vec3D:
        """Fourth column (the translation part), without the bottom row."""
        return self._column(3)

    @classmethod
    def constant(cls, value: float) -> Matrix4x4:
        """Matrix with every entry equal to value."""
        return cls(tuple(value for _ in range(4)) for _ in range(4))

    @classmethod
    def zero(cls) -> Matrix4x4:
        """All-zero matrix."""
        return cls.constant(0.0)

    @classmethod
    def identity(cls) -> Matrix4x4:
        """Identity matrix."""
        return cls._from_entries({(i, i): 1.0 for i in range(4)})

    @classmethod
    def scale(cls, factor: Vec3D) -> Matrix4x4:
        """Scaling by the components of factor."""
        return cls._from_entries(
            {(0, 0): factor.x, (1, 1): factor.y, (2, 2): factor.z, (3, 3): 1.0}
        )

    @classmethod
    def translation(cls, v: Vec3D) -> Matrix4x4:
        """Translation by v."""
        entries = {(i, i): 1.0 for i in range(4)}
        entries.update({(0, 3): v.x, (1, 3): v.y, (2, 3): v.z})
        return cls._from_entries(entries)

    @classmethod
    def rotation_x(cls, rx: float) -> Matrix4x4:
        """Rotation by rx radians about the x axis."""
        c, s = math.cos(rx), math.sin(rx)
        return cls._from_entries(
            {(0, 0): 1.0, (1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation_y(cls, ry: float) -> Matrix4x4:
        """Rotation by ry radians about the y axis."""
        c, s = math.cos(ry), math.sin(ry)
        return cls._from_entries(
            {(1, 1): 1.0, (0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation_z(cls, rz: float) -> Matrix4x4:
        """Rotation by rz radians about the z axis."""
        c, s = math.cos(rz), math.sin(rz)
        return cls._from_entries(
            {(2, 2): 1.0, (0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation(cls, r: Vec3D) -> Matrix4x4:
        """Combined rotation Rx(r.x) * Ry(r.y) * Rz(r.z)."""
        return cls.rotation_x(r.x) * cls.rotation_y(r.y) * cls.rotation_z(r.z)

    @classmethod
    def rotation_around(cls, v: Vec3D, rv: float) -> Matrix4x4:
        """Rotation by rv radians about the axis v."""
        n = v.normalized()
        c, s = math.cos(rv), math.sin(rv)
        k = 1.0 - c
        return cls._from_entries(
            {
                (0, 0): c + k * n.x * n.x,
                (0, 1): k * n.x * n.y - s * n.z,
                (0, 2): k * n.x * n.z + s * n.y,
                (1, 0): k * n.x * n.y + s * n.z,
                (1, 1): c + k * n.y * n.y,
                (1, 2): k * n.y * n.z - s * n.x,
                (2, 0): k * n.z * n.x - s * n.y,
                (2, 1): k * n.z * n.y + s * n.x,
                (2, 2): c + k * n.z * n.z,
                (3, 3): 1.0,
            }
        )

    @classmethod
    def projection(
        cls,
        fov: float = 90.0,
        aspect: float = 1.0,
        z_near: float = 1.0,
        z_far: float = 10.0,
    ) -> Matrix4x4:
        """Perspective projection; fov is in degrees."""
        half_tan = math.tan(fov * math.pi / 180.0 / 2.0)
        return cls._from_entries(
            {
                (0, 0): 1.0 / (half_tan * aspect),
                (1, 1): 1.0 / half_tan,
                (2, 2): z_far / (z_far - z_near),
                (2, 3): -z_far * z_near / (z_far - z_near),
                (3, 2): 1.0,
                (3, 3): 0.0,
            }
        )

    @classmethod
    def screen_space(cls, width: int, height: int) -> Matrix4x4:
        """Map normalised device coordinates onto a width x height screen."""
        return cls._from_entries(
            {
                (0, 0): -0.5 * width,
                (1, 1): -0.5 * height,
                (0, 3): 0.5 * width,
                (1, 3): 0.5 * height,
                (2, 2): 1.0,
                (3, 3): 1.0,
            }
        )

    @classmethod
    def view(cls, left: Vec3D, up: Vec3D, look_at: Vec3D, eye: Vec3D) -> Matrix4x4:
        """View matrix for a camera at eye with the given orthonormal basis."""
        return cls(
            (
                (left.x, left.y, left.z, -eye.dot(left)),
                (up.x, up.y, up.z, -eye.dot(up)),
                (look_at.x, look_at.y, look_at.z, -eye.dot(look_at)),
                (0.0, 0.0, 0.0, 1.0),
            )
        )