"""2x2 matrices of floats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from patina.vec2 import Vec2

_SCALARS = (int, float)


@dataclass(frozen=True, slots=True)
class Mat2:
    """An immutable 2x2 matrix stored as two row vectors."""

    rows: tuple[Vec2, Vec2]

    @classmethod
    def from_rows(cls, r1: Vec2, r2: Vec2) -> Mat2:
        return cls((r1, r2))

    @classmethod
    def from_cols(cls, c1: Vec2, c2: Vec2) -> Mat2:
        return cls.from_rows(c1, c2).transpose()

    @classmethod
    def identity(cls) -> Mat2:
        return cls.from_rows(Vec2.axis_x(), Vec2.axis_y())

    def transpose(self) -> Mat2:
        return Mat2.from_rows(self.col(0), self.col(1))

    def row(self, r: int) -> Vec2:
        return self.rows[r]

    def col(self, c: int) -> Vec2:
        return Vec2(self.rows[0][c], self.rows[1][c])

    def invert(self) -> Mat2:
        """Inverse matrix; a singular matrix yields non-finite entries."""
        a, b, c, d = self[0, 0], self[0, 1], self[1, 0], self[1, 1]
        det = a * d - b * c
        return Mat2.from_rows(Vec2(d, -b), Vec2(-c, a)) / det

    def __add__(self, other: object) -> Mat2:
        if not isinstance(other, Mat2):
            return NotImplemented
        return Mat2(tuple(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> Mat2:
        if not isinstance(other, Mat2):
            return NotImplemented
        return Mat2(tuple(a - b for a, b in zip(self, other)))

    def __mul__(self, other: object):
        if isinstance(other, Mat2):
            return Mat2.from_rows(self.row(0) * other, self.row(1) * other)
        if isinstance(other, Vec2):
            return Vec2(*(row.dot(other) for row in self))
        if isinstance(other, _SCALARS):
            return Mat2(tuple(row * other for row in self))
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, Vec2):
            return self.transpose() * other
        if isinstance(other, _SCALARS):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Mat2:
        if not isinstance(other, _SCALARS):
            return NotImplemented
        return Mat2(tuple(row / other for row in self))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.rows[row][col]

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.rows)