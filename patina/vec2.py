"""Two-dimensional vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator

_SCALARS = (int, float)


def _recip(value: float) -> float:
    """Reciprocal that yields a signed infinity for zero instead of raising."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass(frozen=True, slots=True, repr=False)
class Vec2:
    """An immutable 2D vector."""

    x: float
    y: float

    @classmethod
    def splat(cls, value: float) -> Vec2:
        return cls(value, value)

    @classmethod
    def zero(cls) -> Vec2:
        return cls.splat(0.0)

    @classmethod
    def axis_x(cls) -> Vec2:
        return cls(1.0, 0.0)

    @classmethod
    def axis_y(cls) -> Vec2:
        return cls(0.0, 1.0)

    def normalize(self) -> Vec2:
        return self / self.length()

    def length(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def min(self, other: Vec2) -> Vec2:
        return Vec2(_fmin(self.x, other.x), _fmin(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        return Vec2(_fmax(self.x, other.x), _fmax(self.y, other.y))

    def map(self, func: Callable[[float], float]) -> Vec2:
        return Vec2(func(self.x), func(self.y))

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vec2:
        if not isinstance(other, _SCALARS):
            return NotImplemented
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other: object) -> Vec2:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Vec2:
        if not isinstance(other, _SCALARS):
            return NotImplemented
        return self * _recip(float(other))

    def __neg__(self) -> Vec2:
        return self.map(lambda c: -c)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vec2 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"[{self.x:.5f}, {self.y:.5f}]"