"""Three-dimensional vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from operator import add
from typing import Callable, Iterable, Iterator

_SCALARS = (int, float)


def _recip(value: float) -> float:
    """Reciprocal that yields a signed infinity for zero instead of raising."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass(frozen=True, slots=True, repr=False)
class Vec3:
    """An immutable 3D vector."""

    x: float
    y: float
    z: float

    @classmethod
    def splat(cls, value: float) -> Vec3:
        return cls(value, value, value)

    @classmethod
    def zero(cls) -> Vec3:
        return cls.splat(0.0)

    @classmethod
    def axis_x(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def axis_y(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def axis_z(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def axes(cls) -> tuple[Vec3, Vec3, Vec3]:
        return (cls.axis_x(), cls.axis_y(), cls.axis_z())

    def normalize(self) -> Vec3:
        return self / self.length()

    def length(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def min(self, other: Vec3) -> Vec3:
        return Vec3(*(_fmin(a, b) for a, b in zip(self, other)))

    def max(self, other: Vec3) -> Vec3:
        return Vec3(*(_fmax(a, b) for a, b in zip(self, other)))

    def map(self, func: Callable[[float], float]) -> Vec3:
        return Vec3(func(self.x), func(self.y), func(self.z))

    def with_component(self, index: int, value: float) -> Vec3:
        """Return a copy with the component at ``index`` replaced."""
        components = [self.x, self.y, self.z]
        if index not in (0, 1, 2):
            raise IndexError(f"Vec3 index out of range: {index}")
        components[index] = value
        return Vec3(*components)

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vec3:
        if not isinstance(other, _SCALARS):
            return NotImplemented
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: object) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Vec3:
        if not isinstance(other, _SCALARS):
            return NotImplemented
        return self * _recip(float(other))

    def __neg__(self) -> Vec3:
        return self.map(lambda c: -c)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vec3 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"[{self.x:.5f}, {self.y:.5f}, {self.z:.5f}]"


def vec3_sum(vectors: Iterable[Vec3]) -> Vec3:
    """Sum vectors, starting from the zero vector."""
    return reduce(add, vectors, Vec3.zero())