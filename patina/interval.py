"""Closed intervals on the real line."""

from __future__ import annotations

import math
from dataclasses import dataclass


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
class Interval:
    """A closed interval; it is empty when ``min > max``."""

    min: float
    max: float

    @classmethod
    def empty(cls) -> Interval:
        return cls(math.inf, -math.inf)

    @classmethod
    def full(cls) -> Interval:
        return cls(-math.inf, math.inf)

    @classmethod
    def point(cls, value: float) -> Interval:
        return cls(value, value)

    def union(self, other: Interval) -> Interval:
        return Interval(_fmin(self.min, other.min), _fmax(self.max, other.max))

    def intersect(self, other: Interval) -> Interval:
        return Interval(_fmax(self.min, other.min), _fmin(self.max, other.max))

    def intersects(self, other: Interval) -> bool:
        return not self.intersect(other).is_empty()

    def is_empty(self) -> bool:
        return self.min > self.max

    def __repr__(self) -> str:
        return f"[{self.min!r}, {self.max!r}]"