"""Rays in space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from patina.interval import Interval
from patina.vec3 import Vec3


def _div(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives a signed infinity or NaN."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True, slots=True)
class Ray3:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def intersect_aabb(self, aabb: Any) -> Interval | None:
        """Range of times spent inside a box with ``min``/``max`` corners."""
        interval = Interval.full()
        for axis in range(3):
            m = self.direction[axis]
            b = self.origin[axis]
            part = Interval(_div(aabb.min[axis] - b, m), _div(aabb.max[axis] - b, m))
            interval = interval.intersect(part)
        if interval.is_empty():
            return None
        return interval

    def project(self, p: Vec3) -> float:
        return (p - self.origin).dot(self.direction)

    def at_time(self, t: float) -> Vec3:
        return self.origin + self.direction * t