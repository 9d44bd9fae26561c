"""Rays in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from patina.mat2 import Mat2
from patina.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Ray2:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vec2
    direction: Vec2

    def at_time(self, t: float) -> Vec2:
        return self.origin + self.direction * t

    def intersect_time(self, other: Ray2) -> Vec2 | None:
        """Times ``(t_self, t_other)`` at which the rays meet, or None.

        Both times must be non-negative. Parallel rays never meet.
        """
        mat = Mat2.from_cols(-self.direction, other.direction)
        ts = mat.invert() * (self.origin - other.origin)
        if ts.x >= 0.0 and ts.y >= 0.0:
            return ts
        return None