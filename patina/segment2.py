"""Line segments in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from patina.ray2 import Ray2
from patina.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Segment2:
    """The segment from ``p1`` to ``p2``."""

    p1: Vec2
    p2: Vec2

    def at_time(self, t: float) -> Vec2:
        return self.p1 * (1.0 - t) + self.p2 * t

    def as_ray(self) -> Ray2:
        return Ray2(self.p1, self.p2 - self.p1)

    def intersect_time(self, other: Segment2) -> Vec2 | None:
        """Parameters on both segments where they cross, or None."""
        ts = self.as_ray().intersect_time(other.as_ray())
        if ts is None:
            return None
        if ts.x <= 1.0 and ts.y <= 1.0:
            return ts
        return None