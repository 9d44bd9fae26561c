"""Line segments in space."""

from __future__ import annotations

from dataclasses import dataclass

from patina.ray3 import Ray3
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Segment3:
    """The segment from ``p1`` to ``p2``."""

    p1: Vec3
    p2: Vec3

    def at_time(self, t: float) -> Vec3:
        return self.p1 * (1.0 - t) + self.p2 * t

    def as_ray(self) -> Ray3:
        return Ray3(self.p1, self.p2 - self.p1)