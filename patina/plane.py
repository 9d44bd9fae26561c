"""Infinite planes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from patina.ray3 import Ray3
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Plane:
    """The plane through ``origin`` perpendicular to ``normal``."""

    origin: Vec3
    normal: Vec3

    def intersect_ray(self, ray: Ray3) -> float | None:
        """Non-negative time at which the ray meets the plane, or None."""
        numerator = (self.origin - ray.origin).dot(self.normal)
        denominator = ray.direction.dot(self.normal)
        if denominator == 0.0:
            return None
        t = numerator / denominator
        if math.isinf(t) or not t >= 0.0:
            return None
        return t