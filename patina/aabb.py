"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce

from patina.interval import Interval
from patina.mesh import Mesh
from patina.mesh_triangle import MeshTriangle
from patina.sat import ConvexPoly
from patina.vec3 import Vec3

# Corner indices encode the chosen bound per axis: bit 2 is x, bit 1 is y,
# bit 0 is z; a set bit selects the maximum.
_BOX_TRIANGLES = (
    (0b000, 0b001, 0b011),
    (0b000, 0b011, 0b010),
    (0b100, 0b111, 0b101),
    (0b100, 0b110, 0b111),
    (0b000, 0b101, 0b001),
    (0b000, 0b100, 0b101),
    (0b010, 0b011, 0b111),
    (0b010, 0b111, 0b110),
    (0b000, 0b010, 0b110),
    (0b000, 0b110, 0b100),
    (0b001, 0b111, 0b011),
    (0b001, 0b101, 0b111),
)


@dataclass(frozen=True, slots=True)
class AABB(ConvexPoly):
    """A box spanning from corner ``min`` to corner ``max``."""

    min: Vec3
    max: Vec3

    @classmethod
    def from_point(cls, p: Vec3) -> AABB:
        return cls(p, p)

    @classmethod
    def empty(cls) -> AABB:
        return cls(Vec3.splat(math.inf), Vec3.splat(-math.inf))

    def union(self, other: AABB) -> AABB:
        return AABB(self.min.min(other.min), self.max.max(other.max))

    def surface_area(self) -> float:
        """Sum of the areas of three mutually adjacent faces."""
        d = (self.max - self.min).max(Vec3.splat(0.0))
        return d.x * d.y + d.x * d.z + d.y * d.z

    def intersect(self, other: AABB) -> AABB:
        return AABB(self.min.max(other.min), self.max.min(other.max))

    def dimensions(self) -> Vec3:
        """Edge lengths, clamped to be non-negative."""
        return (self.max - self.min).max(Vec3.zero())

    def intersects(self, other: AABB) -> bool:
        return all(x >= 0.0 for x in self.intersect(other).dimensions())

    def vertices(self) -> tuple[Vec3, ...]:
        """The eight corners, indexed by the bit pattern x<<2 | y<<1 | z."""
        lo, hi = self.min, self.max
        return tuple(
            Vec3(
                hi.x if i & 0b100 else lo.x,
                hi.y if i & 0b010 else lo.y,
                hi.z if i & 0b001 else lo.z,
            )
            for i in range(8)
        )

    def as_mesh(self) -> Mesh:
        """A closed, outward-facing triangle mesh of the box."""
        return Mesh(
            self.vertices(),
            (MeshTriangle(*corners) for corners in _BOX_TRIANGLES),
        )

    def normals(self) -> tuple[Vec3, Vec3, Vec3]:
        return Vec3.axes()

    def project_onto(self, vector: Vec3) -> Interval:
        return reduce(
            lambda acc, p: acc.union(Interval.point(p.dot(vector))),
            self.vertices(),
            Interval.empty(),
        )