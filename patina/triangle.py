"""Triangles in space."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce

from patina.interval import Interval
from patina.plane import Plane
from patina.ray3 import Ray3
from patina.sat import ConvexPoly
from patina.segment3 import Segment3
from patina.vec2 import Vec2
from patina.vec3 import Vec3, vec3_sum


@dataclass(frozen=True, slots=True, repr=False)
class Triangle(ConvexPoly):
    """A triangle given by three corner points."""

    points: tuple[Vec3, Vec3, Vec3]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) != 3:
            raise ValueError(f"a triangle needs 3 points, got {len(points)}")
        object.__setattr__(self, "points", points)

    def normal(self) -> Vec3:
        p0, p1, p2 = self.points
        return (p1 - p0).cross(p2 - p0).normalize()

    def plane(self) -> Plane:
        return Plane(self.points[0], self.normal())

    def intersect_ray(self, ray: Ray3) -> float | None:
        """Time at which the ray crosses the triangle, or None."""
        plane = self.plane()
        time = plane.intersect_ray(ray)
        if time is None:
            return None
        pos = ray.at_time(time)
        rotated = self.points[1:] + self.points[:1]
        for v1, v2 in zip(self.points, rotated):
            if (v2 - v1).cross(pos - v1).dot(plane.normal) < 0.0:
                return None
        return time

    def intersect_segment(self, segment: Segment3) -> float | None:
        t = self.intersect_ray(segment.as_ray())
        if t is not None and t < 1.0:
            return t
        return None

    def project(self, p: Vec3) -> Vec2:
        """Coordinates of ``p`` in the triangle's plane, origin at the first point."""
        p0, p1, p2 = self.points
        p = p - p0
        x = p1 - p0
        z = x.cross(p2 - p0)
        y = z.cross(x)
        return Vec2(p.dot(x.normalize()), p.dot(y.normalize()))

    def midpoint(self) -> Vec3:
        return vec3_sum(self.points) / 3.0

    def edges(self) -> tuple[Segment3, Segment3, Segment3]:
        p0, p1, p2 = self.points
        return (Segment3(p0, p1), Segment3(p1, p2), Segment3(p2, p0))

    def intersects(self, other: Triangle) -> bool:
        """True if an edge of either triangle passes through the other."""
        return any(other.intersect_segment(e) is not None for e in self.edges()) or any(
            self.intersect_segment(e) is not None for e in other.edges()
        )

    def normals(self) -> tuple[Vec3]:
        return (self.normal(),)

    def project_onto(self, vector: Vec3) -> Interval:
        return reduce(
            lambda acc, p: acc.union(Interval.point(p.dot(vector))),
            self.points,
            Interval.empty(),
        )

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(p) for p in self.points) + "]"