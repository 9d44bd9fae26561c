"""Separating-axis overlap test for convex shapes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

from patina.interval import Interval
from patina.vec3 import Vec3


class ConvexPoly(ABC):
    """A convex shape that can be projected onto an axis."""

    __slots__ = ()

    @abstractmethod
    def normals(self) -> Sequence[Vec3]:
        """Candidate separating axes of the shape."""

    @abstractmethod
    def project_onto(self, vector: Vec3) -> Interval:
        """Range of dot products of the shape's points with ``vector``."""


def _separated_by_axes_of(a: ConvexPoly, b: ConvexPoly) -> bool:
    for normal in a.normals():
        ia = a.project_onto(normal)
        if ia.min >= ia.max:
            ia = Interval.point(ia.min)
        ib = b.project_onto(normal)
        bounds = (ia.min, ia.max, ib.min, ib.max)
        if not all(math.isfinite(x) for x in bounds):
            raise ValueError(f"non-finite projection on axis {normal!r}: {ia!r} {ib!r}")
        if not ia.intersects(ib):
            return True
    return False


def sat_intersects(a: ConvexPoly, b: ConvexPoly) -> bool:
    """True unless a normal of either shape separates the two."""
    return not _separated_by_axes_of(a, b) and not _separated_by_axes_of(b, a)