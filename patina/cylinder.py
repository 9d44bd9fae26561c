"""Right circular cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass

from patina.mesh import Mesh
from patina.mesh_triangle import MeshTriangle
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Cylinder:
    """A cylinder whose base is centred at ``origin`` and extends by ``axis``."""

    origin: Vec3
    axis: Vec3
    radius: float

    def as_mesh(self, detail: int) -> Mesh:
        """A closed mesh with ``detail`` segments around the circumference.

        Ring vertices alternate bottom and top; the two cap centres come last.
        """
        helper_axis = min(Vec3.axes(), key=lambda a: a.dot(self.axis))
        x_axis = self.axis.cross(helper_axis).normalize() * self.radius
        y_axis = self.axis.cross(x_axis).normalize() * self.radius

        vertices: list[Vec3] = []
        for i in range(detail):
            theta = i / detail * math.pi * 2.0
            rim = math.cos(theta) * x_axis + math.sin(theta) * y_axis + self.origin
            vertices.append(rim)
            vertices.append(rim + self.axis)
        vertices.append(self.origin)
        vertices.append(self.origin + self.axis)

        lc = detail * 2
        uc = detail * 2 + 1
        triangles: list[MeshTriangle] = []
        for i in range(detail):
            nxt = (i + 1) % detail
            l1, l2 = i * 2, nxt * 2
            u1, u2 = i * 2 + 1, nxt * 2 + 1
            triangles.append(MeshTriangle(l2, l1, lc))
            triangles.append(MeshTriangle(u1, u2, uc))
            triangles.append(MeshTriangle(u1, l1, u2))
            triangles.append(MeshTriangle(l1, l2, u2))
        return Mesh(vertices, triangles)