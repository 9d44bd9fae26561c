"""Spheres and icosphere meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from patina.mesh import Mesh
from patina.mesh_triangle import MeshTriangle
from patina.subdivision import subdivide
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere centred at ``start`` with the given radius."""

    start: Vec3
    radius: float

    def as_mesh(self, detail: int) -> Mesh:
        """An icosphere subdivided ``detail`` times, scaled and moved into place."""
        mesh = icosphere(detail)
        mesh.vertices = [v * self.radius + self.start for v in mesh.vertices]
        return mesh


def icosahedron() -> Mesh:
    """A regular icosahedron with vertices on the unit sphere."""
    phi = (1.0 + math.sqrt(5.0)) / 2.0
    vertices: list[Vec3] = []
    for rot in range(3):
        for b in (-phi, phi):
            for a in (-1.0, 1.0):
                p = (
                    Vec3.zero()
                    .with_component((rot + 1) % 3, a)
                    .with_component((rot + 2) % 3, b)
                )
                vertices.append(p.normalize())

    triangles: list[MeshTriangle] = []
    for rot in range(3):
        for a in range(2):
            for b in range(2):
                t = MeshTriangle(
                    rot * 4 + a * 2,
                    rot * 4 + a * 2 + 1,
                    ((rot + 1) % 3) * 4 + b * 2 + a,
                )
                if (a == 0) != (b == 1):
                    t = t.invert()
                triangles.append(t)
    for x in range(2):
        for y in range(2):
            for z in range(2):
                t = MeshTriangle(y + z * 2, 4 + z + x * 2, 8 + x + y * 2)
                if (x + y + z) % 2 == 0:
                    t = t.invert()
                triangles.append(t)
    return Mesh(vertices, triangles)


def _spherify(mesh: Mesh) -> None:
    mesh.vertices = [v.normalize() for v in mesh.vertices]


def icosphere(detail: int) -> Mesh:
    """A unit sphere mesh from an icosahedron subdivided ``detail`` times."""
    mesh = icosahedron()
    _spherify(mesh)
    for _ in range(detail):
        mesh = subdivide(mesh)
        _spherify(mesh)
    return mesh