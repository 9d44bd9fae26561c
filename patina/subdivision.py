"""Loop-style midpoint subdivision of triangle meshes."""

from __future__ import annotations

from patina.mesh import Mesh
from patina.mesh_triangle import MeshTriangle


def subdivide(mesh: Mesh) -> Mesh:
    """Split every triangle into four by inserting shared edge midpoints."""
    vertices = list(mesh.vertices)
    triangles: list[MeshTriangle] = []
    edge_to_midpoint: dict[tuple[int, int], int] = {}

    def midpoint(v1: int, v2: int) -> int:
        key = (min(v1, v2), max(v1, v2))
        index = edge_to_midpoint.get(key)
        if index is None:
            index = len(vertices)
            vertices.append((vertices[v1] + vertices[v2]) / 2.0)
            edge_to_midpoint[key] = index
        return index

    for t in mesh.triangles:
        corners = t.vertices
        m0, m1, m2 = (
            midpoint(a, b) for a, b in zip(corners, corners[1:] + corners[:1])
        )
        triangles.append(MeshTriangle(corners[0], m0, m2))
        triangles.append(MeshTriangle(corners[1], m1, m0))
        triangles.append(MeshTriangle(corners[2], m2, m1))
        triangles.append(MeshTriangle(m0, m1, m2))

    return Mesh(vertices, triangles)