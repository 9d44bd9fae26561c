"""Triangles given as indices into a mesh's vertex list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from patina.mesh_edge import MeshEdge
from patina.triangle import Triangle
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True, repr=False)
class MeshTriangle:
    """Three vertex indices in winding order."""

    v1: int
    v2: int
    v3: int

    @property
    def vertices(self) -> tuple[int, int, int]:
        return (self.v1, self.v2, self.v3)

    def invert(self) -> MeshTriangle:
        """Return the triangle with its winding reversed."""
        return MeshTriangle(self.v1, self.v3, self.v2)

    def edges(self) -> tuple[MeshEdge, MeshEdge, MeshEdge]:
        return (
            MeshEdge(self.v1, self.v2),
            MeshEdge(self.v2, self.v3),
            MeshEdge(self.v3, self.v1),
        )

    def for_vertices(self, vs: Sequence[Vec3]) -> Triangle:
        """The geometric triangle formed by looking the indices up in ``vs``."""
        for v in self.vertices:
            if not 0 <= v < len(vs):
                raise IndexError(f"Vertex count is {len(vs)} but the vertex is {v}")
        return Triangle(tuple(vs[v] for v in self.vertices))

    def __getitem__(self, index: int) -> int:
        return self.vertices[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        return repr(list(self.vertices))