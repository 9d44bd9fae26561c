"""Triangle meshes."""

from __future__ import annotations

import random
from typing import Iterable

from patina.errors import ManifoldError, ManifoldErrorKind
from patina.mesh_triangle import MeshTriangle
from patina.vec3 import Vec3


class Mesh:
    """A list of vertex positions and triangles indexing into it."""

    def __init__(
        self, vertices: Iterable[Vec3], triangles: Iterable[MeshTriangle]
    ) -> None:
        self.vertices: list[Vec3] = list(vertices)
        self.triangles: list[MeshTriangle] = list(triangles)
        count = len(self.vertices)
        for t in self.triangles:
            for v in t:
                if not 0 <= v < count:
                    raise ValueError(
                        f"triangle {t!r} refers to vertex {v} of {count}"
                    )

    def perturb(self, rng: random.Random, factor: float) -> None:
        """Move every vertex by a random offset in ``[0, factor)`` per axis."""
        self.vertices = [
            v + Vec3(rng.random() * factor, rng.random() * factor, rng.random() * factor)
            for v in self.vertices
        ]

    def check_manifold(self) -> None:
        """Raise ManifoldError unless every vertex has exactly one closed fan."""
        edge_table: dict[int, dict[int, list[int]]] = {}
        for t in self.triangles:
            a, b, c = t
            if a == b or a == c or b == c:
                raise ManifoldError(ManifoldErrorKind.DUPLICATE_VERTEX)
            for v1, v2, v3 in ((a, b, c), (b, c, a), (c, a, b)):
                edge_table.setdefault(v1, {}).setdefault(v2, []).append(v3)

        for v in range(len(self.vertices)):
            edges = edge_table.pop(v, None)
            if edges is None:
                raise ManifoldError(ManifoldErrorKind.MISSING_VERTEX)
            fan_count = 0
            while edges:
                fan_count += 1
                start = next(iter(edges))
                walk = start
                while True:
                    following = edges.pop(walk, None)
                    if following is None:
                        raise ManifoldError(ManifoldErrorKind.BROKEN_FAN)
                    if len(following) != 1:
                        raise ManifoldError(ManifoldErrorKind.SPLIT_FAN)
                    walk = following[0]
                    if walk == start:
                        break
            if fan_count != 1:
                raise ManifoldError(ManifoldErrorKind.DUPLICATE_FAN)

        if edge_table:
            raise ManifoldError(ManifoldErrorKind.BAD_VERTEX)

    def copy(self) -> Mesh:
        """An independent mesh with the same vertices and triangles."""
        return Mesh(self.vertices, self.triangles)

    def __repr__(self) -> str:
        return f"Mesh(vertices={self.vertices!r}, triangles={self.triangles!r})"