"""Splitting two intersecting meshes along their curve of intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import pairwise

from patina.bvh import Bvh
from patina.mesh import Mesh
from patina.mesh_edge import MeshEdge
from patina.mesh_triangle import MeshTriangle
from patina.ray3 import Ray3
from patina.segment2 import Segment2
from patina.sorted_pair import SortedPair
from patina.vec2 import Vec2
from patina.vec3 import Vec3

# Direction of the ray cast to decide whether a piece lies inside the other
# mesh; chosen to avoid running along axes or diagonals.
_INSIDE_PROBE = Vec3(0.123, 0.333, 0.11)


def _checked(value: float) -> float:
    if math.isnan(value):
        raise ValueError("NaN encountered while ordering vertices")
    return value


@dataclass(frozen=True, slots=True)
class BimeshTriangle:
    """A piece of one of the two input meshes, tagged by origin and position."""

    source: int
    inside: bool
    triangle: MeshTriangle


class _VertexBuilder:
    """The shared vertex list, with the source edge of each crossing point."""

    def __init__(self, mesh1: Mesh, mesh2: Mesh) -> None:
        self.vertices: list[Vec3] = [*mesh1.vertices, *mesh2.vertices]
        self.edge_of: list[SortedPair[int] | None] = [None] * len(self.vertices)

    def _crossing(self, edge: MeshEdge, triangle: MeshTriangle) -> int | None:
        segment = edge.for_vertices(self.vertices)
        time = triangle.for_vertices(self.vertices).intersect_segment(segment)
        if time is None:
            return None
        self.vertices.append(segment.at_time(time))
        self.edge_of.append(edge.sorted())
        return len(self.vertices) - 1

    def add_crossings(
        self,
        mesh1: _MeshBuilder,
        mesh2: _MeshBuilder,
        t1: int,
        t2: int,
        result: list[int],
    ) -> None:
        """Append the points where edges of ``t1`` pass through ``t2``."""
        for edge in mesh1.tris[t1].edges():
            crossings = mesh1.new_vertices.setdefault(edge.sorted(), {})
            if t2 not in crossings:
                crossings[t2] = self._crossing(edge, mesh2.tris[t2])
            vertex = crossings[t2]
            if vertex is not None:
                if len(result) >= 2:
                    raise RuntimeError(
                        f"triangles {t1} and {t2} cross at more than two points"
                    )
                result.append(vertex)


@dataclass
class _MeshBuilder:
    mesh: Mesh
    offset: int
    tris: list[MeshTriangle] = field(init=False)
    bvh: Bvh = field(init=False)
    new_vertices: dict[SortedPair[int], dict[int, int | None]] = field(
        default_factory=dict
    )
    new_edges: dict[int, set[SortedPair[int]]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.tris = [
            MeshTriangle(*(v + self.offset for v in t)) for t in self.mesh.triangles
        ]
        self.bvh = Bvh.from_mesh(self.mesh)

    def add_edge(self, t: int, edge: SortedPair[int]) -> None:
        self.new_edges.setdefault(t, set()).add(edge)

    def _split(
        self, ti: int, mt: MeshTriangle, vertices: _VertexBuilder
    ) -> list[MeshTriangle]:
        vs = vertices.vertices
        edges = self.new_edges.setdefault(ti, set())

        for edge in mt.edges():
            sequence = list(edge.vertices)
            crossings = self.new_vertices.get(edge.sorted())
            if crossings:
                sequence.extend(v for v in crossings.values() if v is not None)
            ray = edge.for_vertices(vs).as_ray()
            sequence.sort(key=lambda v: _checked(ray.project(vs[v])))
            edges.update(SortedPair.of(a, b) for a, b in pairwise(sequence))

        tri = mt.for_vertices(vs)
        projections: dict[int, Vec2] = {}
        for edge in edges:
            for v in edge:
                if v not in projections:
                    projections[v] = tri.project(vs[v])

        missing = {
            SortedPair.of(v1, v2)
            for v1 in projections
            for v2 in projections
            if v1 != v2
            and vertices.edge_of[v1] != vertices.edge_of[v2]
            and SortedPair.of(v1, v2) not in edges
        }

        def length_key(e: SortedPair[int]) -> tuple[float, int, int]:
            d = _checked(projections[e.first].distance(projections[e.second]))
            return (d, e.first, e.second)

        for candidate in sorted(missing, key=length_key):
            s1 = Segment2(projections[candidate.first], projections[candidate.second])
            ends = {candidate.first, candidate.second}

            def blocks(extant: SortedPair[int]) -> bool:
                if ends & {extant.first, extant.second}:
                    return False
                s2 = Segment2(projections[extant.first], projections[extant.second])
                return s1.intersect_time(s2) is not None

            if not any(blocks(extant) for extant in edges):
                edges.add(candidate)

        adjacency: dict[int, set[int]] = {}
        for e in edges:
            adjacency.setdefault(e.first, set()).add(e.second)
            adjacency.setdefault(e.second, set()).add(e.first)

        faces: set[tuple[int, int, int]] = set()
        for v1 in sorted(adjacency):
            centre = projections[v1]
            ring = sorted(
                sorted(adjacency[v1]),
                key=lambda v2: _checked((projections[v2] - centre).angle()),
            )
            for v2, v3 in zip(ring, ring[1:] + ring[:1]):
                if v3 in adjacency[v2]:
                    faces.add(tuple(sorted((v1, v2, v3))))

        if len(faces) > 1:
            faces.discard(tuple(sorted(mt.vertices)))
        if not faces:
            raise RuntimeError(f"triangle {ti} produced no faces")

        out: list[MeshTriangle] = []
        for v1, v2, v3 in sorted(faces):
            p1, p2, p3 = projections[v1], projections[v2], projections[v3]
            t = MeshTriangle(v1, v2, v3)
            if (p2 - p1).cross(p3 - p1) < 0.0:
                t = t.invert()
            out.append(t)
        return out

    def build_tris(
        self, vertices: _VertexBuilder, source: int, other: _MeshBuilder
    ) -> list[BimeshTriangle]:
        """Split every triangle along the new edges and classify the pieces."""
        pieces = [
            piece
            for ti, mt in enumerate(self.tris)
            for piece in self._split(ti, mt, vertices)
        ]
        result = []
        for piece in pieces:
            midpoint = piece.for_vertices(vertices.vertices).midpoint()
            hits = other.bvh.intersect_ray(Ray3(midpoint, _INSIDE_PROBE))
            result.append(BimeshTriangle(source, len(hits) % 2 == 1, piece))
        return result


class Bimesh:
    """Two meshes cut along their intersection, each piece tagged inside/outside."""

    def __init__(self, mesh1: Mesh, mesh2: Mesh) -> None:
        builder = _VertexBuilder(mesh1, mesh2)
        first = _MeshBuilder(mesh1, 0)
        second = _MeshBuilder(mesh2, len(mesh1.vertices))
        for t1, t2 in first.bvh.intersect_bvh(second.bvh):
            crossing: list[int] = []
            builder.add_crossings(first, second, t1, t2, crossing)
            builder.add_crossings(second, first, t2, t1, crossing)
            if len(crossing) == 2:
                edge = SortedPair.of(*crossing)
                first.add_edge(t1, edge)
                second.add_edge(t2, edge)
        self.vertices: list[Vec3] = builder.vertices
        self.triangles: list[BimeshTriangle] = first.build_tris(
            builder, 0, second
        ) + second.build_tris(builder, 1, first)

    def mesh_part(self, source: int, inside: bool) -> Mesh:
        """The pieces of mesh ``source`` lying inside (or outside) the other."""
        return Mesh(
            self.vertices,
            (
                t.triangle
                for t in self.triangles
                if t.source == source and t.inside == inside
            ),
        )

    def mesh_part_all(self, source: int) -> Mesh:
        """Every piece of mesh ``source``."""
        return Mesh(
            self.vertices,
            (t.triangle for t in self.triangles if t.source == source),
        )