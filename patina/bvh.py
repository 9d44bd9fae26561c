"""Bounding volume hierarchies over triangle meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterator, Sequence

from patina.aabb import AABB
from patina.mesh import Mesh
from patina.ray3 import Ray3
from patina.sat import sat_intersects
from patina.scan import scan_full
from patina.triangle import Triangle
from patina.vec3 import vec3_sum

DEFAULT_MAX_SPLIT_SIZE = 4


def _bounds(tris: Sequence[BvhTriangleBuilder]) -> AABB:
    return reduce(lambda acc, t: acc.union(t.aabb), tris, AABB.empty())


@dataclass(frozen=True, slots=True)
class RayMeshIntersection:
    """A ray crossing the triangle with the given index at the given time."""

    index: int
    time: float


@dataclass(frozen=True, slots=True, repr=False)
class BvhTriangle:
    """A mesh triangle stored in a leaf, with its index in the mesh."""

    index: int
    triangle: Triangle

    def intersect_leaf(self, other: BvhTriangle, result: list[tuple[int, int]]) -> None:
        """Record ``(self.index, other.index)`` if the triangles cross."""
        if self.triangle.intersects(other.triangle):
            result.append((self.index, other.index))

    def intersect_node(self, other: BvhNodeView, result: list[tuple[int, int]]) -> None:
        """Record every triangle below ``other`` that crosses this one."""
        in_bounds = sat_intersects(self.triangle, other.aabb())
        before = len(result)
        for node2 in other.nodes():
            self.intersect_node(node2, result)
        for leaf2 in other.leaves():
            self.intersect_leaf(leaf2, result)
        if len(result) > before and not in_bounds:
            raise RuntimeError(
                f"triangle {self!r} intersects {result[-1]!r} "
                f"outside the bounds of {other!r}"
            )

    def intersect_ray(self, ray: Ray3, result: list[RayMeshIntersection]) -> None:
        time = self.triangle.intersect_ray(ray)
        if time is not None:
            result.append(RayMeshIntersection(self.index, time))

    def __repr__(self) -> str:
        return f"BvhTriangle(index={self.index}, vertices={self.triangle!r})"


@dataclass(slots=True)
class BvhNode:
    """A node of the hierarchy: child node indices and leaf triangles."""

    aabb: AABB
    nodes: list[int] = field(default_factory=list)
    leaves: list[BvhTriangle] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class BvhTriangleBuilder:
    """A triangle prepared for insertion, with its centroid and bounds."""

    index: int
    triangle: Triangle
    midpoint: object
    aabb: AABB

    @classmethod
    def from_triangle(cls, index: int, triangle: Triangle) -> BvhTriangleBuilder:
        return cls(
            index=index,
            triangle=triangle,
            midpoint=vec3_sum(triangle.points) / 3.0,
            aabb=reduce(
                lambda acc, p: acc.union(AABB.from_point(p)),
                triangle.points,
                AABB.empty(),
            ),
        )


def _best_split(
    tris: Sequence[BvhTriangleBuilder], axis: int
) -> tuple[list[BvhTriangleBuilder], list[BvhTriangleBuilder], float]:
    """Sort along ``axis`` and split where the surface-area cost is least."""
    for t in tris:
        if math.isnan(t.midpoint[axis]):
            raise ValueError(f"triangle {t.index} has a NaN midpoint")
    by_axis = sorted(tris, key=lambda t: t.midpoint[axis])

    def grow(box: AABB, t: BvhTriangleBuilder) -> AABB:
        return box.union(t.aabb)

    forward = [b.surface_area() for b in scan_full(by_axis, AABB.empty(), grow)]
    reverse = [
        b.surface_area() for b in scan_full(reversed(by_axis), AABB.empty(), grow)
    ]
    reverse.reverse()

    count = len(tris)
    costs = []
    for i, (left_area, right_area) in enumerate(zip(forward, reverse)):
        cost = i * left_area + (count - i) * right_area
        if not math.isfinite(cost):
            raise ValueError(f"non-finite split cost {cost} on axis {axis}")
        costs.append((i, cost))
    split, cost = min(costs, key=lambda item: item[1])
    return by_axis[:split], by_axis[split:], cost


@dataclass(slots=True)
class BvhBuilder:
    """Accumulates nodes while a hierarchy is being built."""

    nodes: list[BvhNode] = field(default_factory=list)
    max_split_size: int = DEFAULT_MAX_SPLIT_SIZE

    def build(self, root: int) -> Bvh:
        return Bvh(root=root, nodes=self.nodes)

    def add_leaf(self, tris: Sequence[BvhTriangleBuilder]) -> int:
        """Store the triangles in a single leaf node and return its index."""
        self.nodes.append(
            BvhNode(
                aabb=_bounds(tris),
                leaves=[BvhTriangle(t.index, t.triangle) for t in tris],
            )
        )
        return len(self.nodes) - 1

    def add_node(
        self,
        left: Sequence[BvhTriangleBuilder],
        right: Sequence[BvhTriangleBuilder],
    ) -> int:
        """Store an inner node over two subtrees and return its index."""
        aabb = _bounds(list(left) + list(right))
        left_index = self.add_triangles(left)
        right_index = self.add_triangles(right)
        self.nodes.append(BvhNode(aabb=aabb, nodes=[left_index, right_index]))
        return len(self.nodes) - 1

    def add_triangles(self, tris: Sequence[BvhTriangleBuilder]) -> int:
        """Build a subtree for the triangles and return the index of its root."""
        if len(tris) < self.max_split_size:
            return self.add_leaf(tris)
        left, right, _ = min(
            (_best_split(tris, axis) for axis in range(3)), key=lambda s: s[2]
        )
        if not left:
            return self.add_leaf(right)
        if not right:
            return self.add_leaf(left)
        return self.add_node(left, right)


@dataclass(frozen=True, slots=True, repr=False)
class BvhNodeView:
    """A node of a particular hierarchy."""

    bvh: Bvh
    node: int

    def aabb(self) -> AABB:
        return self.bvh.nodes[self.node].aabb

    def leaves(self) -> list[BvhTriangle]:
        return self.bvh.nodes[self.node].leaves

    def nodes(self) -> Iterator[BvhNodeView]:
        for child in self.bvh.nodes[self.node].nodes:
            yield BvhNodeView(self.bvh, child)

    def intersect_node(self, other: BvhNodeView, result: list[tuple[int, int]]) -> None:
        """Record every crossing pair of triangles below the two nodes."""
        if not self.aabb().intersects(other.aabb()):
            return
        for leaf1 in self.leaves():
            for leaf2 in other.leaves():
                leaf1.intersect_leaf(leaf2, result)
            for node2 in other.nodes():
                leaf1.intersect_node(node2, result)
        for node1 in self.nodes():
            for leaf2 in other.leaves():
                node1.intersect_leaf(leaf2, result)
            for node2 in other.nodes():
                node1.intersect_node(node2, result)

    def intersect_leaf(self, other: BvhTriangle, result: list[tuple[int, int]]) -> None:
        """Record every triangle below this node that crosses ``other``."""
        if sat_intersects(self.aabb(), other.triangle):
            for node1 in self.nodes():
                node1.intersect_leaf(other, result)
            for leaf1 in self.leaves():
                leaf1.intersect_leaf(other, result)

    def intersect_ray(self, ray: Ray3, result: list[RayMeshIntersection]) -> None:
        if ray.intersect_aabb(self.aabb()) is not None:
            for leaf in self.leaves():
                leaf.intersect_ray(ray, result)
            for node in self.nodes():
                node.intersect_ray(ray, result)

    def __repr__(self) -> str:
        parts = [
            f"area={self.aabb().surface_area()!r}",
            f"aabb={self.aabb()!r}",
            *(f"leaf={leaf!r}" for leaf in self.leaves()),
            *(f"node={node!r}" for node in self.nodes()),
        ]
        return "BvhNode(" + ", ".join(parts) + ")"


@dataclass(slots=True, repr=False)
class Bvh:
    """A hierarchy of bounding boxes over a set of triangles."""

    root: int
    nodes: list[BvhNode]

    @classmethod
    def from_triangles(cls, triangles: Sequence[BvhTriangleBuilder]) -> Bvh:
        builder = BvhBuilder()
        root = builder.add_triangles(triangles)
        return builder.build(root)

    @classmethod
    def from_mesh(cls, mesh: Mesh) -> Bvh:
        vs = mesh.vertices
        return cls.from_triangles(
            [
                BvhTriangleBuilder.from_triangle(
                    index, Triangle(tuple(vs[v] for v in t))
                )
                for index, t in enumerate(mesh.triangles)
            ]
        )

    def root_view(self) -> BvhNodeView:
        return BvhNodeView(self, self.root)

    def intersect_bvh(self, other: Bvh) -> list[tuple[int, int]]:
        """Index pairs of crossing triangles, this hierarchy's index first."""
        result: list[tuple[int, int]] = []
        self.root_view().intersect_node(other.root_view(), result)
        return result

    def intersect_ray(self, ray: Ray3) -> list[RayMeshIntersection]:
        result: list[RayMeshIntersection] = []
        self.root_view().intersect_ray(ray, result)
        return result

    def __repr__(self) -> str:
        return repr(self.root_view())