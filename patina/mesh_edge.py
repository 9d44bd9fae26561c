"""Edges between two vertex indices of a mesh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from patina.segment3 import Segment3
from patina.sorted_pair import SortedPair
from patina.vec3 import Vec3


@dataclass(frozen=True, slots=True, order=True)
class MeshEdge:
    """A directed edge from vertex ``start`` to vertex ``end``."""

    start: int
    end: int

    @property
    def vertices(self) -> tuple[int, int]:
        return (self.start, self.end)

    def invert(self) -> MeshEdge:
        """Return the edge with its ends swapped."""
        return MeshEdge(self.end, self.start)

    def for_vertices(self, vs: Sequence[Vec3]) -> Segment3:
        return Segment3(vs[self.start], vs[self.end])

    def sorted(self) -> SortedPair[int]:
        return SortedPair.of(self.start, self.end)

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end