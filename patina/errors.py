"""Errors reported when checking meshes."""

from __future__ import annotations

from enum import Enum


class ManifoldErrorKind(Enum):
    """The specific defect found by a manifold check.

    DUPLICATE_VERTEX: some face repeats one of its corners.
    MISSING_VERTEX: some vertex is used by no face at all.
    BROKEN_FAN: walking the faces around a vertex hits a gap.
    SPLIT_FAN: walking around a vertex finds more than one way on.
    DUPLICATE_FAN: the faces around a vertex form several separate rings.
    BAD_VERTEX: some face refers to a vertex index outside the mesh.
    """

    DUPLICATE_VERTEX = "DuplicateVertex"
    MISSING_VERTEX = "MissingVertex"
    BROKEN_FAN = "BrokenFan"
    SPLIT_FAN = "SplitFan"
    DUPLICATE_FAN = "DuplicateFan"
    BAD_VERTEX = "BadVertex"


class ManifoldError(Exception):
    """Raised when a mesh is not a closed manifold."""

    def __init__(self, kind: ManifoldErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind