"""Unordered pairs kept in ascending order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, order=True, repr=False)
class SortedPair(Generic[T]):
    """A pair whose ``first`` is never greater than its ``second``."""

    first: Any
    second: Any

    def __post_init__(self) -> None:
        if self.second < self.first:
            raise ValueError(
                f"pair is not sorted: {self.first!r} > {self.second!r}"
            )

    @classmethod
    def of(cls, a: T, b: T) -> SortedPair[T]:
        """Build a pair from two values in either order."""
        return cls(a, b) if a <= b else cls(b, a)

    def __iter__(self) -> Iterator[T]:
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"{{{self.first!r}, {self.second!r}}}"