"""A scan that yields the initial value and every running accumulation."""

from __future__ import annotations

from itertools import accumulate
from typing import Callable, Iterable, Iterator, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def scan_full(
    iterable: Iterable[A], init: B, step: Callable[[B, A], B]
) -> Iterator[B]:
    """Yield ``init`` followed by ``step`` applied cumulatively to each item."""
    return accumulate(iterable, step, initial=init)