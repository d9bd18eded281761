"""Constructors

Functional entry points for building difference lists."""

from __future__ import annotations

from collections.abc import Sequence

from kungfu import Option

from ._types import Step
from .dlist import DList

def empty[T]() -> DList[T]:
    """Zero-element list. Identity element for append()."""
    return DList.empty()

def singleton[T](item: T) -> DList[T]:
    return DList.singleton(item)

def from_sequence[T](items: Sequence[T]) -> DList[T]:
    """
    Wrap an existing sequence in O(1).

    Example:
        d = from_sequence([1, 2, 3])
        to_sequence(d)  # [1, 2, 3]

    NOTE: The sequence is kept by reference, not copied.
    """
    return DList.from_sequence(items)

def from_optional[T](value: Option[T]) -> DList[T]:
    """Zero-or-one element list from an Option (Nothing() -> empty)."""
    return DList.from_optional(value)

def replicate[T](n: int, item: T) -> DList[T]:
    """
    item repeated n times (Haskell's replicate).

    Deferred: the elements are produced only when the list is walked.
    n <= 0 yields the empty list.
    """
    return DList.replicate(n, item)

def unfold[T, S](step: Step[T, S], seed: S, *, limit: int | None = None) -> DList[T]:
    """
    Haskell's unfoldr for difference lists.

    Example:
        def countdown(n: int) -> Option[tuple[int, int]]:
            return Nothing() if n == 0 else Some((n, n - 1))

        to_sequence(unfold(countdown, 3))  # [3, 2, 1]

    With limit=k at most k elements are produced, which makes a step
    that never returns Nothing() safe to materialize.
    """
    return DList.unfold(step, seed, limit=limit)

__all__ = (
    "empty",
    "singleton",
    "from_sequence",
    "from_optional",
    "replicate",
    "unfold",
)
