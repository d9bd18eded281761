"""
Eliminators
===========

Everything that reads a difference list back: materialization, pattern
matching, folds and comparison. All of these are O(n) except head(),
which stops after the first element.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Literal

from ._types import Folder
from .dlist import DList


def to_sequence[T](dlist: DList[T]) -> list[T]:
    """Materialize into a new list."""
    return dlist.to_list()


def apply[T](dlist: DList[T], tail: Iterable[T]) -> list[T]:
    """
    dlist's contents followed by tail, as a new list.

    Example:
        apply(from_sequence([1, 2]), [3])  # [1, 2, 3]
    """
    return dlist.apply(tail)


def destructure[T, R](
    dlist: DList[T],
    *,
    on_empty: Callable[[], R],
    on_cons: Callable[[T, DList[T]], R],
) -> R:
    """
    List elimination.

    Example:
        destructure(
            d,
            on_empty=lambda: "nothing",
            on_cons=lambda x, rest: f"{x} and {len(rest)} more",
        )
    """
    return dlist.destructure(on_empty=on_empty, on_cons=on_cons)


def head[T](dlist: DList[T]) -> T:
    """First element. Raises EmptyDListError on an empty list."""
    return dlist.head()


def tail[T](dlist: DList[T]) -> DList[T]:
    """All but the first element. Raises EmptyDListError on an empty list."""
    return dlist.tail()


def fold_right[T, B](f: Folder[T, B], seed: B, dlist: DList[T]) -> B:
    return dlist.fold_right(f, seed)


def compare[T](left: DList[T], right: DList[T]) -> Literal[-1, 0, 1]:
    """
    Three-way lexicographic comparison of materialized contents.

    Returns -1, 0 or 1. Element comparisons that raise propagate.
    """
    a = left.to_list()
    b = right.to_list()
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


__all__ = (
    "to_sequence",
    "apply",
    "destructure",
    "head",
    "tail",
    "fold_right",
    "compare",
)
