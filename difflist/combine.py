"""Combinators

O(1) building blocks: cons, snoc, append. concat is O(number of lists)."""

from __future__ import annotations

from collections.abc import Iterable

from .dlist import DList

def cons[T](item: T, dlist: DList[T]) -> DList[T]:
    """[item] followed by dlist."""
    return dlist.cons(item)

def snoc[T](dlist: DList[T], item: T) -> DList[T]:
    """dlist followed by [item]."""
    return dlist.snoc(item)

def append[T](left: DList[T], right: DList[T]) -> DList[T]:
    """left's contents followed by right's. Associative, empty() is identity."""
    return left.append(right)

def concat[T](lists: Iterable[DList[T]]) -> DList[T]:
    """Concatenate lists in order. concat([]) is empty()."""
    return DList.concat(lists)

__all__ = ("cons", "snoc", "append", "concat")
