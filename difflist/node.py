"""
Deferred representation of a difference list.

A DList does not hold a concrete list. It holds a small immutable tree of
nodes describing how its contents are assembled:

- Nil              - no elements (identity of Join)
- Lift(items)      - a wrapped sequence, traversed on demand
- Cons(item, rest) - one element in front of another tree
- Snoc(init, item) - one element after another tree
- Join(left, right)- left's contents followed by right's
- Repeat(count, item)
- Unfold(step, seed, limit)

Building a node is O(1). The work happens in walk(), which applies the
tree to the empty tail: it streams the contents left to right using an
explicit stack, so chains of any depth are safe.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import assert_never

from kungfu import Nothing, Some

from ._types import Step


# ============================================================================
# Nodes
# ============================================================================


class Node[T]:
    """Base class for difference list tree nodes."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Nil[T](Node[T]):
    pass


@dataclass(frozen=True, slots=True)
class Lift[T](Node[T]):
    items: Sequence[T]


@dataclass(frozen=True, slots=True)
class Cons[T](Node[T]):
    item: T
    rest: Node[T]


@dataclass(frozen=True, slots=True)
class Snoc[T](Node[T]):
    init: Node[T]
    item: T


@dataclass(frozen=True, slots=True)
class Join[T](Node[T]):
    left: Node[T]
    right: Node[T]


@dataclass(frozen=True, slots=True)
class Repeat[T](Node[T]):
    count: int
    item: T


@dataclass(frozen=True, slots=True)
class Unfold[T, S](Node[T]):
    step: Step[T, S]
    seed: S
    limit: int | None = None


NIL: Nil[typing.Any] = Nil()


# ============================================================================
# Traversal
# ============================================================================


def _unfold[T, S](node: Unfold[T, S]) -> Iterator[T]:
    state = node.seed
    produced = 0
    while node.limit is None or produced < node.limit:
        match node.step(state):
            case Some((item, state)):
                produced += 1
                yield item
            case Nothing():
                return
            case _ as unreachable:
                assert_never(unreachable)


def walk[T](root: Node[T]) -> Iterator[T]:
    """
    Stream the contents of a tree, left to right.

    Right-hand parts are pushed before left-hand parts so the stack pops
    them in logical order. Nothing is materialized beyond what the caller
    consumes.
    """
    stack: list[Node[T]] = [root]
    while stack:
        node = stack.pop()
        match node:
            case Nil():
                continue
            case Lift(items):
                yield from items
            case Cons(item, rest):
                yield item
                stack.append(rest)
            case Snoc(init, item):
                stack.append(Lift((item,)))
                stack.append(init)
            case Join(left, right):
                stack.append(right)
                stack.append(left)
            case Repeat(count, item):
                for _ in range(count):
                    yield item
            case Unfold():
                yield from _unfold(node)
            case _:
                raise TypeError(f"walk(): unknown node {node!r}")


__all__ = (
    "Node",
    "Nil",
    "Lift",
    "Cons",
    "Snoc",
    "Join",
    "Repeat",
    "Unfold",
    "NIL",
    "walk",
)
