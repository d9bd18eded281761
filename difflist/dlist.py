"""DList - difference list

A sequence with O(1) append, cons and snoc, materialized on demand.

Monoid laws:
- Left identity: DList.empty().append(d) == d
- Right identity: d.append(DList.empty()) == d
- Associativity: a.append(b).append(c) == a.append(b.append(c))

Monad laws:
- Left identity: DList.pure(x).bind(k) == k(x)
- Right identity: d.bind(DList.pure) == d
- Associativity: d.bind(f).bind(g) == d.bind(lambda x: f(x).bind(g))

Equality and ordering are defined on materialized contents, so two lists
assembled differently compare equal when they hold the same elements."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import assert_never

from kungfu import Nothing, Option, Some

from ._errors import EmptyDListError
from ._types import Folder, Kleisli, Mapper, Step
from .node import NIL, Cons, Join, Lift, Nil, Node, Repeat, Snoc, Unfold, walk

# Sequences that can be wrapped without a snapshot
_IMMUTABLE_SEQUENCES = (tuple, str, bytes, range)


class DList[T]:
    """Immutable difference list.

    Each combinator wraps the current tree in one new node; nothing is
    traversed until the list is iterated or materialized.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node[T] = NIL, /) -> None:
        self._node = node

    @property
    def node(self) -> Node[T]:
        """The underlying deferred tree."""
        return self._node

    # Construction

    @staticmethod
    def empty[V]() -> DList[V]:
        """Zero elements; identity for append()."""
        return _EMPTY

    @staticmethod
    def singleton[V](item: V) -> DList[V]:
        return DList(Cons(item, NIL))

    @staticmethod
    def pure[V](item: V) -> DList[V]:
        """Monadic return. Same as singleton()."""
        return DList.singleton(item)

    @staticmethod
    def of[V](*items: V) -> DList[V]:
        return DList(Lift(items))

    @staticmethod
    def from_sequence[V](items: Sequence[V]) -> DList[V]:
        """
        Wrap a sequence.

        Immutable sequences (tuple, str, bytes, range) are kept by
        reference; anything else is snapshotted into a tuple so later
        mutation of the caller's object cannot leak into the list.
        """
        if not isinstance(items, _IMMUTABLE_SEQUENCES):
            items = tuple(items)
        if not items:
            return _EMPTY
        return DList(Lift(items))

    @staticmethod
    def from_optional[V](value: Option[V]) -> DList[V]:
        """Nothing() becomes empty, Some(x) becomes singleton(x)."""
        match value:
            case Some(item):
                return DList.singleton(item)
            case Nothing():
                return _EMPTY
            case _ as unreachable:
                assert_never(unreachable)

    @staticmethod
    def replicate[V](n: int, item: V) -> DList[V]:
        """item repeated n times. Non-positive n gives the empty list."""
        if n <= 0:
            return _EMPTY
        return DList(Repeat(n, item))

    @staticmethod
    def unfold[V, S](
        step: Step[V, S],
        seed: S,
        *,
        limit: int | None = None,
    ) -> DList[V]:
        """
        Build a list by running step on an evolving state.

        step returns Some((item, next_state)) to produce an element or
        Nothing() to stop. Evaluation is deferred: iterating the result
        runs step one element at a time, so an endless step can still be
        consumed lazily. Materializing it needs either a step that stops
        or an explicit limit on the number of elements.
        """
        if limit is not None:
            if limit < 0:
                raise ValueError(f"unfold(): limit must be >= 0, got {limit}")
            if limit == 0:
                return _EMPTY
        return DList(Unfold(step, seed, limit))

    @staticmethod
    def concat[V](lists: Iterable[DList[V]]) -> DList[V]:
        """Right fold of append() seeded with empty()."""
        result: DList[V] = _EMPTY
        for item in reversed(list(lists)):
            result = item.append(result)
        return result

    # Combinators

    def cons(self, item: T, /) -> DList[T]:
        """O(1) prepend."""
        return DList(Cons(item, self._node))

    def snoc(self, item: T, /) -> DList[T]:
        """O(1) append of a single element."""
        return DList(Snoc(self._node, item))

    def append(self, other: DList[T], /) -> DList[T]:
        """O(1) concatenation."""
        if isinstance(self._node, Nil):
            return other
        if isinstance(other._node, Nil):
            return self
        return DList(Join(self._node, other._node))

    # Elimination

    def to_list(self) -> list[T]:
        """Materialize into a new list. O(n)."""
        return list(walk(self._node))

    def apply(self, tail: Iterable[T], /) -> list[T]:
        """
        Run the represented transformation on tail: contents, then tail.

        to_list() is apply(()).
        """
        result = self.to_list()
        result.extend(tail)
        return result

    def destructure[R](
        self,
        *,
        on_empty: Callable[[], R],
        on_cons: Callable[[T, DList[T]], R],
    ) -> R:
        """
        Pattern match on the materialized contents.

        Calls on_empty() for an empty list, otherwise on_cons(head, rest)
        where rest wraps the remaining elements.
        """
        items = self.to_list()
        if not items:
            return on_empty()
        return on_cons(items[0], DList.from_sequence(items[1:]))

    def head(self) -> T:
        """First element. Raises EmptyDListError on an empty list."""
        for item in self:
            return item
        raise EmptyDListError("head")

    def tail(self) -> DList[T]:
        """All but the first element. Raises EmptyDListError on an empty list."""

        def fail() -> DList[T]:
            raise EmptyDListError("tail")

        return self.destructure(on_empty=fail, on_cons=lambda _, rest: rest)

    def fold_right[B](self, f: Folder[T, B], seed: B, /) -> B:
        """
        Right-associated fold: f(x0, f(x1, ... f(xn, seed))).

        f is applied from the last element towards the first.
        """
        acc = seed
        for item in reversed(self.to_list()):
            acc = f(item, acc)
        return acc

    # Functor / Monad

    def map[U](self, f: Mapper[T, U], /) -> DList[U]:
        """Apply f to every element, preserving order. One materialization."""
        empty: DList[U] = _EMPTY
        return self.fold_right(lambda item, acc: acc.cons(f(item)), empty)

    def bind[U](self, k: Kleisli[T, U], /) -> DList[U]:
        """Monadic bind (>>=): concatenation of k(x) for every x, in order."""
        empty: DList[U] = _EMPTY
        return self.fold_right(lambda item, acc: k(item).append(acc), empty)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return walk(self._node)

    def __bool__(self) -> bool:
        for _ in self:
            return True
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __add__(self, other: object) -> DList[T]:
        if not isinstance(other, DList):
            return NotImplemented
        return self.append(typing.cast(DList[T], other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DList):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DList):
            return NotImplemented
        return self.to_list() < other.to_list()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DList):
            return NotImplemented
        return self.to_list() <= other.to_list()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DList):
            return NotImplemented
        return self.to_list() > other.to_list()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DList):
            return NotImplemented
        return self.to_list() >= other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"from_sequence({self.to_list()!r})"


_EMPTY: DList[typing.Any] = DList(NIL)


__all__ = ("DList",)
