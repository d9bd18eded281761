"""
Functor / Monad / MonadPlus for DList.

Python has no typeclasses, so the capability set is exposed as named
functions:
- fmap:  functor map
- unit, bind, ap:  monad / applicative (return, >>=, <*>)
- zero, plus:  monoid with failure (mzero, mplus; plus is also <|>)
- maybe_return:  Option -> zero-or-one results
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Option

from ._types import Kleisli, Mapper
from .dlist import DList

def fmap[T, U](f: Mapper[T, U], dlist: DList[T]) -> DList[U]:
    """
    Map f over every element.

    Laws:
    - fmap(identity, d) == d
    - fmap(compose(g, f), d) == fmap(g, fmap(f, d))
    """
    return dlist.map(f)

def unit[T](item: T) -> DList[T]:
    """Monadic return. Same as singleton()."""
    return DList.pure(item)

def bind[T, U](dlist: DList[T], k: Kleisli[T, U]) -> DList[U]:
    """
    Monadic bind: k applied to every element, results concatenated in order.

    Example:
        bind(from_sequence([1, 2]), lambda x: from_sequence([x, x]))
        # from_sequence([1, 1, 2, 2])
    """
    return dlist.bind(k)

def ap[T, U](fs: DList[Callable[[T], U]], dlist: DList[T]) -> DList[U]:
    """
    Applicative apply (<*>): every function applied to every element.

    Function-major order:
        ap(DList.of(f, g), DList.of(1, 2))  # f(1), f(2), g(1), g(2)
    """
    return fs.bind(lambda f: dlist.map(f))

def zero[T]() -> DList[T]:
    """mzero: no results."""
    return DList.empty()

def plus[T](left: DList[T], right: DList[T]) -> DList[T]:
    """mplus / <|>: results of left, then results of right."""
    return left.append(right)

def maybe_return[T](value: Option[T]) -> DList[T]:
    """Convert an Option into zero or one results."""
    return DList.from_optional(value)

__all__ = ("fmap", "unit", "bind", "ap", "zero", "plus", "maybe_return")
