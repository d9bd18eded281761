"""Internal helpers for difflist.

Small function utilities used by the monad laws and the writer.
Not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .dlist import DList

if typing.TYPE_CHECKING:
    from .writer.result import WriterResult

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """Function composition: compose(g, f)(x) == g(f(x))."""
    def composed(x: A) -> C:
        return g(f(x))
    return composed

# Log merging helpers
def merge_logs[W](logs: Iterable[DList[W]]) -> DList[W]:
    """
    Merge multiple logs into one. O(number of logs), no entry is copied.

    Usage:
        logs = [wr.log for wr in writer_results]
        merged = merge_logs(logs)
    """
    return DList.concat(logs)

def merge_writer_logs[T, E, W](wrs: Iterable[WriterResult[T, E, W]]) -> DList[W]:
    """Extract and merge logs from multiple WriterResults."""
    return merge_logs(wr.log for wr in wrs)

__all__ = (
    "identity",
    "compose",
    "merge_logs",
    "merge_writer_logs",
)
