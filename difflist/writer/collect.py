"""Collection combinators for the writer

Sequential traversal with log merging. Every step's log is appended in
O(1), so a traversal over n items never re-copies earlier entries."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from kungfu import Error, Ok

from .._helpers import merge_writer_logs
from ..dlist import DList
from .monad import LazyCoroResultWriter
from .result import WriterResult

def traverse_writer[A, T, E, W](
    items: Sequence[A],
    handler: Callable[[A], LazyCoroResultWriter[T, E, W]],
) -> LazyCoroResultWriter[list[T], E, W]:
    """Monadic map with log merging. Stops at the first Error, keeping logs so far."""

    async def run() -> WriterResult[list[T], E, W]:
        values: list[T] = []
        raws: list[WriterResult[T, E, W]] = []

        for item in items:
            wr = await handler(item)()
            raws.append(wr)
            match wr.result:
                case Ok(v):
                    values.append(v)
                case Error(e):
                    return WriterResult(Error(e), merge_writer_logs(raws))

        return WriterResult(Ok(values), merge_writer_logs(raws))

    return LazyCoroResultWriter(run)

def sequence_writer[T, E, W](
    writers: Sequence[LazyCoroResultWriter[T, E, W]],
) -> LazyCoroResultWriter[list[T], E, W]:
    """Flip structure with log merging. Implemented as traverse(id)."""
    return traverse_writer(writers, handler=lambda w: w)

def fold_writer[A, T, E, W](
    items: Sequence[A],
    handler: Callable[[T, A], LazyCoroResultWriter[T, E, W]],
    *,
    initial: T,
) -> LazyCoroResultWriter[T, E, W]:
    """Effectful fold with log merging."""

    async def run() -> WriterResult[T, E, W]:
        acc = initial
        merged_log: DList[W] = DList.empty()

        for item in items:
            wr = await handler(acc, item)()
            merged_log = merged_log.append(wr.log)
            match wr.result:
                case Ok(new_acc):
                    acc = new_acc
                case Error(e):
                    return WriterResult(Error(e), merged_log)

        return WriterResult(Ok(acc), merged_log)

    return LazyCoroResultWriter(run)

__all__ = ("traverse_writer", "sequence_writer", "fold_writer")
