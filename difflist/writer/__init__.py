"""
Writer Monad
============

LazyCoroResultWriter - a combined monad:
- Lazy (deferred computation)
- Coro (asynchronous)
- Result[T, E] (success/error)
- Writer[DList[W]] (log accumulated in a difference list)

Built on kungfu's Result and LazyCoroResult.
"""

from .result import WriterResult
from .monad import LazyCoroResultWriter, writer_ok, writer_error
from .collect import fold_writer, sequence_writer, traverse_writer

__all__ = (
    "WriterResult",
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
    "traverse_writer",
    "sequence_writer",
    "fold_writer",
)
