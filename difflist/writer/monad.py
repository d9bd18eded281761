"""LazyCoroResultWriter Monad

Lazy async Result computation paired with a DList log.

Only the log-facing surface lives here: lifting values, telling entries,
binding (which joins logs in O(1)), and reading the log back."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from ..dlist import DList
from .result import WriterResult

type Thunk[T, E, W] = Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, W]]]


def _const[T, E, W](wr: WriterResult[T, E, W]) -> Thunk[T, E, W]:
    async def wrapper() -> WriterResult[T, E, W]:
        return wr

    return wrapper


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer whose log is a DList.

    Monadic laws (on result and materialized log):
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_run",)

    def __init__(self, run: Thunk[T, E, W], /) -> None:
        self._run = run

    @staticmethod
    def pure[V, LogT](value: V) -> LazyCoroResultWriter[V, typing.Never, LogT]:
        """Value with an empty log."""
        return LazyCoroResultWriter(_const(WriterResult(Ok(value))))

    @staticmethod
    def from_result[V, Err, LogT](result: Result[V, Err]) -> LazyCoroResultWriter[V, Err, LogT]:
        return LazyCoroResultWriter(_const(WriterResult(result)))

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> LazyCoroResultWriter[None, typing.Never, LogEntry]:
        """Log entries, produce no value."""
        return LazyCoroResultWriter.tell_log(DList.from_sequence(entries))

    @staticmethod
    def tell_log[LogEntry](log: DList[LogEntry]) -> LazyCoroResultWriter[None, typing.Never, LogEntry]:
        """Log a whole difference list (Haskell's tell)."""
        return LazyCoroResultWriter(_const(WriterResult(Ok(None), log)))

    def then[U](
        self,
        f: Callable[[T], typing.Awaitable[WriterResult[U, E, W]]],
        /,
    ) -> LazyCoroResultWriter[U, E, W]:
        """
        Monadic bind (>>=).

        On Ok runs f and joins its log after ours without copying either.
        On Error skips f and keeps the log gathered so far.
        """

        async def bound() -> WriterResult[U, E, W]:
            first = await self._run()
            match first.result:
                case Ok(value):
                    second = await f(value)
                    return WriterResult(second.result, first.log + second.log)
                case Error(err):
                    return WriterResult(Error(err), first.log)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResultWriter(bound)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Snoc entries onto the log, whatever the outcome."""

        async def logged() -> WriterResult[T, E, W]:
            wr = await self._run()
            log = wr.log
            for entry in entries:
                log = log.snoc(entry)
            return WriterResult(wr.result, log)

        return LazyCoroResultWriter(logged)

    def listen(self) -> LazyCoroResultWriter[tuple[T, DList[W]], E, W]:
        """Expose the (still deferred) log next to the value."""

        async def listened() -> WriterResult[tuple[T, DList[W]], E, W]:
            wr = await self._run()
            return WriterResult(wr.result.map(lambda value: (value, wr.log)), wr.log)

        return LazyCoroResultWriter(listened)

    def to_lazy_coro_result(self) -> LazyCoroResult[tuple[T, list[W]], E]:
        """Drop into kungfu, materializing the log into the success value."""

        async def materialized() -> Result[tuple[T, list[W]], E]:
            wr = await self._run()
            return wr.result.map(lambda value: (value, wr.entries()))

        return LazyCoroResult(materialized)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, W]]:
        return self._run()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, W]]:
        return self._run().__await__()


def writer_ok[T, W](value: T, *log_entries: W) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Successful writer with optional log entries."""
    return LazyCoroResultWriter(_const(WriterResult(Ok(value), DList.from_sequence(log_entries))))


def writer_error[E, W](error: E, *log_entries: W) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Failed writer with optional log entries."""
    return LazyCoroResultWriter(_const(WriterResult(Error(error), DList.from_sequence(log_entries))))


__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
