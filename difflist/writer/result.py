"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

from kungfu import Result

from ..dlist import DList


class WriterResult[T, E, W]:
    """
    Result with accumulated writer log.

    Combines:
    - Result[T, E]: computation result (success or error)
    - DList[W]: accumulated log entries

    This is the "unwrapped" form of LazyCoroResultWriter.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: DList[W] | None = None) -> None:
        self._result = result
        self._log: DList[W] = DList.empty() if log is None else log

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> DList[W]:
        """The accumulated log, still deferred."""
        return self._log

    def entries(self) -> list[W]:
        """Materialize the log."""
        return self._log.to_list()

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
