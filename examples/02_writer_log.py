from __future__ import annotations

from _infra import Branch, Leaf, Tree, balanced, banner, run

from difflist import LazyCoroResultWriter, WriterResult, singleton
from kungfu import Error, Ok


def flatten_writer[T](tree: Tree[T]) -> LazyCoroResultWriter[None, str, T]:
    """
    Flatten a tree by telling each leaf into the log.

    The log is a DList, so `then` appends sub-logs without copying.
    """
    match tree:
        case Leaf(value):
            return LazyCoroResultWriter.tell_log(singleton(value))
        case Branch(left, right):
            return flatten_writer(left).then(lambda _: flatten_writer(right))


async def main() -> None:
    banner("02_writer_log: Writer monad with a DList log")

    wr: WriterResult[None, str, int] = await flatten_writer(balanced(depth=3))
    match wr.result:
        case Ok(_):
            print(f"log: {wr.entries()!r}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
