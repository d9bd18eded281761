from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Leaf[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Branch[T]:
    left: Tree[T]
    right: Tree[T]


type Tree[T] = Leaf[T] | Branch[T]


def balanced(depth: int, start: int = 0) -> Tree[int]:
    """Full binary tree whose leaves hold start, start+1, ... in order."""
    if depth == 0:
        return Leaf(start)
    half = 2 ** (depth - 1)
    return Branch(balanced(depth - 1, start), balanced(depth - 1, start + half))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
