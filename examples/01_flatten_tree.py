from __future__ import annotations

from _infra import Branch, Leaf, Tree, balanced, banner

from difflist import DList, empty, singleton, to_sequence


def flatten[T](tree: Tree[T]) -> DList[T]:
    """Every Branch is an O(1) append, so flattening is linear."""
    match tree:
        case Leaf(value):
            return singleton(value)
        case Branch(left, right):
            return flatten(left) + flatten(right)


def left_spine(n: int) -> DList[int]:
    """Naive list appends here would be quadratic."""
    acc: DList[int] = empty()
    for i in range(n):
        acc = acc.snoc(i)
    return acc


def main() -> None:
    banner("01_flatten_tree: O(1) append while walking a tree")

    tree = balanced(depth=4)
    print(f"leaves: {to_sequence(flatten(tree))}")

    spine = left_spine(100_000)
    print(f"spine: head={spine.head()} len={len(spine)}")


if __name__ == "__main__":
    main()
