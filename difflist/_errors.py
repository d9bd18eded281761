from __future__ import annotations

class EmptyDListError(IndexError):
    """head()/tail() called on a difference list with no elements."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"difflist.{operation}: empty list")

__all__ = ("EmptyDListError",)
