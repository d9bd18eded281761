"""
Core type definitions for difflist.

Callback shapes used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Option

if typing.TYPE_CHECKING:
    from .dlist import DList

# ============================================================================
# Type aliases
# ============================================================================

# Step = unfold generator: state -> Some((element, next_state)) | Nothing()
type Step[T, S] = Callable[[S], Option[tuple[T, S]]]

# Folder = right fold accumulator: (element, acc) -> acc
type Folder[T, B] = Callable[[T, B], B]

# Mapper = element transformation
type Mapper[T, U] = Callable[[T], U]

# Kleisli = continuation for bind: element -> DList of results
type Kleisli[T, U] = Callable[[T], DList[U]]

__all__ = (
    "Step",
    "Folder",
    "Mapper",
    "Kleisli",
)
