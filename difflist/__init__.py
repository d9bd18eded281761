"""
Difference lists for Python.

A DList represents a sequence as a deferred transformation, giving O(1)
append, cons and snoc. Build with many cheap appends, then materialize
once with to_sequence() (or just iterate).

Architecture:
- DList class: methods + Python protocols (iteration, ==, <, hash, repr)
- Functional API: same operations as plain functions (cons(x, d), ...)
- Monad API: fmap / bind / unit / zero / plus as named operations
- writer: LazyCoroResultWriter whose log is a DList
"""

# Core types
from ._types import Folder, Kleisli, Mapper, Step
from ._errors import EmptyDListError

# Internal helpers
from . import _helpers

# The value type
from .dlist import DList

# Functional API
from .construct import empty, from_optional, from_sequence, replicate, singleton, unfold
from .combine import append, concat, cons, snoc
from .eliminate import apply, compare, destructure, fold_right, head, tail, to_sequence
from .monad import ap, bind, fmap, maybe_return, plus, unit, zero

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, WriterResult, writer_error, writer_ok

__all__ = (
    # Types
    "DList",
    "Folder",
    "Kleisli",
    "Mapper",
    "Step",
    # Errors
    "EmptyDListError",
    # Construction
    "empty",
    "singleton",
    "from_sequence",
    "from_optional",
    "replicate",
    "unfold",
    # Combinators
    "cons",
    "snoc",
    "append",
    "concat",
    # Elimination
    "to_sequence",
    "apply",
    "destructure",
    "head",
    "tail",
    "fold_right",
    "compare",
    # Monad
    "fmap",
    "unit",
    "bind",
    "ap",
    "zero",
    "plus",
    "maybe_return",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "WriterResult",
    "writer_ok",
    "writer_error",
)
