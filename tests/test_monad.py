"""
Functor / Monad / MonadPlus operations.
"""

from kungfu import Nothing, Some

from difflist import (
    DList,
    ap,
    bind,
    empty,
    fmap,
    from_sequence,
    maybe_return,
    plus,
    singleton,
    to_sequence,
    unit,
    zero,
)
from difflist.node import Lift


class TestFmap:

    def test_doubles(self):
        assert to_sequence(fmap(lambda x: x * 2, from_sequence([1, 2, 3]))) == [2, 4, 6]

    def test_changes_type(self):
        assert to_sequence(fmap(str, from_sequence([1, 2]))) == ["1", "2"]

    def test_empty(self):
        assert to_sequence(fmap(lambda x: x + 1, empty())) == []

    def test_method_form(self):
        assert from_sequence([1, 2]).map(lambda x: -x).to_list() == [-1, -2]

    def test_materializes_once(self):
        walks = []

        class Counting(list):
            def __iter__(self):
                walks.append(1)
                return super().__iter__()

        d = DList(Lift(Counting([1, 2, 3])))
        assert walks == []
        mapped = fmap(lambda x: x + 1, d)
        assert len(walks) == 1
        assert to_sequence(mapped) == [2, 3, 4]
        assert len(walks) == 1


class TestBind:

    def test_duplicates(self):
        d = bind(from_sequence([1, 2]), lambda x: from_sequence([x, x]))
        assert to_sequence(d) == [1, 1, 2, 2]

    def test_filtering_with_zero(self):
        d = bind(from_sequence(range(6)), lambda x: unit(x) if x % 2 == 0 else zero())
        assert to_sequence(d) == [0, 2, 4]

    def test_empty_source(self):
        assert to_sequence(bind(empty(), lambda x: singleton(x))) == []

    def test_method_form(self):
        d = DList.of("a", "b").bind(lambda s: DList.of(s, s.upper()))
        assert d.to_list() == ["a", "A", "b", "B"]


class TestMonadPlus:

    def test_unit_is_singleton(self):
        assert unit(3) == singleton(3)
        assert DList.pure(3) == singleton(3)

    def test_zero_is_empty(self):
        assert to_sequence(zero()) == []

    def test_plus_is_append(self):
        assert to_sequence(plus(from_sequence([1]), from_sequence([2]))) == [1, 2]

    def test_maybe_return(self):
        assert to_sequence(maybe_return(Some("v"))) == ["v"]
        assert to_sequence(maybe_return(Nothing())) == []


class TestApplicative:

    def test_ap_function_major_order(self):
        def f(x):
            return ("f", x)

        def g(x):
            return ("g", x)

        d = ap(DList.of(f, g), from_sequence([1, 2]))
        assert to_sequence(d) == [("f", 1), ("f", 2), ("g", 1), ("g", 2)]

    def test_ap_with_empty_sides(self):
        assert to_sequence(ap(empty(), from_sequence([1]))) == []
        assert to_sequence(ap(singleton(str), empty())) == []

    def test_ap_identity(self):
        d = from_sequence([3, 1, 2])
        assert ap(unit(lambda x: x), d) == d
