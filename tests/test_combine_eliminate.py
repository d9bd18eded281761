"""
Combinators (cons, snoc, append, concat) and eliminators
(destructure, head, tail, fold_right, compare).
"""

import pytest

from difflist import (
    EmptyDListError,
    append,
    apply,
    compare,
    concat,
    cons,
    destructure,
    empty,
    fold_right,
    from_sequence,
    head,
    singleton,
    snoc,
    tail,
    to_sequence,
)


class TestCombinators:

    def test_cons(self):
        assert to_sequence(cons(0, from_sequence([1, 2]))) == [0, 1, 2]

    def test_snoc(self):
        assert to_sequence(snoc(from_sequence([1, 2]), 3)) == [1, 2, 3]

    def test_cons_onto_empty(self):
        assert to_sequence(cons("a", empty())) == ["a"]

    def test_snoc_onto_empty(self):
        assert to_sequence(snoc(empty(), "a")) == ["a"]

    def test_append(self):
        d = append(from_sequence([1, 2]), from_sequence([3]))
        assert to_sequence(d) == [1, 2, 3]

    def test_append_empty_returns_other_operand(self):
        d = from_sequence([1])
        assert append(empty(), d) is d
        assert append(d, empty()) is d

    def test_mixed_chain(self):
        d = snoc(cons(1, snoc(singleton(2), 3)), 4)
        d = append(d, cons(5, from_sequence([6])))
        assert to_sequence(d) == [1, 2, 3, 4, 5, 6]

    def test_inputs_unchanged(self):
        base = from_sequence([1, 2])
        cons(0, base)
        snoc(base, 3)
        append(base, base)
        assert to_sequence(base) == [1, 2]

    def test_concat(self):
        ds = [from_sequence([1]), from_sequence([2, 3]), from_sequence([4])]
        assert to_sequence(concat(ds)) == [1, 2, 3, 4]

    def test_concat_empty(self):
        assert to_sequence(concat([])) == []

    def test_concat_generator(self):
        assert to_sequence(concat(singleton(i) for i in range(3))) == [0, 1, 2]


class TestDestructure:

    def test_non_empty(self):
        result = destructure(
            from_sequence([1, 2, 3]),
            on_empty=lambda: None,
            on_cons=lambda x, rest: (x, to_sequence(rest)),
        )
        assert result == (1, [2, 3])

    def test_empty(self):
        result = destructure(
            empty(),
            on_empty=lambda: "empty",
            on_cons=lambda x, rest: "cons",
        )
        assert result == "empty"

    def test_single_element_rest_is_empty(self):
        rest = destructure(singleton(1), on_empty=lambda: None, on_cons=lambda _, r: r)
        assert to_sequence(rest) == []


class TestHeadTail:

    def test_head(self):
        assert head(from_sequence([1, 2, 3])) == 1

    def test_tail(self):
        assert to_sequence(tail(from_sequence([1, 2, 3]))) == [2, 3]

    def test_head_of_appended(self):
        assert head(append(empty(), snoc(empty(), 7))) == 7

    def test_head_empty(self):
        with pytest.raises(EmptyDListError) as exc_info:
            head(empty())
        assert exc_info.value.operation == "head"
        assert str(exc_info.value) == "difflist.head: empty list"

    def test_tail_empty(self):
        with pytest.raises(EmptyDListError) as exc_info:
            tail(empty())
        assert exc_info.value.operation == "tail"

    def test_empty_error_is_index_error(self):
        with pytest.raises(IndexError):
            head(from_sequence([]))


class TestFoldRight:

    def test_right_associated(self):
        d = from_sequence(["a", "b", "c"])
        assert fold_right(lambda x, acc: f"({x}{acc})", "", d) == "(a(b(c)))"

    def test_seed_on_empty(self):
        assert fold_right(lambda x, acc: acc + x, 42, empty()) == 42

    def test_matches_list_fold(self):
        d = from_sequence([1, 2, 3, 4])
        assert fold_right(lambda x, acc: x - acc, 0, d) == 1 - (2 - (3 - (4 - 0)))


class TestCompare:

    @pytest.mark.parametrize("a,b,expected", [
        ([], [], 0),
        ([1], [1], 0),
        ([1], [2], -1),
        ([2], [1], 1),
        ([1, 2], [1], 1),
        ([1], [1, 2], -1),
        ([], [0], -1),
    ])
    def test_lexicographic(self, a, b, expected):
        assert compare(from_sequence(a), from_sequence(b)) == expected

    def test_representation_independent(self):
        a = snoc(snoc(empty(), 1), 2)
        b = cons(1, singleton(2))
        assert compare(a, b) == 0

    def test_element_comparison_error_propagates(self):
        with pytest.raises(TypeError):
            compare(from_sequence([1]), from_sequence(["a"]))


class TestApply:

    def test_contents_then_tail(self):
        assert apply(from_sequence([1, 2]), [3]) == [1, 2, 3]

    def test_empty_is_identity_on_tail(self):
        xs = [4, 5]
        out = apply(empty(), xs)
        assert out == xs
        assert out is not xs

    def test_empty_tail_is_to_sequence(self):
        d = snoc(cons(0, singleton(1)), 2)
        assert apply(d, ()) == to_sequence(d)

    def test_accepts_any_iterable_tail(self):
        assert apply(singleton("a"), (c for c in "bc")) == ["a", "b", "c"]
