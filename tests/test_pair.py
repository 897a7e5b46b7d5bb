import pytest

from containerkit.pair import Pair, make_pair


def test_default_pair_holds_none():
    pair = Pair()
    assert pair.first is None
    assert pair.second is None


def test_make_pair_builds_pair():
    pair = make_pair(1, "one")
    assert pair == Pair(1, "one")
    assert (pair.first, pair.second) == (1, "one")


def test_equality_requires_both_members():
    assert Pair(1, 2) == Pair(1, 2)
    assert not Pair(1, 2) == Pair(1, 3)
    assert Pair(1, 2) != Pair(2, 2)


def test_equality_with_other_type_is_false():
    assert (Pair(1, 2) == (1, 2)) is False


def test_less_orders_by_first_then_second():
    assert Pair(1, 9) < Pair(2, 0)
    assert Pair(1, 1) < Pair(1, 2)
    assert not Pair(1, 2) < Pair(1, 2)
    assert not Pair(2, 0) < Pair(1, 9)


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (Pair(1, 1), Pair(1, 2)),
        (Pair(0, 5), Pair(1, 0)),
        (Pair("a", "z"), Pair("b", "a")),
    ],
)
def test_derived_comparisons(lhs, rhs):
    assert lhs <= rhs
    assert lhs <= Pair(lhs.first, lhs.second)
    assert rhs > lhs
    assert rhs >= lhs
    assert not lhs > rhs
    assert not lhs >= rhs


def test_sorting_pairs():
    pairs = [Pair(2, "b"), Pair(1, "z"), Pair(2, "a")]
    assert sorted(pairs) == [Pair(1, "z"), Pair(2, "a"), Pair(2, "b")]


def test_unpacking():
    key, value = make_pair("k", 3)
    assert (key, value) == ("k", 3)


def test_members_are_mutable():
    pair = Pair(1, 2)
    pair.second = 5
    assert list(pair) == [1, 5]


def test_ordering_against_other_type_raises():
    with pytest.raises(TypeError):
        Pair(1, 2) < (1, 2)