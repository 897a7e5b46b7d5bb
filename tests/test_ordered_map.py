import operator
import random

import pytest

from containerkit.ordered_map import OrderedMap, swap
from containerkit.pair import Pair, make_pair
from containerkit.rbtree import RedBlackTree


def keys_of(mapping):
    return [p.first for p in mapping]


@pytest.fixture
def sample():
    return OrderedMap([(10, "a"), (20, "b"), (30, "c")])


def test_iteration_is_sorted():
    data = list(range(200))
    random.Random(7).shuffle(data)
    m = OrderedMap((k, str(k)) for k in data)
    assert keys_of(m) == sorted(data)
    assert len(m) == len(data)
    assert all(p.second == str(p.first) for p in m)


def test_reversed_is_descending(sample):
    assert [p.first for p in reversed(sample)] == [30, 20, 10]


def test_insert_duplicate_keeps_original():
    m = OrderedMap()
    stored, inserted = m.insert(make_pair(1, "one"))
    assert inserted is True
    assert stored == Pair(1, "one")
    again, inserted = m.insert((1, "uno"))
    assert inserted is False
    assert again.second == "one"
    assert len(m) == 1


def test_getitem_with_default_factory_inserts():
    m = OrderedMap(default_factory=int)
    assert m["missing"] == 0
    assert "missing" in m
    assert len(m) == 1


def test_getitem_without_default_raises(sample):
    with pytest.raises(KeyError):
        sample[99]
    assert 99 not in sample


def test_setitem_inserts_and_overwrites(sample):
    sample[20] = "changed"
    sample[25] = "new"
    assert sample[20] == "changed"
    assert sample[25] == "new"
    assert keys_of(sample) == [10, 20, 25, 30]


def test_find_returns_mutable_pair(sample):
    found = sample.find(20)
    assert found == Pair(20, "b")
    found.second = "z"
    assert sample[20] == "z"
    assert sample.find(21) is None and sample.count(21) == 0
    assert sample.count(20) == 1


def test_erase_key(sample):
    assert sample.erase(20) == 1
    assert sample.erase(20) == 0
    assert keys_of(sample) == [10, 30]


def test_erase_many_keeps_order():
    data = list(range(100))
    m = OrderedMap((k, k) for k in data)
    removed = data[::3]
    for k in removed:
        assert m.erase(k) == 1
    expected = [k for k in data if k not in removed]
    assert keys_of(m) == expected
    assert len(m) == len(expected)


def test_erase_range(sample):
    sample[40] = "d"
    sample.erase_range(20, 40)
    assert keys_of(sample) == [10, 40]


def test_erase_range_to_end(sample):
    sample.erase_range(20)
    assert keys_of(sample) == [10]


def test_bounds(sample):
    assert sample.lower_bound(20).first == 20
    assert sample.upper_bound(20).first == 30
    assert sample.lower_bound(25).first == 30
    assert sample.lower_bound(5).first == 10
    assert sample.upper_bound(30) is None and sample.lower_bound(31) is None


def test_equal_range(sample):
    low, high = sample.equal_range(20)
    assert low.first == 20
    assert high.first == 30
    low, high = sample.equal_range(15)
    assert low is high


def test_custom_ordering():
    m = OrderedMap([(1, "x"), (3, "y"), (2, "z")], less=operator.gt)
    assert keys_of(m) == [3, 2, 1]
    assert m.key_comp() is operator.gt
    assert m.lower_bound(2).first == 2
    assert m.upper_bound(2).first == 1


def test_value_comp(sample):
    compare = sample.value_comp()
    assert compare(Pair(1, "z"), Pair(2, "a")) is True
    assert compare(Pair(2, "a"), Pair(1, "z")) is False


def test_relational_operators():
    base = OrderedMap([(1, 1), (2, 2)])
    same = OrderedMap([(1, 1), (2, 2)])
    bigger_value = OrderedMap([(1, 1), (2, 3)])
    longer = OrderedMap([(1, 1), (2, 2), (3, 3)])
    assert base == same
    assert not base != same
    assert base < bigger_value and bigger_value > base
    assert base <= same and base >= same
    assert base < longer and not longer <= base
    assert base != longer


def test_copy_is_independent(sample):
    duplicate = sample.copy()
    duplicate[50] = "e"
    duplicate.erase(10)
    assert keys_of(sample) == [10, 20, 30]
    assert keys_of(duplicate) == [20, 30, 50]


def test_swap_member_and_function():
    first = OrderedMap([(1, "a")])
    second = OrderedMap([(2, "b"), (3, "c")])
    first.swap(second)
    assert keys_of(first) == [2, 3]
    assert keys_of(second) == [1]
    swap(first, second)
    assert keys_of(first) == [1]
    assert keys_of(second) == [2, 3]


def test_clear_and_empty(sample):
    assert not sample.empty()
    sample.clear()
    assert sample.empty()
    assert len(sample) == 0
    sample[1] = "again"
    assert keys_of(sample) == [1]


def test_max_size_matches_tree(sample):
    assert sample.max_size() == RedBlackTree().max_size()
    assert sample.max_size() >= len(sample)