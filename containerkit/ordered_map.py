"""An ordered mapping with unique keys, backed by a red-black tree."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from containerkit.algorithms import equal, lexicographical_compare
from containerkit.pair import Pair
from containerkit.rbtree import RedBlackTree


def _as_pair(item: Any) -> Pair:
    if isinstance(item, Pair):
        return item
    key, value = item
    return Pair(key, value)


class OrderedMap:
    """Mapping kept sorted by key under a strict-weak-ordering predicate.

    Iteration yields the stored Pair objects in key order; changing a Pair's
    ``second`` changes the mapped value. Maps compare element-wise by Pair.
    """

    def __init__(
        self,
        items: Iterable[Any] | None = None,
        less: Callable[[Any, Any], bool] | None = None,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        self._tree = RedBlackTree(less)
        self.default_factory = default_factory
        if items is not None:
            self.insert_range(items)

    def copy(self) -> OrderedMap:
        """Return an independent map with the same entries and ordering."""
        duplicate = OrderedMap(less=self._tree.less, default_factory=self.default_factory)
        duplicate._tree = self._tree.copy()
        return duplicate

    def __repr__(self) -> str:
        body = ", ".join(f"{p.first!r}: {p.second!r}" for p in self)
        return f"OrderedMap({{{body}}})"

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._tree)

    def __reversed__(self) -> Iterator[Pair]:
        return reversed(self._tree)

    def __contains__(self, key: object) -> bool:
        return self._tree.find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        """Return the value for *key*, inserting a default when it is missing."""
        node = self._tree.find(key)
        if node is not None:
            return node.value
        if self.default_factory is None:
            raise KeyError(key)
        node, _ = self._tree.insert(key, self.default_factory())
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        node, inserted = self._tree.insert(key, value)
        if not inserted:
            node.data.second = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return len(self) == len(other) and equal(self, other)

    def __lt__(self, other: OrderedMap) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return lexicographical_compare(self, other)

    def __le__(self, other: OrderedMap) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return not lexicographical_compare(other, self)

    def __gt__(self, other: OrderedMap) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return lexicographical_compare(other, self)

    def __ge__(self, other: OrderedMap) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return not lexicographical_compare(self, other)

    __hash__ = None  # type: ignore[assignment]

    def empty(self) -> bool:
        return len(self._tree) == 0

    def max_size(self) -> int:
        return self._tree.max_size()

    def insert(self, pair: Any) -> tuple[Pair, bool]:
        """Insert a (key, value) pair unless the key exists.

        Return the stored Pair for the key and whether it was inserted.
        """
        key, value = _as_pair(pair)
        node, inserted = self._tree.insert(key, value)
        return node.data, inserted

    def insert_range(self, pairs: Iterable[Any]) -> None:
        """Insert each (key, value) pair; existing keys are left untouched."""
        for item in pairs:
            self.insert(item)

    def erase(self, key: Any) -> int:
        """Remove *key*; return the number of entries removed (0 or 1)."""
        return 1 if self._tree.erase(key) else 0

    def erase_range(self, first: Any, last: Any = None) -> None:
        """Remove entries from ``lower_bound(first)`` up to ``lower_bound(last)``.

        With *last* None the range runs to the end of the map.
        """
        start = self.lower_bound(first)
        stop = None if last is None else self.lower_bound(last)
        doomed = []
        collecting = False
        for pair in self:
            if pair is stop:
                break
            if pair is start:
                collecting = True
            if collecting:
                doomed.append(pair.first)
        for key in doomed:
            self._tree.erase(key)

    def swap(self, other: OrderedMap) -> None:
        """Exchange contents, ordering and default factory with *other*."""
        self._tree.swap(other._tree)
        self.default_factory, other.default_factory = (
            other.default_factory,
            self.default_factory,
        )

    def clear(self) -> None:
        self._tree.clear()

    def key_comp(self) -> Callable[[Any, Any], bool]:
        """The predicate that orders keys."""
        return self._tree.less

    def value_comp(self) -> Callable[[Pair, Pair], bool]:
        """A predicate ordering Pairs by their keys."""
        less = self._tree.less

        def compare(lhs: Pair, rhs: Pair) -> bool:
            return less(lhs.first, rhs.first)

        return compare

    def find(self, key: Any) -> Pair | None:
        """The stored Pair for *key*, or None."""
        node = self._tree.find(key)
        return None if node is None else node.data

    def count(self, key: Any) -> int:
        return 1 if key in self else 0

    def lower_bound(self, key: Any) -> Pair | None:
        """First Pair whose key does not order before *key*, or None."""
        less = self._tree.less
        return next((p for p in self if not less(p.first, key)), None)

    def upper_bound(self, key: Any) -> Pair | None:
        """First Pair whose key orders after *key*, or None."""
        less = self._tree.less
        return next((p for p in self if less(key, p.first)), None)

    def equal_range(self, key: Any) -> tuple[Pair | None, Pair | None]:
        return self.lower_bound(key), self.upper_bound(key)


def swap(first: OrderedMap, second: OrderedMap) -> None:
    """Exchange the contents of two maps."""
    first.swap(second)