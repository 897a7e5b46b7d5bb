"""A growable sequence that tracks its own capacity."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator

from containerkit.algorithms import equal, itoa, lexicographical_compare


class Vector:
    """A sequence with explicit capacity management and ordered comparison.

    Capacity grows by the same rules as a classic dynamic array: doubling on
    append, and exact or doubled reservations on insertion and resize.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = [] if items is None else list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, count: int, value: Any = None) -> Vector:
        """Build a vector of *count* copies of *value*."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return cls([value] * count)

    def copy(self) -> Vector:
        """Return an independent vector with the same elements."""
        return Vector(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and equal(self, other)

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(self, other)

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(other, self)

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(other, self)

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(self, other)

    __hash__ = None  # type: ignore[assignment]

    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    def max_size(self) -> int:
        """Largest number of elements the vector may hold."""
        return sys.maxsize

    def empty(self) -> bool:
        return not self._items

    def resize(self, count: int, value: Any = None) -> None:
        """Shrink to *count* elements, or grow by appending *value*."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        size = len(self._items)
        if count < size:
            del self._items[count:]
            return
        if self._capacity == 0 or count > 2 * self._capacity:
            self.reserve(count)
        elif count > self._capacity:
            self.reserve(self._capacity * 2)
        self._items.extend([value] * (count - size))

    def reserve(self, count: int) -> None:
        """Raise the capacity to at least *count*; never lowers it."""
        if count < 0 or count > self.max_size():
            raise ValueError("vector::reserve")
        if count > self._capacity:
            self._capacity = count

    def at(self, index: int) -> Any:
        """Checked element access; raises IndexError when out of range."""
        size = len(self._items)
        if not 0 <= index < size:
            shown = itoa(index) if index >= 0 else str(index)
            raise IndexError(
                "vector::_M_range_check: __n (which is "
                + shown
                + ") >= this->size() (which is "
                + itoa(size)
                + ")"
            )
        return self._items[index]

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def assign(self, items: Iterable[Any]) -> None:
        """Replace the contents with *items*, keeping any larger capacity."""
        new_items = list(items)
        self._items = new_items
        if self._capacity < len(new_items):
            self._capacity = len(new_items)

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with *count* copies of *value*."""
        self.clear()
        self.reserve(count)
        for _ in range(count):
            self.push_back(value)

    def push_back(self, value: Any) -> None:
        size = len(self._items)
        if self._capacity == 0:
            self._capacity = 1
        elif size + 1 > self._capacity:
            if self._capacity * 2 >= size + 1:
                self._capacity *= 2
            else:
                self._capacity = size + 1
        self._items.append(value)

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("pop_back on an empty vector")
        self._items.pop()

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(
                f"position {position} outside 0..{len(self._items)}"
            )

    def insert(self, position: int, value: Any) -> int:
        """Insert *value* before *position*; return the new element's index."""
        self._check_position(position)
        size = len(self._items)
        if size + 1 > self._capacity:
            if self._capacity == 0 or size + 1 > 2 * self._capacity:
                self.reserve(size + 1)
            else:
                self.reserve(self._capacity * 2)
        self._items.insert(position, value)
        return position

    def insert_fill(self, position: int, count: int, value: Any) -> None:
        """Insert *count* copies of *value* before *position*."""
        self._check_position(position)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if not count:
            return
        size = len(self._items)
        needed = size + count
        if needed > self._capacity:
            if self._capacity == 0 or needed >= 2 * self._capacity:
                self.reserve(needed)
            elif needed < size * 2:
                self.reserve(size * 2)
            else:
                self.reserve(self._capacity * 2)
        self._items[position:position] = [value] * count

    def insert_range(self, position: int, items: Iterable[Any]) -> None:
        """Insert the elements of *items* before *position*."""
        self._check_position(position)
        new_items = list(items)
        size = len(self._items)
        needed = size + len(new_items)
        if needed > self._capacity:
            if self._capacity == 0 or needed > 2 * self._capacity:
                self.reserve(needed)
            else:
                self.reserve(self._capacity * 2)
        self._items[position:position] = new_items

    def erase(self, position: int) -> int:
        """Remove the element at *position*; return the index that follows it.

        A position that names no element leaves the vector unchanged.
        """
        if 0 <= position < len(self._items):
            del self._items[position]
        return position

    def erase_range(self, first: int, last: int) -> int:
        """Remove elements in [first, last); return *first*."""
        if not 0 <= first <= last <= len(self._items):
            raise IndexError(
                f"range [{first}, {last}) outside 0..{len(self._items)}"
            )
        del self._items[first:last]
        return first

    def swap(self, other: Vector) -> None:
        """Exchange contents and capacity with *other*."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items = []


def swap(first: Vector, second: Vector) -> None:
    """Exchange the contents of two vectors."""
    first.swap(second)