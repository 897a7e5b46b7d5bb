"""A two-element record with ordering on (first, second)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False)
class Pair:
    """Two values, compared lexicographically by ``first`` then ``second``."""

    first: Any = None
    second: Any = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.first == other.first and self.second == other.second

    def __lt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.first < other.first or (
            not other.first < self.first and self.second < other.second
        )

    def __le__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return not other < self

    def __gt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return other < self

    def __ge__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return not self < other

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second


def make_pair(first: Any, second: Any) -> Pair:
    """Build a Pair from two values."""
    return Pair(first, second)