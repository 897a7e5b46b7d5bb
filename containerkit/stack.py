"""A last-in, first-out adaptor over a Vector-like container."""

from __future__ import annotations

from typing import Any

from containerkit.vector import Vector


class Stack:
    """LIFO adaptor; the underlying container needs back, push_back and pop_back."""

    def __init__(self, container: Any = None) -> None:
        self._container = Vector() if container is None else container.copy()

    def __repr__(self) -> str:
        return f"Stack({self._container!r})"

    def top(self) -> Any:
        """The most recently pushed element."""
        return self._container.back()

    def empty(self) -> bool:
        return self._container.empty()

    def __len__(self) -> int:
        return len(self._container)

    def push(self, value: Any) -> None:
        self._container.push_back(value)

    def pop(self) -> None:
        self._container.pop_back()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._container == other._container

    def __lt__(self, other: Stack) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._container < other._container

    def __le__(self, other: Stack) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._container <= other._container

    def __gt__(self, other: Stack) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._container > other._container

    def __ge__(self, other: Stack) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._container >= other._container

    __hash__ = None  # type: ignore[assignment]