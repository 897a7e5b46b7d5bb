"""A red-black tree keyed by a strict-weak-ordering predicate."""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator

from containerkit.pair import Pair


class Color(Enum):
    """Colour of a tree node; NIL marks the sentinel."""

    RED = "red"
    BLACK = "black"
    NIL = "nil"


@dataclass(eq=False)
class Node:
    """A tree node holding a key/value Pair."""

    data: Pair
    color: Color = Color.BLACK
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    parent: Node | None = field(default=None, repr=False)

    @property
    def key(self) -> Any:
        return self.data.first

    @property
    def value(self) -> Any:
        return self.data.second

    @property
    def is_nil(self) -> bool:
        return self.color is Color.NIL


def _is_red(node: Node) -> bool:
    return node.color is Color.RED


class RedBlackTree:
    """Self-balancing binary search tree with unique keys."""

    def __init__(self, less: Callable[[Any, Any], bool] | None = None) -> None:
        self._less = less if less is not None else operator.lt
        self._nil = self._make_nil()
        self._root = self._nil
        self._size = 0

    @staticmethod
    def _make_nil() -> Node:
        nil = Node(Pair(), Color.NIL)
        nil.left = nil.right = nil.parent = nil
        return nil

    @property
    def less(self) -> Callable[[Any, Any], bool]:
        return self._less

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Pair]:
        node = self.first()
        while node is not None:
            yield node.data
            node = self.successor(node)

    def __reversed__(self) -> Iterator[Pair]:
        node = self.last()
        while node is not None:
            yield node.data
            node = self.predecessor(node)

    def max_size(self) -> int:
        return sys.maxsize

    def _minimum(self, node: Node) -> Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _maximum(self, node: Node) -> Node:
        while node.right is not self._nil:
            node = node.right
        return node

    def first(self) -> Node | None:
        """The node with the smallest key, or None when empty."""
        if self._root is self._nil:
            return None
        return self._minimum(self._root)

    def last(self) -> Node | None:
        """The node with the largest key, or None when empty."""
        if self._root is self._nil:
            return None
        return self._maximum(self._root)

    def clear(self) -> None:
        self._root = self._nil
        self._size = 0

    def _find(self, key: Any) -> Node:
        node = self._root
        while node is not self._nil:
            if node.key == key:
                return node
            node = node.left if self._less(key, node.key) else node.right
        return self._nil

    def find(self, key: Any) -> Node | None:
        node = self._find(key)
        return None if node is self._nil else node

    def insert(self, key: Any, value: Any) -> tuple[Node, bool]:
        """Insert key/value unless the key exists; return (node, inserted)."""
        nil = self._nil
        parent = nil
        current = self._root
        while current is not nil:
            if key == current.key:
                return current, False
            parent = current
            current = current.left if self._less(key, current.key) else current.right

        node = Node(Pair(key, value), Color.RED, nil, nil, parent)
        if parent is nil:
            self._root = node
        elif self._less(key, parent.key):
            parent.left = node
        else:
            parent.right = node
        self._insert_fix(node)
        self._size += 1
        return node, True

    def erase(self, key: Any) -> bool:
        """Remove the node with *key*; return whether one was removed."""
        nil = self._nil
        z = self._find(key)
        if z is nil:
            return False

        y = z
        y_color = y.color
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            y_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if y_color is Color.BLACK:
            self._delete_fix(x)
        nil.parent = nil
        z.left = z.right = z.parent = None
        self._size -= 1
        return True

    def swap(self, other: RedBlackTree) -> None:
        self._less, other._less = other._less, self._less
        self._nil, other._nil = other._nil, self._nil
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size

    def copy(self) -> RedBlackTree:
        duplicate = RedBlackTree(self._less)
        for pair in self:
            duplicate.insert(pair.first, pair.second)
        return duplicate

    def successor(self, node: Node | None) -> Node | None:
        """The next node in key order, or None past the end."""
        if node is None:
            return None
        nil = self._nil
        if node.right is not nil:
            return self._minimum(node.right)
        parent = node.parent
        while parent is not nil and node is parent.right:
            node = parent
            parent = parent.parent
        return None if parent is nil else parent

    def predecessor(self, node: Node | None) -> Node | None:
        """The previous node in key order; from None (the end) it is the last node."""
        if node is None:
            return self.last()
        nil = self._nil
        if node.left is not nil:
            return self._maximum(node.left)
        parent = node.parent
        while parent is not nil and node is parent.left:
            node = parent
            parent = parent.parent
        return None if parent is nil else parent

    def render(self) -> str:
        """Draw the tree, one node per line, with its colour."""
        lines: list[str] = []

        def walk(node: Node, indent: str, last: bool) -> None:
            if node is self._nil:
                return
            branch = "R----" if last else "L----"
            colour = "BLACK" if node.color is Color.BLACK else "RED"
            lines.append(f"{indent}{branch}{node.key} ({colour})")
            child_indent = indent + ("     " if last else "|    ")
            walk(node.left, child_indent, False)
            walk(node.right, child_indent, True)

        walk(self._root, "", True)
        return "".join(line + "\n" for line in lines)

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _rotate_left(self, x: Node) -> None:
        nil = self._nil
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        nil = self._nil
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fix(self, x: Node) -> None:
        while _is_red(x.parent):
            grandparent = x.parent.parent
            if x.parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    x.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    x = grandparent
                else:
                    if x is x.parent.right:
                        x = x.parent
                        self._rotate_left(x)
                    x.parent.color = Color.BLACK
                    x.parent.parent.color = Color.RED
                    self._rotate_right(x.parent.parent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    x.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    x = grandparent
                else:
                    if x is x.parent.left:
                        x = x.parent
                        self._rotate_right(x)
                    x.parent.color = Color.BLACK
                    x.parent.parent.color = Color.RED
                    self._rotate_left(x.parent.parent)
        self._root.color = Color.BLACK

    def _delete_fix(self, x: Node) -> None:
        while x is not self._root and not _is_red(x):
            if x is x.parent.left:
                w = x.parent.right
                if _is_red(w):
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if not _is_red(w.left) and not _is_red(w.right):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if not _is_red(w.right):
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if _is_red(w):
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if not _is_red(w.right) and not _is_red(w.left):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if not _is_red(w.left):
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        if x is not self._nil:
            x.color = Color.BLACK