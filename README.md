# containerkit

A small collection of containers with well-defined growth and ordering rules:

- `containerkit.vector.Vector`: a growable sequence that tracks its own capacity.
- `containerkit.stack.Stack`: a last-in, first-out adaptor over a `Vector`.
- `containerkit.ordered_map.OrderedMap`: a key/value map kept in key order by a red-black tree.
- `containerkit.pair.Pair`, `make_pair`: an ordered two-field value used by the map.
- `containerkit.rbtree.RedBlackTree`: the balanced tree the map is built on.
- `containerkit.algorithms`: `equal`, `lexicographical_compare` and `itoa`.

The package has no dependencies outside the standard library and no command-line tool.

## Installation

```
pip install containerkit
```

## Vector

```python
from containerkit.vector import Vector, swap

v = Vector([0, 1, 2])            # capacity 3
v.push_back(3)
print(len(v), v.capacity())      # 4 6
v.insert_fill(1, 2, 9)           # [0, 9, 9, 1, 2, 3]
v.erase_range(0, 2)              # [9, 1, 2, 3]
print(list(v), v.front(), v.back())

filled = Vector.filled(5, 42)
swap(v, filled)                  # exchanges contents and capacity
filled.at(100)                   # raises IndexError
```

Capacity grows by doubling on `push_back`, and by exact or doubled
reservations in `insert`, `insert_fill`, `insert_range` and `resize`.
`clear`, `pop_back` and shrinking `resize` keep the capacity; `reserve` never
lowers it. `reserve` with a negative count or one past `max_size()` raises
`ValueError`. `front`, `back` and `pop_back` on an empty vector raise
`IndexError`, as do out-of-range positions given to `insert`, `insert_fill`,
`insert_range` and `erase_range`. Positions are plain integer indices;
`insert` returns the index of the new element.

Vectors compare with `==`, `<`, `<=`, `>` and `>=`, lexicographically.

## Stack

```python
from containerkit.stack import Stack

s = Stack()
s.push(1)
s.push(2)
print(s.top(), len(s))           # 2 2
s.pop()
print(s.empty())                 # False
```

`Stack(container)` starts from a copy of the given container. Stacks compare
by their underlying containers.

## OrderedMap

```python
from containerkit.ordered_map import OrderedMap
from containerkit.pair import make_pair

m = OrderedMap([make_pair(3, "c"), make_pair(1, "a")], default_factory=str)
m[2] = "b"
print([tuple(p) for p in m])     # [(1, 'a'), (2, 'b'), (3, 'c')]
print(m.count(2), 5 in m)        # 1 False
print(m[7])                      # '' (inserted by default_factory)
low = m.lower_bound(2)           # Pair(2, 'b'); None when past the end
m.erase(1)                       # returns 1
```

Items may be given as `Pair` objects or as `(key, value)` tuples. Iterating a
map yields the stored `Pair` objects in key order; `reversed(m)` walks them
backwards. Reading a missing key with `m[key]` inserts `default_factory()`, or
raises `KeyError` when the map has no default factory. `insert` leaves an
existing key untouched and returns `(pair, inserted)`.

A custom ordering is given as a `less(a, b)` callable:

```python
m = OrderedMap(less=lambda a, b: a > b)   # descending keys
```

`find`, `lower_bound`, `upper_bound` and `equal_range` return stored `Pair`
objects or `None`. `erase_range(first, last)` removes entries from
`lower_bound(first)` up to, but not including, `lower_bound(last)`; with `last`
omitted it runs to the end. Maps compare element-wise by their pairs.

## Red-black tree

`RedBlackTree` can be used on its own. `insert(key, value)` returns
`(node, inserted)`; `first`, `last`, `successor` and `predecessor` walk the
nodes; `render()` draws the tree with each node's colour.

## Running the tests

```
pip install -e ".[test]"
pytest
```