"""Vector, stack and ordered-map containers built on a red-black tree."""

__version__ = "0.1.0"
__all__ = ["algorithms", "pair", "rbtree", "vector", "stack", "ordered_map"]