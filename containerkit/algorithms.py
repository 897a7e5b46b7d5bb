"""Sequence comparison helpers and integer formatting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_EXHAUSTED = object()


def equal(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True if every element of *first* equals its counterpart in *second*.

    *second* may be longer than *first*; the extra elements are ignored.
    If *second* runs out before *first*, the sequences are not equal.
    """
    others = iter(second)
    for item in first:
        other = next(others, _EXHAUSTED)
        if other is _EXHAUSTED or not item == other:
            return False
    return True


def lexicographical_compare(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True if *first* orders strictly before *second*.

    Elements are compared with ``<`` only; a proper prefix orders first.
    """
    others = iter(second)
    for item in first:
        other = next(others, _EXHAUSTED)
        if other is _EXHAUSTED or other < item:
            return False
        if item < other:
            return True
    return next(others, _EXHAUSTED) is not _EXHAUSTED


def itoa(number: int) -> str:
    """Format a non-negative integer in decimal."""
    if number < 0:
        raise ValueError(f"itoa expects a non-negative integer, got {number}")
    digits = []
    while True:
        number, digit = divmod(number, 10)
        digits.append(chr(ord("0") + digit))
        if number == 0:
            break
    return "".join(reversed(digits))