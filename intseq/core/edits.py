"""
Structural edits: reverse, concatenate, insert-at and remove-at.

`reverse_in_place` mutates and returns the caller's buffer. The other edits
never touch their inputs and return a new list whose length is fixed by the
operation (`len(a) + len(b)`, `len(seq) + 1`, `len(seq) - 1`).

Out-of-range indices raise `InvalidIndexError`; there is no silent fallback
to the unmodified input and no negative-index wrap-around.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import List

from .errors import InvalidIndexError
from .sequence import require_buffer, require_element, require_index, require_sequence


def reverse_in_place(buffer: MutableSequence[int]) -> MutableSequence[int]:
    """Reverse `buffer` with a two-pointer swap and return the same object."""
    require_buffer(buffer)
    left = 0
    right = len(buffer) - 1
    while left < right:
        buffer[left], buffer[right] = buffer[right], buffer[left]
        left += 1
        right -= 1
    return buffer


def concatenate(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Elements of `a` followed by elements of `b`."""
    left = require_sequence(a, name="a")
    right = require_sequence(b, name="b")
    out = [0] * (len(left) + len(right))
    for i, v in enumerate(left):
        out[i] = v
    offset = len(left)
    for i, v in enumerate(right):
        out[offset + i] = v
    return out


def insert_at(seq: Sequence[int], index: int, element: int) -> List[int]:
    """
    Copy of `seq` with `element` placed at `index`, later elements shifted right.

    Valid indices are ``0..len(seq)`` inclusive; ``index == len(seq)`` appends.
    """
    values = require_sequence(seq)
    i = require_index(index)
    e = require_element(element)
    n = len(values)
    if not (0 <= i <= n):
        raise InvalidIndexError("insert_at", i, 0, n)

    out = [0] * (n + 1)
    for j in range(i):
        out[j] = values[j]
    out[i] = e
    for j in range(i, n):
        out[j + 1] = values[j]
    return out


def remove_at(seq: Sequence[int], index: int) -> List[int]:
    """
    Copy of `seq` without the element at `index`, later elements shifted left.

    Valid indices are ``0..len(seq) - 1``; an empty sequence has none.
    """
    values = require_sequence(seq)
    i = require_index(index)
    n = len(values)
    if not (0 <= i < n):
        raise InvalidIndexError("remove_at", i, 0, n - 1)

    out = [0] * (n - 1)
    for j in range(i):
        out[j] = values[j]
    for j in range(i + 1, n):
        out[j - 1] = values[j]
    return out
