"""
Shared sequence utilities.

Validation guards used by every kernel operation, plus the small copy, fill,
compare and sort helpers that the edit and search modules build on.

Conventions:
- A *view* is any `collections.abc.Sequence` of ints; it is never mutated.
- A *buffer* is any `collections.abc.MutableSequence` of ints; in-place
  helpers mutate it and return the same object.
- Helpers that build a new sequence always return a fresh `list[int]`.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import List, Optional, Tuple

from ..config import get_config
from .errors import ElementRangeError, InvalidIndexError, UnsortedInputError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _require_int(value: object, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    return int(value)


def require_element(value: object, *, name: str = "element") -> int:
    """Validate a single element (or search target) against the configured domain."""
    v = _require_int(value, name=name)
    if get_config().check_int32 and not (INT32_MIN <= v <= INT32_MAX):
        raise ElementRangeError(name, v, INT32_MIN, INT32_MAX)
    return v


def require_index(value: object, *, name: str = "index") -> int:
    return _require_int(value, name=name)


def _check_elements(seq: Sequence[int], *, name: str) -> None:
    check_range = get_config().check_int32
    for i, v in enumerate(seq):
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"{name}[{i}] must be an int")
        if check_range and not (INT32_MIN <= v <= INT32_MAX):
            raise ElementRangeError(f"{name}[{i}]", v, INT32_MIN, INT32_MAX)


def require_sequence(seq: object, *, name: str = "seq") -> Tuple[int, ...]:
    """
    Validate an immutable view and return a tuple snapshot of it.

    Strings and bytes are rejected even though they are sequences.
    """
    if not isinstance(seq, Sequence) or isinstance(seq, (str, bytes, bytearray)):
        raise TypeError(f"{name} must be a sequence of ints")
    snapshot = tuple(seq)
    _check_elements(snapshot, name=name)
    return snapshot


def require_buffer(buffer: object, *, name: str = "buffer") -> MutableSequence[int]:
    """Validate a mutable buffer; the buffer itself is returned (not copied)."""
    if not isinstance(buffer, MutableSequence) or isinstance(buffer, bytearray):
        raise TypeError(f"{name} must be a mutable sequence of ints (e.g. list or array.array)")
    _check_elements(buffer, name=name)
    return buffer


def first_unsorted_position(seq: Sequence[int]) -> int:
    """Index of the first element smaller than its predecessor, or -1 when sorted."""
    for i in range(1, len(seq)):
        if seq[i] < seq[i - 1]:
            return i
    return -1


def is_sorted(seq: Sequence[int]) -> bool:
    """True when `seq` is in ascending (non-strict) order."""
    return first_unsorted_position(require_sequence(seq)) == -1


def require_sorted(seq: Sequence[int], *, name: str = "seq") -> Tuple[int, ...]:
    snapshot = require_sequence(seq, name=name)
    pos = first_unsorted_position(snapshot)
    if pos != -1:
        raise UnsortedInputError(pos)
    return snapshot


def sort_in_place(buffer: MutableSequence[int]) -> MutableSequence[int]:
    """Sort `buffer` ascending in place and return it."""
    require_buffer(buffer)
    if isinstance(buffer, list):
        buffer.sort()
    else:
        # array.array and other buffers: write back element-wise, length is fixed.
        for i, v in enumerate(sorted(buffer)):
            buffer[i] = v
    return buffer


def sorted_copy(seq: Sequence[int]) -> List[int]:
    return sorted(require_sequence(seq))


def fill(buffer: MutableSequence[int], value: int, start: int = 0, end: Optional[int] = None) -> MutableSequence[int]:
    """
    Overwrite ``buffer[start:end]`` with `value` and return the buffer.

    Requires ``0 <= start <= end <= len(buffer)``; `end` defaults to the length.
    """
    require_buffer(buffer)
    v = require_element(value, name="value")
    n = len(buffer)
    start = require_index(start, name="start")
    end = n if end is None else require_index(end, name="end")
    if not (0 <= end <= n):
        raise InvalidIndexError("fill", end, 0, n)
    if not (0 <= start <= end):
        raise InvalidIndexError("fill", start, 0, end)
    for i in range(start, end):
        buffer[i] = v
    return buffer


def copy_of(seq: Sequence[int], length: int) -> List[int]:
    """First `length` elements of `seq`, zero-padded; `length` is capped at INT32_MAX."""
    snapshot = require_sequence(seq)
    length = require_index(length, name="length")
    if not (0 <= length <= INT32_MAX):
        raise InvalidIndexError("copy_of", length, 0, INT32_MAX)
    out = list(snapshot[:length])
    out.extend([0] * (length - len(out)))
    return out


def copy_of_range(seq: Sequence[int], start: int, end: int) -> List[int]:
    """
    Elements ``[start, end)`` of `seq`, zero-padded past its end.

    Requires ``0 <= start <= len(seq)`` and ``start <= end <= INT32_MAX``.
    """
    snapshot = require_sequence(seq)
    start = require_index(start, name="start")
    end = require_index(end, name="end")
    n = len(snapshot)
    if not (0 <= start <= n):
        raise InvalidIndexError("copy_of_range", start, 0, n)
    if not (start <= end <= INT32_MAX):
        raise InvalidIndexError("copy_of_range", end, start, INT32_MAX)
    out = list(snapshot[start:end])
    out.extend([0] * ((end - start) - len(out)))
    return out


def sequences_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Element-wise equality, independent of the container types."""
    left = require_sequence(a, name="a")
    right = require_sequence(b, name="b")
    return left == right
