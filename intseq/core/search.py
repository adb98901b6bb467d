"""
Search: linear containment and binary-search lookups.

Two lookups are provided:
- `binary_search` is a pure query over a view the caller has already sorted.
- `sorted_index_of` keeps the sort-then-search behaviour: it SORTS THE
  CALLER'S BUFFER IN PLACE before searching. Copy the buffer first if the
  original order matters.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence

from .sequence import (
    first_unsorted_position,
    require_buffer,
    require_element,
    require_sequence,
    require_sorted,
    sort_in_place,
)

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def contains(seq: Sequence[int], target: int) -> bool:
    """True iff some element equals `target` (single linear scan, no mutation)."""
    t = require_element(target, name="target")
    for v in require_sequence(seq):
        if v == t:
            return True
    return False


def _bisect(values: Sequence[int], target: int) -> int:
    low = 0
    high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        v = values[mid]
        if v == target:
            return mid
        if v < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def binary_search(seq: Sequence[int], target: int, *, check_sorted: bool = True) -> int:
    """
    Index of an element equal to `target` in an ascending `seq`, or -1.

    With duplicates the index is whichever match the search lands on first,
    not necessarily the leftmost.

    Raises:
        UnsortedInputError: if `check_sorted` and `seq` is not ascending.
    """
    t = require_element(target, name="target")
    values = require_sorted(seq) if check_sorted else require_sequence(seq)
    return _bisect(values, t)


def sorted_index_of(buffer: MutableSequence[int], target: int) -> int:
    """
    Sort `buffer` ascending IN PLACE, then binary-search it for `target`.

    Returns the index in the now-sorted buffer, or -1 when absent.
    """
    t = require_element(target, name="target")
    require_buffer(buffer)
    if first_unsorted_position(buffer) != -1:
        logger.debug("sorted_index_of: reordering caller buffer of length %d", len(buffer))
    sort_in_place(buffer)
    return _bisect(buffer, t)
