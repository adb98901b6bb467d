"""
Aggregate queries: max, min, sum and average over an integer sequence.

Rounding: `average` truncates toward zero (the mean of [-3, -4] is -3). This is the only
place an average is computed, so the convention is uniform.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import EmptyInputError
from .sequence import require_sequence


def max_value(seq: Sequence[int]) -> int:
    """Greatest element. Starts from the first element, so no sentinel is involved."""
    values = require_sequence(seq)
    if not values:
        raise EmptyInputError("max_value")
    best = values[0]
    for v in values[1:]:
        if v > best:
            best = v
    return best


def min_value(seq: Sequence[int]) -> int:
    values = require_sequence(seq)
    if not values:
        raise EmptyInputError("min_value")
    best = values[0]
    for v in values[1:]:
        if v < best:
            best = v
    return best


def sum_values(seq: Sequence[int]) -> int:
    """Sum of all elements; 0 for an empty sequence."""
    total = 0
    for v in require_sequence(seq):
        total += v
    return total


def average(seq: Sequence[int]) -> int:
    """Arithmetic mean truncated toward zero; exact integer arithmetic, no floats."""
    values = require_sequence(seq)
    if not values:
        raise EmptyInputError("average")
    total = sum_values(values)
    # `//` floors, so divide the magnitude and restore the sign.
    q = abs(total) // len(values)
    return q if total >= 0 else -q
