"""`intseq`: a small kernel of operations over fixed-length integer sequences.

Inputs are plain sequences of ints (list, tuple, `array.array`, ...). Results
are plain ints, bools or fresh lists. Elements are nominally signed 32-bit;
see `intseq.config` to relax the range check.

Public API:
- aggregates: `max_value`, `min_value`, `sum_values`, `average` (floor)
- search: `contains`, `binary_search` (pure, pre-sorted input),
  `sorted_index_of` (sorts the caller's buffer in place, then searches)
- edits: `reverse_in_place`, `concatenate`, `insert_at`, `remove_at`
- helpers: `sort_in_place`, `sorted_copy`, `is_sorted`, `fill`, `copy_of`,
  `copy_of_range`, `sequences_equal`
"""

from .config import KernelConfig, configure_logging, get_config, reset_config, set_config
from .core.aggregates import average, max_value, min_value, sum_values
from .core.edits import concatenate, insert_at, remove_at, reverse_in_place
from .core.errors import (
    ElementRangeError,
    EmptyInputError,
    InvalidIndexError,
    SequenceKernelError,
    UnsortedInputError,
)
from .core.search import NOT_FOUND, binary_search, contains, sorted_index_of
from .core.sequence import (
    INT32_MAX,
    INT32_MIN,
    copy_of,
    copy_of_range,
    fill,
    is_sorted,
    sequences_equal,
    sort_in_place,
    sorted_copy,
)

__all__ = [
    "max_value",
    "min_value",
    "sum_values",
    "average",
    "contains",
    "binary_search",
    "sorted_index_of",
    "NOT_FOUND",
    "reverse_in_place",
    "concatenate",
    "insert_at",
    "remove_at",
    "sort_in_place",
    "sorted_copy",
    "is_sorted",
    "fill",
    "copy_of",
    "copy_of_range",
    "sequences_equal",
    "INT32_MIN",
    "INT32_MAX",
    "KernelConfig",
    "configure_logging",
    "get_config",
    "set_config",
    "reset_config",
    "SequenceKernelError",
    "EmptyInputError",
    "InvalidIndexError",
    "UnsortedInputError",
    "ElementRangeError",
]
