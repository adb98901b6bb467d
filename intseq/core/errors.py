"""Exception types for the integer sequence kernel.

Every error derives from `SequenceKernelError` and from the builtin exception a
caller would naturally catch for the same condition (`ValueError`,
`IndexError`, `OverflowError`).
"""

from __future__ import annotations


class SequenceKernelError(Exception):
    """Base class for all kernel errors."""


class EmptyInputError(SequenceKernelError, ValueError):
    """Raised when an aggregate needs at least one element."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty sequence")


class InvalidIndexError(SequenceKernelError, IndexError):
    """Raised when an index falls outside the inclusive range ``[lo, hi]``."""

    def __init__(self, operation: str, index: int, lo: int, hi: int) -> None:
        self.operation = operation
        self.index = index
        self.lo = lo
        self.hi = hi
        if hi < lo:
            msg = f"{operation}: index {index} invalid (no valid index for this sequence)"
        else:
            msg = f"{operation}: index {index} out of range [{lo}, {hi}]"
        super().__init__(msg)


class UnsortedInputError(SequenceKernelError, ValueError):
    """Raised when a lookup that requires ascending order gets an unsorted sequence."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"sequence is not sorted ascending at position {position}")


class ElementRangeError(SequenceKernelError, OverflowError):
    """Raised when a value is outside the signed 32-bit element domain."""

    def __init__(self, name: str, value: int, lo: int, hi: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name}={value} outside [{lo}, {hi}]")
