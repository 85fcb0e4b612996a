"""Exception hierarchy for seqdiff.

Every error raised for invalid input derives from :class:`SequenceError`,
itself a :class:`ValueError`, so callers that already guard numeric code with
``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any


class SequenceError(ValueError):
    """Base class for input validation failures."""


class InvalidOrder(SequenceError):
    """Raised when a differencing or integration order is not a positive integer."""

    def __init__(self, order: Any):
        self.order = order
        super().__init__(f"order must be a positive integer, got {order!r}")


class InsufficientLength(SequenceError):
    """Raised when a sequence is too short for the requested operation."""

    def __init__(self, length: int, required: int, *, order: int | None = None):
        self.length = length
        self.required = required
        self.order = order
        detail = f" for order {order}" if order is not None else ""
        super().__init__(
            f"sequence of length {length} is too short{detail}; "
            f"at least {required} samples are required"
        )


class DegenerateSpacing(SequenceError):
    """Raised when two consecutive coordinates coincide."""

    def __init__(self, index: int, value: Any):
        self.index = index
        self.value = value
        super().__init__(
            f"x[{index}] == x[{index + 1}] == {value!r}; spacing must be non-zero"
        )


class InvalidTolerance(SequenceError):
    """Raised when the extrema tolerance is not strictly positive."""

    def __init__(self, epsilon: Any):
        self.epsilon = epsilon
        super().__init__(f"epsilon must be strictly positive, got {epsilon!r}")


class LengthMismatch(SequenceError):
    """Raised when coordinate and value sequences differ in length."""

    def __init__(self, x_length: int, y_length: int):
        self.x_length = x_length
        self.y_length = y_length
        super().__init__(
            f"x and y must have the same length, got {x_length} and {y_length}"
        )


__all__ = [
    "SequenceError",
    "InvalidOrder",
    "InsufficientLength",
    "DegenerateSpacing",
    "InvalidTolerance",
    "LengthMismatch",
]
