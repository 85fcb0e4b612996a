"""Finite differences, reverse integration and local extrema of 1-D series."""

from .core import (
    difference,
    difference_xy,
    find_extrema,
    find_extrema_xy,
    integrate,
    integrate_xy,
)
from .errors import (
    DegenerateSpacing,
    InsufficientLength,
    InvalidOrder,
    InvalidTolerance,
    LengthMismatch,
    SequenceError,
)
from .types import ExtremaResult, Interval

__version__ = "0.1.0"

__all__ = [
    "difference",
    "difference_xy",
    "integrate",
    "integrate_xy",
    "find_extrema",
    "find_extrema_xy",
    "ExtremaResult",
    "Interval",
    "SequenceError",
    "InvalidOrder",
    "InsufficientLength",
    "DegenerateSpacing",
    "InvalidTolerance",
    "LengthMismatch",
]
