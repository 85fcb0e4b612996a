"""Common type helpers for seqdiff.

This module defines the small containers returned by the extrema finder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, List, Union


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[start, end]`` in coordinate units."""

    start: Any
    end: Any

    @property
    def width(self) -> Any:
        """Return the interval length."""

        return self.end - self.start

    def contains(self, value: Any) -> bool:
        return self.start <= value <= self.end

    def __iter__(self) -> Iterator[Any]:
        yield self.start
        yield self.end


@dataclass
class ExtremaResult:
    """Local minima and maxima in left-to-right discovery order.

    Attributes
    ----------
    minima:
        Entries bracketing or identifying each local minimum.  These are
        :class:`Interval` objects for :func:`~seqdiff.core.find_extrema_xy`
        and keys of the original input for :func:`~seqdiff.core.find_extrema`.
    maxima:
        Same as ``minima`` for local maxima.
    """

    minima: List[Union[Interval, Hashable]] = field(default_factory=list)
    maxima: List[Union[Interval, Hashable]] = field(default_factory=list)
