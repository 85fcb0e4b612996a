"""Core algorithms for seqdiff."""

from .derivative import difference, difference_xy
from .extrema import find_extrema, find_extrema_xy
from .integral import integrate, integrate_xy
from .sequence import as_array, as_coordinates, enumerate_values, positions

__all__ = [
    "difference",
    "difference_xy",
    "integrate",
    "integrate_xy",
    "find_extrema",
    "find_extrema_xy",
    "enumerate_values",
    "as_array",
    "as_coordinates",
    "positions",
]
