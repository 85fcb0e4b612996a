"""Input normalisation shared by the public operations.

Every public function accepts plain sequences, one-dimensional NumPy arrays
or key-indexed mappings.  The helpers here turn such inputs into dense,
freshly allocated arrays so the algorithms never touch caller-owned storage.
"""

from __future__ import annotations

from typing import Any, Hashable, List, Mapping, Sequence, Tuple, Union

import numpy as np

from ..config import Settings
from ..errors import InsufficientLength, InvalidOrder, LengthMismatch

SequenceLike = Union[Sequence[float], Mapping[Hashable, float], np.ndarray]


def _items(values: SequenceLike) -> Tuple[List[Hashable], List[Any]]:
    if isinstance(values, Mapping):
        return list(values.keys()), list(values.values())
    # generators and other one-shot iterables are consumed exactly once
    data = values if isinstance(values, np.ndarray) else list(values)
    arr = np.asarray(data)
    if arr.ndim != 1:
        raise ValueError(f"values must be one-dimensional, got shape {arr.shape}")
    if isinstance(data, np.ndarray):
        data = data.tolist()
    return list(range(len(data))), data


def enumerate_values(values: SequenceLike) -> Tuple[List[Hashable], np.ndarray]:
    """Return the keys of ``values`` and a dense float copy of its entries.

    For plain sequences the keys are the positions ``0..m-1``; for mappings
    they are the mapping keys in iteration order.
    """

    keys, data = _items(values)
    return keys, np.array(data, dtype=float).reshape(-1)


def as_array(values: SequenceLike) -> np.ndarray:
    """Return a dense float copy of ``values``."""

    return enumerate_values(values)[1]


def as_coordinates(x: SequenceLike) -> List[Any]:
    """Return the entries of ``x`` as a list without coercing their type."""

    return _items(x)[1]


def positions(m: int) -> np.ndarray:
    """Return the implicit unit-spaced coordinates ``0, 1, ..., m-1``."""

    return np.arange(m, dtype=float)


def check_same_length(x: Sequence[Any], y: Sequence[Any]) -> None:
    if len(x) != len(y):
        raise LengthMismatch(len(x), len(y))


def resolve_order(order: int | None, settings: Settings | None = None) -> int:
    """Validate ``order`` falling back to ``settings.calculus.order``."""

    if order is None:
        if settings is None:
            settings = Settings()
        order = settings.calculus.order
    # bool is an int subclass but never a meaningful order
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise InvalidOrder(order)
    if order < 1:
        raise InvalidOrder(order)
    return int(order)


def require_length(m: int, required: int, *, order: int | None = None) -> None:
    if m < required:
        raise InsufficientLength(m, required, order=order)
