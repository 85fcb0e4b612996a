"""Reverse accumulation of one-dimensional series.

:func:`integrate_xy` accumulates spacing-weighted samples from right to left::

    I[m-1] = -y[m-1] * (x[m-1] - x[m-2])
    I[k]   = -y[k]   * (x[k+1] - x[k]) + I[k+1]

The spacing after the last sample is unknown, so the last known spacing is
reused and ``y[m]`` is taken to be zero.  The result has as many entries as
the input.

Integration cannot recover what differencing discarded:
``integrate(difference(values))`` has the same shape as ``values[:-1]`` but is
shifted by a constant ("translation").
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import Settings
from .sequence import (
    SequenceLike,
    as_array,
    check_same_length,
    positions,
    require_length,
    resolve_order,
)

logger = logging.getLogger(__name__)


def _integral_step(dx: np.ndarray, y: np.ndarray) -> np.ndarray:
    weighted = -y * dx
    return np.cumsum(weighted[::-1])[::-1]


def integrate_xy(
    x: SequenceLike,
    y: SequenceLike,
    order: int | None = None,
    *,
    settings: Settings | None = None,
) -> np.ndarray:
    """Approximate the ``order``-th antiderivative of ``y`` sampled at ``x``.

    Parameters
    ----------
    x:
        Sample coordinates.
    y:
        Sample values, same length as ``x``.
    order:
        Number of times the accumulation step is applied.  Defaults to
        ``settings.calculus.order``.

    Returns
    -------
    numpy.ndarray
        New array of the same length as ``y``.

    Raises
    ------
    InvalidOrder
        If ``order`` is not a positive integer.
    LengthMismatch
        If ``x`` and ``y`` differ in length.
    InsufficientLength
        If ``y`` has fewer than two samples.
    """

    n = resolve_order(order, settings)
    xs = as_array(x)
    ys = as_array(y)
    check_same_length(xs, ys)
    require_length(ys.size, 2, order=n)

    spacing = np.diff(xs)
    dx = np.append(spacing, spacing[-1])
    for _ in range(n):
        ys = _integral_step(dx, ys)

    logger.debug("order-%d integral of %d samples", n, ys.size)
    return ys


def integrate(
    values: SequenceLike,
    order: int | None = None,
    *,
    settings: Settings | None = None,
) -> np.ndarray:
    """Return the ``order``-th reverse accumulation of ``values``.

    Unit spacing is assumed, so each step reduces to a negated reverse
    cumulative sum.
    """

    ys = as_array(values)
    return integrate_xy(positions(ys.size), ys, order, settings=settings)
