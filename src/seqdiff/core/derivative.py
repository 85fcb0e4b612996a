"""Finite differences of one-dimensional series.

:func:`difference_xy` approximates the derivative of ``y = f(x)`` sample by
sample::

    dy[k] = (y[k+1] - y[k]) / (x[k+1] - x[k])

so a series of ``m`` samples yields ``m - 1`` differences.  Applying the step
``n`` times gives the ``n``-th differential of length ``m - n``.
:func:`difference` is the unit-spacing special case where ``x = 0, 1, 2, ...``
and each entry is simply ``y[k+1] - y[k]``.
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import Settings
from ..errors import DegenerateSpacing
from .sequence import (
    SequenceLike,
    as_array,
    check_same_length,
    positions,
    require_length,
    resolve_order,
)

logger = logging.getLogger(__name__)


def _difference_step(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    dx = np.diff(x)
    zero = np.flatnonzero(dx == 0)
    if zero.size:
        k = int(zero[0])
        raise DegenerateSpacing(k, float(x[k]))
    return np.diff(y) / dx


def difference_xy(
    x: SequenceLike,
    y: SequenceLike,
    order: int | None = None,
    *,
    settings: Settings | None = None,
) -> np.ndarray:
    """Approximate the ``order``-th derivative of ``y`` sampled at ``x``.

    Parameters
    ----------
    x:
        Sample coordinates.  Consecutive coordinates must differ.
    y:
        Sample values, same length as ``x``.
    order:
        Number of times the difference step is applied.  Defaults to
        ``settings.calculus.order``.

    Returns
    -------
    numpy.ndarray
        New array with ``len(y) - order`` entries.  ``x`` and ``y`` are not
        modified.

    Raises
    ------
    InvalidOrder
        If ``order`` is not a positive integer.
    LengthMismatch
        If ``x`` and ``y`` differ in length.
    InsufficientLength
        If ``y`` has fewer than ``order + 1`` samples.
    DegenerateSpacing
        If two consecutive coordinates are equal.
    """

    n = resolve_order(order, settings)
    xs = as_array(x)
    ys = as_array(y)
    check_same_length(xs, ys)
    m = ys.size
    require_length(m, n + 1, order=n)

    for _ in range(n):
        ys = _difference_step(xs, ys)
        # spacing at the next level pairs with the shortened value series
        xs = xs[:-1]

    logger.debug("order-%d difference of %d samples -> %d", n, m, ys.size)
    return ys


def difference(
    values: SequenceLike,
    order: int | None = None,
    *,
    settings: Settings | None = None,
) -> np.ndarray:
    """Return the ``order``-th differences of ``values`` under unit spacing.

    ``difference(values, n)`` is ``difference_xy(range(m), values, n)``.
    Mapping inputs are differenced in key order.
    """

    ys = as_array(values)
    return difference_xy(positions(ys.size), ys, order, settings=settings)
