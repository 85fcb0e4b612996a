"""Local extrema of noisy one-dimensional data.

Implements the linear-time algorithm of K. Villaverde and V. Kreinovich,
"A Linear-Time Algorithm That Locates Local Extrema of a Function of One
Variable From Interval Measurement Results", Interval Computations 1993(4).

Each sample is treated as known only up to ``epsilon``.  A single left to
right pass keeps a running maximum ``M``, a running minimum ``m`` and the
current direction (undetermined, rising or falling).  Whenever the data drops
more than ``epsilon`` below ``M`` while rising, a maximum is committed; the
symmetric case commits a minimum.  Each extremum is reported as an interval
of coordinates that is guaranteed to contain it.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Sequence

from ..config import Settings
from ..errors import InvalidTolerance
from ..types import ExtremaResult, Interval
from .sequence import (
    SequenceLike,
    as_array,
    as_coordinates,
    check_same_length,
    enumerate_values,
)

logger = logging.getLogger(__name__)

UNDETERMINED = 0
RISING = 1
FALLING = -1


def _resolve_epsilon(epsilon: float | None, settings: Settings | None) -> float:
    if epsilon is None:
        if settings is None:
            settings = Settings()
        epsilon = settings.extrema.epsilon
    # ``not >`` also rejects NaN
    if not epsilon > 0:
        raise InvalidTolerance(epsilon)
    return float(epsilon)


def _scan(x: Sequence[Any], y: Sequence[float], eps: float) -> ExtremaResult:
    n = len(y)
    result = ExtremaResult()
    if n < 2:
        return result

    s = UNDETERMINED
    M = m = y[0]
    for i in range(1, n):
        yi = y[i]
        if s == UNDETERMINED:
            if not (M - eps <= yi <= m + eps):
                if yi < M - eps:
                    s = FALLING
                # checked second so a rise wins when both bounds are broken
                if yi > m + eps:
                    s = RISING
            M = max(M, yi)
            m = min(m, yi)
        elif s == RISING:
            if yi >= M - eps:
                M = max(M, yi)
            else:
                j = i - 1
                # stop at index 0 even when y[0] is still inside the band
                while j > 0 and y[j] >= M - eps:
                    j -= 1
                result.maxima.append(Interval(x[j], x[i]))
                s = FALLING
                m = yi
        else:
            if yi <= m + eps:
                m = min(m, yi)
            else:
                j = i - 1
                while j > 0 and y[j] <= m + eps:
                    j -= 1
                result.minima.append(Interval(x[j], x[i]))
                s = RISING
                M = yi
    return result


def find_extrema_xy(
    x: SequenceLike,
    y: SequenceLike,
    epsilon: float | None = None,
    *,
    settings: Settings | None = None,
) -> ExtremaResult:
    """Locate intervals containing the local extrema of ``y = f(x)``.

    Parameters
    ----------
    x:
        Sample coordinates.  Entries are reported as given and may be of any
        ordered type.
    y:
        Sample values, same length as ``x``.
    epsilon:
        Half-width of the noise band.  Defaults to
        ``settings.extrema.epsilon`` (0.1).

    Returns
    -------
    ExtremaResult
        :class:`~seqdiff.types.Interval` lists for minima and maxima in
        discovery order.  Sequences shorter than two samples give empty
        lists.

    Raises
    ------
    InvalidTolerance
        If ``epsilon`` is not strictly positive.
    LengthMismatch
        If ``x`` and ``y`` differ in length.
    """

    eps = _resolve_epsilon(epsilon, settings)
    xs = as_coordinates(x)
    ys = as_array(y).tolist()
    check_same_length(xs, ys)

    result = _scan(xs, ys, eps)
    logger.debug(
        "found %d minima and %d maxima in %d samples (epsilon=%g)",
        len(result.minima),
        len(result.maxima),
        len(ys),
        eps,
    )
    return result


def _representative(interval: Interval, keys: List[Any]) -> Any:
    return keys[math.floor((interval.start + interval.end) / 2)]


def find_extrema(
    values: SequenceLike,
    epsilon: float | None = None,
    *,
    settings: Settings | None = None,
) -> ExtremaResult:
    """Locate the local extrema of ``values``.

    The intervals found by :func:`find_extrema_xy` on unit positions are
    collapsed to their midpoint position, which is then mapped back to the
    key of ``values`` at that position.  Plain sequences therefore yield
    integer indices and mappings yield their own keys.
    """

    keys, ys = enumerate_values(values)
    res = find_extrema_xy(range(len(keys)), ys, epsilon, settings=settings)
    return ExtremaResult(
        minima=[_representative(iv, keys) for iv in res.minima],
        maxima=[_representative(iv, keys) for iv in res.maxima],
    )
