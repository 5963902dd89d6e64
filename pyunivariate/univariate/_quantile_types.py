"""
The nine Hyndman & Fan sample quantile definitions.

Types 1-3 are discontinuous (step functions of p). Types 4-9 interpolate
linearly between order statistics, differing only in the plotting
position m(p) = a + p * (n + 1 - a - b).

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.exceptions import ValidationError

QUANTILE_TYPES = range(1, 10)

# (a, b) plotting position parameters for the continuous types
_CONTINUOUS_AB = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# Guards floor() against representation error in n * p
_FUZZ = 4.0 * np.finfo(np.float64).eps


def check_quantile_type(qtype: int) -> None:
    if qtype not in QUANTILE_TYPES:
        raise ValidationError(f"Quantile type must be 1-9, got {qtype}")


def _discontinuous(xs: Sequence[float], p: float, qtype: int) -> float:
    n = len(xs)
    nppm = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(nppm + _FUZZ))
    on_boundary = abs(nppm - j) < _FUZZ

    if qtype == 1:
        h = 1.0 if nppm > j + _FUZZ else 0.0
    elif qtype == 2:
        h = 0.5 if on_boundary else (1.0 if nppm > j else 0.0)
    else:
        # Type 3 rounds to the nearest even order statistic at ties
        h = 0.0 if on_boundary and j % 2 == 0 else 1.0

    # Order statistics are 1-based; clamp to the sample's range
    lo = xs[min(max(j, 1), n) - 1]
    hi = xs[min(max(j + 1, 1), n) - 1]
    return (1.0 - h) * lo + h * hi


def _continuous(xs: Sequence[float], p: float, qtype: int) -> float:
    n = len(xs)
    a, b = _CONTINUOUS_AB[qtype]
    m = a + p * (n + 1.0 - a - b)
    j = int(math.floor(m + _FUZZ))
    h = m - j
    if abs(h) < _FUZZ:
        h = 0.0
    elif abs(h - 1.0) < _FUZZ:
        h = 1.0

    if j < 1:
        return float(xs[0])
    if j >= n:
        return float(xs[n - 1])
    return (1.0 - h) * xs[j - 1] + h * xs[j]


def sample_quantiles(xs: Sequence[float], probs: NDArray, qtype: int) -> NDArray:
    """
    Quantiles of an already sorted, non-empty sample.

    Parameters
    ----------
    xs : sequence
        Sample sorted in non-decreasing order.
    probs : NDArray
        1D array of probabilities in [0, 1].
    qtype : int
        Hyndman & Fan type 1-9 (type 7 is the linear interpolation
        used by numpy and R by default).

    Returns
    -------
    NDArray
        float64 quantile values, one per probability.
    """
    check_quantile_type(qtype)
    if len(xs) == 0:
        raise ValidationError("quantiles of an empty sample are undefined")

    kernel = _discontinuous if qtype <= 3 else _continuous
    return np.array([kernel(xs, float(p), qtype) for p in probs], dtype=np.float64)
