"""
Order statistics: median, quantiles and percentiles.

Quantiles sort a private working copy of the sample with the randomized
quicksort from pyunivariate.core.compute.selection. The median only needs
the middle rank, so it runs quickselect on its copy instead. The caller's
sample is never reordered.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyunivariate.core.compute.selection import RandomState, quickselect, sorted_copy
from pyunivariate.core.exceptions import ValidationError
from pyunivariate.core.validation import check_sample
from pyunivariate.univariate._quantile_types import check_quantile_type, sample_quantiles

DEFAULT_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)


def _median_of_sorted(xs: Sequence[Any]) -> Any:
    n = len(xs)
    mid = n // 2
    if n % 2 == 1:
        return xs[mid]
    return (xs[mid - 1] + xs[mid]) / 2


def median(x: ArrayLike, *, rng: RandomState = None) -> np.floating:
    """
    Median of a sample.

    Odd n: the middle order statistic. Even n: the mean of the two
    central order statistics.

    Parameters
    ----------
    x : array-like
        1D numeric sample, n >= 1.
    rng : None, int or numpy.random.Generator
        Pivot randomness for the selection. Does not affect the result.

    Raises
    ------
    ValidationError
        If the sample is empty.
    """
    working = check_sample(x).copy()
    n = working.shape[0]
    mid = n // 2
    upper = quickselect(working, mid, rng=rng)
    if n % 2 == 1:
        return upper
    # quickselect leaves everything before mid <= upper
    return (working[:mid].max() + upper) / 2


def _check_probs(probs: NDArray, name: str, upper: float) -> None:
    if probs.ndim > 1:
        raise ValidationError(f"{name}: expected scalar or 1D, got {probs.ndim}D")
    if not np.all(np.isfinite(probs)) or np.any(probs < 0) or np.any(probs > upper):
        raise ValidationError(f"{name}: all values must be in [0, {upper:g}], got {probs}")


def quantile(
    x: ArrayLike,
    probs: ArrayLike | None = None,
    *,
    type: int = 7,
    rng: RandomState = None,
) -> np.floating | NDArray:
    """
    Sample quantiles (Hyndman & Fan types 1-9).

    Parameters
    ----------
    x : array-like
        1D numeric sample, n >= 1.
    probs : float or array-like, optional
        Probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1).
    type : int
        Quantile definition 1-9. Default 7 (linear interpolation).
    rng : None, int or numpy.random.Generator
        Pivot randomness for the sort.

    Returns
    -------
    float for scalar probs, otherwise an NDArray with one entry per prob.
    """
    check_quantile_type(type)
    arr = check_sample(x)

    q_probs = np.asarray(DEFAULT_PROBS if probs is None else probs, dtype=np.float64)
    _check_probs(q_probs, 'probs', 1.0)

    values = sample_quantiles(sorted_copy(arr, rng=rng), np.atleast_1d(q_probs), type)
    if q_probs.ndim == 0:
        return values[0]
    return values


def percentile(
    x: ArrayLike,
    p: ArrayLike,
    *,
    type: int = 7,
    rng: RandomState = None,
) -> np.floating | NDArray:
    """
    Sample percentiles, p in [0, 100].

    Equivalent to quantile(x, p / 100, type=type).
    """
    pct = np.asarray(p, dtype=np.float64)
    _check_probs(pct, 'p', 100.0)
    return quantile(x, pct / 100.0, type=type, rng=rng)
