"""
Dispersion: squared deviations, variance, standard deviation, mean
absolute deviation and standard scores.

Optional center arguments (center, xbar, mu) follow one rule: None means
"compute the arithmetic mean of the sample", any other value is used
verbatim. A supplied center is not checked against the sample.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyunivariate.core.exceptions import ConsistencyError, NumericalError
from pyunivariate.core.validation import check_sample
from pyunivariate.univariate.central import _mean, _require_finite


def _ssd(x: NDArray, center: float | None = None) -> np.floating:
    """Sum of squared deviations of a validated sample about center."""
    c = _mean(x) if center is None else center
    with np.errstate(over='ignore', invalid='ignore'):
        d = x - c
        total = np.sum(d * d)
    # A sum of squares cannot be negative or NaN
    if not total >= 0:
        raise ConsistencyError(
            f"sum of squared deviations is {total}, expected a non-negative value",
            quantity='sum_square_deviations',
            value=float(total),
        )
    return _require_finite(total, 'sum_square_deviations')


def _population_variance(x: NDArray, mu: float | None = None) -> np.floating:
    return _ssd(x, mu) / x.shape[0]


def _variance(x: NDArray, xbar: float | None = None) -> np.floating:
    return _ssd(x, xbar) / (x.shape[0] - 1)


def sum_square_deviations(x: ArrayLike, center: float | None = None) -> np.floating:
    """
    Sum of squared deviations, sum((x - center)**2).

    Parameters
    ----------
    x : array-like
        1D numeric sample, n >= 1.
    center : float, optional
        Deviation basis. Defaults to the arithmetic mean.

    Raises
    ------
    NumericalError
        If the sum overflows to inf.
    ConsistencyError
        If the sum is negative or NaN. This is an internal fault (a NaN
        center or a broken numeric type), not a recoverable input problem.
    """
    return _ssd(check_sample(x), center)


def variance(x: ArrayLike, xbar: float | None = None) -> np.floating:
    """
    Sample variance with Bessel correction, SSD / (n - 1).

    Requires n >= 2.
    """
    return _variance(check_sample(x, min_samples=2), xbar)


def population_variance(x: ArrayLike, mu: float | None = None) -> np.floating:
    """
    Population variance, SSD / n.

    Requires n >= 1.
    """
    return _population_variance(check_sample(x), mu)


def standard_deviation(x: ArrayLike, xbar: float | None = None) -> np.floating:
    """Sample standard deviation, sqrt(variance). Requires n >= 2."""
    return np.sqrt(variance(x, xbar))


def population_standard_deviation(x: ArrayLike, mu: float | None = None) -> np.floating:
    """Population standard deviation, sqrt(population_variance). Requires n >= 1."""
    return np.sqrt(population_variance(x, mu))


def average_deviation(x: ArrayLike, center: float | None = None) -> np.floating:
    """
    Mean absolute deviation, mean(|x - center|).

    center defaults to the arithmetic mean.
    """
    arr = check_sample(x)
    c = _mean(arr) if center is None else center
    with np.errstate(over='ignore'):
        total = np.sum(np.abs(arr - c))
    return _require_finite(total, 'average_deviation') / arr.shape[0]


def standard_scores(x: ArrayLike) -> NDArray:
    """
    Standard (z) scores, (x - mean) / sd, using the sample standard deviation.

    Returns
    -------
    NDArray
        Same length as x; entry i is the score of x[i].

    Raises
    ------
    ValidationError
        If n < 2.
    NumericalError
        If the sample is constant (sd == 0).
    """
    arr = check_sample(x, min_samples=2)
    m = _mean(arr)
    sd = np.sqrt(_variance(arr, m))
    if sd == 0:
        raise NumericalError("standard_scores: sample standard deviation is zero")
    return (arr - m) / sd
