"""
Shape statistics: skewness and excess kurtosis, population and
sample-adjusted, plus Pearson's mode skewness.

Sample-adjusted forms are the usual bias-corrected estimators (G1, G2),
matching scipy.stats.skew(bias=False) and
scipy.stats.kurtosis(bias=False).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pyunivariate.core.exceptions import NumericalError
from pyunivariate.core.validation import check_sample
from pyunivariate.univariate._moments import Degree, _std_moment


def pearson_skewness(mean: float, mode: float, stdev: float) -> float:
    """
    Pearson's mode skewness, (mean - mode) / stdev.

    Raises
    ------
    NumericalError
        If stdev is zero.
    """
    if stdev == 0:
        raise NumericalError("pearson_skewness: stdev is zero")
    return (mean - mode) / stdev


def skewness(
    x: ArrayLike,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    """
    Sample-adjusted skewness.

    Formula:
        g1 = third standardized moment
        G1 = g1 * sqrt(n*(n-1)) / (n-2)

    Requires n >= 3.
    """
    arr = check_sample(x, min_samples=3)
    n = arr.shape[0]
    g1 = _std_moment(arr, Degree.THREE, mean, pstdev)
    return g1 * np.sqrt(n * (n - 1.0)) / (n - 2.0)


def pskewness(
    x: ArrayLike,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    """Population skewness, the third standardized moment. Requires n >= 1."""
    return _std_moment(check_sample(x), Degree.THREE, mean, pstdev)


def kurtosis(
    x: ArrayLike,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    """
    Sample-adjusted excess kurtosis.

    Formula:
        g2 = fourth standardized moment
        q = (n-1) / ((n-2)*(n-3))
        G2 = q * ((n+1)*g2 - 3*(n-1))

    Requires n >= 4.
    """
    arr = check_sample(x, min_samples=4)
    n = float(arr.shape[0])
    g2 = _std_moment(arr, Degree.FOUR, mean, pstdev)
    q = (n - 1.0) / ((n - 2.0) * (n - 3.0))
    return q * ((n + 1.0) * g2 - 3.0 * (n - 1.0))


def pkurtosis(
    x: ArrayLike,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    """Population excess kurtosis, g2 - 3. Requires n >= 1."""
    return _std_moment(check_sample(x), Degree.FOUR, mean, pstdev) - 3.0
