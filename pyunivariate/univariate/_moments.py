"""
Standardized moment kernel shared by skewness and kurtosis.

The r-th standardized moment of a sample is

    mean( ((x - mean) / pstdev) ** r )

where pstdev is the population standard deviation about the same mean.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyunivariate.core.exceptions import NumericalError, ValidationError
from pyunivariate.core.validation import check_sample
from pyunivariate.univariate.central import _mean, _require_finite
from pyunivariate.univariate.dispersion import _population_variance


class Degree(IntEnum):
    """Order of a standardized moment."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


def _as_degree(degree: int | Degree) -> Degree:
    try:
        return Degree(degree)
    except ValueError:
        raise ValidationError(
            f"degree: must be one of {[d.value for d in Degree]}, got {degree!r}"
        ) from None


def _std_moment(
    x: NDArray,
    degree: Degree,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    center = _mean(x) if mean is None else mean
    scale = np.sqrt(_population_variance(x, center)) if pstdev is None else pstdev
    if scale == 0:
        raise NumericalError(
            "standardized moment undefined: population standard deviation is zero "
            "(constant sample)"
        )
    with np.errstate(over='ignore'):
        z = (x - center) / scale
        total = np.sum(z ** int(degree))
    return _require_finite(total, 'std_moment') / x.shape[0]


def std_moment(
    x: ArrayLike,
    degree: int | Degree,
    mean: float | None = None,
    pstdev: float | None = None,
) -> np.floating:
    """
    r-th standardized moment of a sample.

    Parameters
    ----------
    x : array-like
        1D numeric sample, n >= 1.
    degree : int or Degree
        Moment order, one of 1, 2, 3, 4. Raised as an integer power.
    mean : float, optional
        Precomputed center. Defaults to the arithmetic mean.
    pstdev : float, optional
        Precomputed scale. Defaults to the population standard deviation
        about ``mean``.

    Raises
    ------
    ValidationError
        If the sample is empty or degree is not in 1..4.
    NumericalError
        If the scale is zero or the moment overflows.
    """
    degree = _as_degree(degree)
    return _std_moment(check_sample(x), degree, mean, pstdev)
