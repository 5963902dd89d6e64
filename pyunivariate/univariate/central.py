"""
Central tendency: arithmetic, harmonic, geometric and quadratic means, mode.

Every numeric function validates its sample with check_sample() and then
delegates to a private kernel that works on the validated array. The
kernels are shared with the dispersion and shape modules so a sample is
validated once per public call.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyunivariate.core.exceptions import NumericalError, ValidationError
from pyunivariate.core.validation import check_sample


def _require_finite(value: np.floating, quantity: str) -> np.floating:
    if not np.isfinite(value):
        raise NumericalError(f"{quantity}: result is {value} for finite input (overflow)")
    return value


def _mean(x: NDArray) -> np.floating:
    n = x.shape[0]
    with np.errstate(over='ignore'):
        total = np.sum(x)
    if np.isfinite(total):
        return total / n
    # The sum overflowed; scaling each term first keeps it in range
    return _require_finite(np.sum(x / n), 'mean')


def mean(x: ArrayLike) -> np.floating:
    """
    Arithmetic mean, sum(x) / n.

    Parameters
    ----------
    x : array-like
        1D numeric sample, n >= 1.

    Raises
    ------
    ValidationError
        If the sample is empty, non-finite or not 1D.
    """
    return _mean(check_sample(x))


def harmonic_mean(x: ArrayLike) -> np.floating:
    """
    Harmonic mean, n / sum(1/x).

    Raises
    ------
    NumericalError
        If any element is zero, the reciprocals sum to zero, or a
        reciprocal overflows (subnormal elements).
    """
    arr = check_sample(x)
    n_zero = int(np.count_nonzero(arr == 0))
    if n_zero:
        raise NumericalError(
            f"harmonic_mean: undefined for samples containing zero ({n_zero} zero elements)"
        )
    with np.errstate(over='ignore'):
        total = np.sum(1 / arr)
    _require_finite(total, 'harmonic_mean: sum of reciprocals')
    if total == 0:
        raise NumericalError("harmonic_mean: reciprocals sum to zero")
    return arr.shape[0] / total


def geometric_mean(x: ArrayLike) -> np.floating:
    """
    Geometric mean, (prod x) ** (1/n).

    Computed as exp(mean(log x)) so the product cannot overflow. A sample
    containing zero has geometric mean 0.

    Raises
    ------
    ValidationError
        If any element is negative. The real n-th root of a negative
        product is undefined for even n, so negative input is rejected
        regardless of n.
    """
    arr = check_sample(x)
    n_negative = int(np.count_nonzero(arr < 0))
    if n_negative:
        raise ValidationError(
            f"geometric_mean: requires non-negative values, got {n_negative} negative elements"
        )
    if np.any(arr == 0):
        return arr.dtype.type(0)
    return np.exp(np.mean(np.log(arr)))


def quadratic_mean(x: ArrayLike) -> np.floating:
    """Root mean square, sqrt(sum(x**2) / n). Raises NumericalError on overflow."""
    arr = check_sample(x)
    with np.errstate(over='ignore'):
        total = np.sum(arr * arr)
    return np.sqrt(_require_finite(total, 'quadratic_mean: sum of squares') / arr.shape[0])


def mode(values: Iterable[Hashable]) -> Any | None:
    """
    Most frequent element of a collection.

    Works on any iterable of hashable values (numbers, strings, enum
    members); the input is not converted to a numeric array.

    When several elements share the highest count, one of them is
    returned. Which one is not part of the contract.

    Returns
    -------
    The most frequent element, or None for an empty input.
    """
    if isinstance(values, np.ndarray):
        values = values.tolist()
    counts = Counter(values)
    if not counts:
        return None
    element, _ = max(counts.items(), key=lambda item: item[1])
    return element
