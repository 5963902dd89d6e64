"""
Standard errors of the mean, skewness and kurtosis.

Closed-form functions of the sample size; no sample data is needed.
"""

from __future__ import annotations

import numpy as np

from pyunivariate.core.exceptions import ValidationError
from pyunivariate.core.validation import check_positive_size


def standard_error_mean(
    stdev: float,
    sample_size: float,
    population_size: float | None = None,
) -> np.floating:
    """
    Standard error of the mean, stdev / sqrt(n).

    When population_size N is given, the finite population correction
    sqrt((N - n) / (N - 1)) is applied.

    Raises
    ------
    ValidationError
        If sample_size <= 0, or population_size is not > 1 and >= sample_size.
    """
    check_positive_size(sample_size, 'sample_size')
    err = stdev / np.sqrt(sample_size)
    if population_size is not None:
        if not population_size > 1 or population_size < sample_size:
            raise ValidationError(
                f"population_size: must be > 1 and >= sample_size ({sample_size}), "
                f"got {population_size}"
            )
        err = err * np.sqrt((population_size - sample_size) / (population_size - 1))
    return err


def standard_error_skewness(sample_size: int) -> np.floating:
    """Standard error of skewness, sqrt(6 / n)."""
    check_positive_size(sample_size, 'sample_size')
    return np.sqrt(6.0 / sample_size)


def standard_error_kurtosis(sample_size: int) -> np.floating:
    """Standard error of kurtosis, sqrt(24 / n)."""
    check_positive_size(sample_size, 'sample_size')
    return np.sqrt(24.0 / sample_size)
