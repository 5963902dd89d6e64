"""
PyUnivariate: descriptive and shape statistics for numeric samples.

Central tendency, dispersion, standardized moments, order statistics and
sampling errors over in-memory 1D samples, on top of numpy.

Submodules:
    univariate: statistic functions and describe()
    core: exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pyunivariate import univariate
from pyunivariate.univariate import (
    describe,
    mean,
    median,
    mode,
    variance,
    population_variance,
    standard_deviation,
    population_standard_deviation,
    standard_scores,
    quantile,
    percentile,
)

__all__ = [
    "__version__",
    "univariate",
    "describe",
    "mean",
    "median",
    "mode",
    "variance",
    "population_variance",
    "standard_deviation",
    "population_standard_deviation",
    "standard_scores",
    "quantile",
    "percentile",
]
