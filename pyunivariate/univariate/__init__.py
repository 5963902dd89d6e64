"""
Univariate descriptive statistics module.

Public API:
    Central tendency:  mean, median, mode, harmonic_mean, geometric_mean,
                       quadratic_mean
    Dispersion:        sum_square_deviations, variance, population_variance,
                       standard_deviation, population_standard_deviation,
                       average_deviation, standard_scores
    Shape:             std_moment, skewness, pskewness, kurtosis, pkurtosis,
                       pearson_skewness
    Sampling error:    standard_error_mean, standard_error_skewness,
                       standard_error_kurtosis
    Order statistics:  median, quantile, percentile
    Batch:             describe(data)
"""

from pyunivariate.univariate.central import (
    mean,
    harmonic_mean,
    geometric_mean,
    quadratic_mean,
    mode,
)
from pyunivariate.univariate.dispersion import (
    sum_square_deviations,
    variance,
    population_variance,
    standard_deviation,
    population_standard_deviation,
    average_deviation,
    standard_scores,
)
from pyunivariate.univariate._moments import Degree, std_moment
from pyunivariate.univariate.shape import (
    pearson_skewness,
    skewness,
    pskewness,
    kurtosis,
    pkurtosis,
)
from pyunivariate.univariate.sampling_error import (
    standard_error_mean,
    standard_error_skewness,
    standard_error_kurtosis,
)
from pyunivariate.univariate.order import median, quantile, percentile
from pyunivariate.univariate.design import UnivariateDesign
from pyunivariate.univariate.solution import STATISTICS, UnivariateParams, UnivariateSolution
from pyunivariate.univariate.solvers import describe

__all__ = [
    # Central tendency
    "mean",
    "median",
    "mode",
    "harmonic_mean",
    "geometric_mean",
    "quadratic_mean",
    # Dispersion
    "sum_square_deviations",
    "variance",
    "population_variance",
    "standard_deviation",
    "population_standard_deviation",
    "average_deviation",
    "standard_scores",
    # Shape
    "Degree",
    "std_moment",
    "pearson_skewness",
    "skewness",
    "pskewness",
    "kurtosis",
    "pkurtosis",
    # Sampling error
    "standard_error_mean",
    "standard_error_skewness",
    "standard_error_kurtosis",
    # Order statistics
    "quantile",
    "percentile",
    # Batch
    "describe",
    "STATISTICS",
    "UnivariateDesign",
    "UnivariateParams",
    "UnivariateSolution",
]
