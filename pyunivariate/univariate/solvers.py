"""
Solver dispatch for univariate statistics.

Provides describe() as the batch entry point over a single sample.
"""

from __future__ import annotations

import warnings
from typing import Iterable

from numpy.typing import ArrayLike

from pyunivariate.core.compute.selection import RandomState
from pyunivariate.core.exceptions import ValidationError
from pyunivariate.univariate.design import UnivariateDesign
from pyunivariate.univariate.solution import STATISTICS, UnivariateSolution
from pyunivariate.univariate.backends.cpu import CPUUnivariateBackend


def _ensure_design(data: ArrayLike | UnivariateDesign) -> UnivariateDesign:
    """Convert raw array to UnivariateDesign if needed."""
    if isinstance(data, UnivariateDesign):
        return data
    return UnivariateDesign.from_array(data)


def describe(
    data: ArrayLike | UnivariateDesign,
    *,
    compute: Iterable[str] | None = None,
    population_size: float | None = None,
    rng: RandomState = None,
) -> UnivariateSolution:
    """
    Compute descriptive statistics of a sample in one pass.

    Parameters
    ----------
    data : array-like or UnivariateDesign
        1D numeric sample.
    compute : iterable of str, optional
        Statistics to compute (see STATISTICS). Default: all of them.
    population_size : float, optional
        Population size for the finite population correction of the
        standard error of the mean.
    rng : None, int or numpy.random.Generator
        Pivot randomness for the median/quartile sort.

    Returns
    -------
    UnivariateSolution

    Statistics whose preconditions the sample does not meet (e.g.
    kurtosis for n < 4, skewness of a constant sample) are left as None;
    a RuntimeWarning lists them and Result.warnings carries the details.
    """
    if isinstance(compute, str):
        raise ValidationError("compute: expected an iterable of statistic names, got a str")

    design = _ensure_design(data)
    requested = set(STATISTICS) if compute is None else set(compute)
    if not requested:
        raise ValidationError("compute: no statistics requested")

    result = CPUUnivariateBackend().solve(
        design,
        compute=requested,
        population_size=population_size,
        rng=rng,
    )

    if result.warnings:
        skipped = ", ".join(w.split(":", 1)[0] for w in result.warnings)
        warnings.warn(
            f"describe(): {len(result.warnings)} statistics could not be computed "
            f"for n={design.n}: {skipped}",
            RuntimeWarning,
            stacklevel=2,
        )

    return UnivariateSolution(_result=result, _design=design)
