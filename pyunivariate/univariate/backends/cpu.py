"""
CPU backend for univariate descriptive statistics.

Computes each requested statistic through the public statistic functions,
passing the shared center and scale as precomputed parameters so they are
computed once per solve.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from pyunivariate.core.compute.selection import RandomState, resolve_rng, sorted_copy
from pyunivariate.core.compute.timing import Timer
from pyunivariate.core.exceptions import ConsistencyError, NumericalError, ValidationError
from pyunivariate.core.result import Result, _default_provenance
from pyunivariate.univariate.central import (
    _mean, mode, harmonic_mean, geometric_mean, quadratic_mean,
)
from pyunivariate.univariate.dispersion import (
    _population_variance, variance, population_variance, standard_deviation,
    average_deviation,
)
from pyunivariate.univariate.shape import (
    skewness, pskewness, kurtosis, pkurtosis, pearson_skewness,
)
from pyunivariate.univariate.sampling_error import (
    standard_error_mean, standard_error_skewness, standard_error_kurtosis,
)
from pyunivariate.univariate.order import DEFAULT_PROBS, _median_of_sorted
from pyunivariate.univariate._quantile_types import sample_quantiles
from pyunivariate.univariate.design import UnivariateDesign
from pyunivariate.univariate.solution import STATISTICS, UnivariateParams

_ORDER_STATISTICS = frozenset({'median', 'quartiles'})


class CPUUnivariateBackend:
    """CPU reference backend for univariate statistics."""

    @property
    def name(self) -> str:
        return 'cpu_univariate'

    def solve(
        self,
        design: UnivariateDesign,
        *,
        compute: set[str],
        population_size: float | None = None,
        rng: RandomState = None,
    ) -> Result[UnivariateParams]:
        """
        Compute requested univariate statistics.

        Parameters
        ----------
        design : UnivariateDesign
        compute : set of str
            Which statistics to compute; any subset of STATISTICS.
        population_size : float, optional
            Population size for the finite population correction of se_mean.
        rng : None, int or numpy.random.Generator
            Pivot randomness for the order statistics sort.

        A statistic whose precondition fails (sample too small, zero
        scale, zero element for the harmonic mean, ...) is left as None
        and the reason is recorded in Result.warnings. ConsistencyError
        is never caught.
        """
        unknown = set(compute) - set(STATISTICS)
        if unknown:
            raise ValidationError(
                f"Unknown statistics: {sorted(unknown)}. Valid names: {list(STATISTICS)}"
            )

        timer = Timer()
        timer.start()

        x = design.data
        n = design.n
        warnings_list: list[str] = []

        # Shared parameters; on overflow they stay None and each dependent
        # statistic recomputes, fails and is recorded as a warning
        center = pstdev = None
        with timer.section('center'):
            try:
                center = _mean(x)
                pstdev = np.sqrt(_population_variance(x, center))
            except ConsistencyError:
                raise
            except NumericalError:
                pass

        sorted_x = None
        if _ORDER_STATISTICS & set(compute):
            with timer.section('sort'):
                sorted_x = sorted_copy(x, rng=resolve_rng(rng))

        calculators: dict[str, Callable[[], Any]] = {
            'mean': lambda: _mean(x) if center is None else center,
            'median': lambda: _median_of_sorted(sorted_x),
            'mode': lambda: mode(x),
            'harmonic_mean': lambda: harmonic_mean(x),
            'geometric_mean': lambda: geometric_mean(x),
            'quadratic_mean': lambda: quadratic_mean(x),
            'variance': lambda: variance(x, xbar=center),
            'population_variance': lambda: population_variance(x, mu=center),
            'sd': lambda: standard_deviation(x, xbar=center),
            'population_sd': lambda: (
                np.sqrt(_population_variance(x, center)) if pstdev is None else pstdev
            ),
            'average_deviation': lambda: average_deviation(x, center=center),
            'skewness': lambda: skewness(x, mean=center, pstdev=pstdev),
            'pskewness': lambda: pskewness(x, mean=center, pstdev=pstdev),
            'kurtosis': lambda: kurtosis(x, mean=center, pstdev=pstdev),
            'pkurtosis': lambda: pkurtosis(x, mean=center, pstdev=pstdev),
            'pearson_skewness': lambda: pearson_skewness(
                center, mode(x), standard_deviation(x, xbar=center),
            ),
            'se_mean': lambda: standard_error_mean(
                standard_deviation(x, xbar=center), n, population_size,
            ),
            'se_skewness': lambda: standard_error_skewness(n),
            'se_kurtosis': lambda: standard_error_kurtosis(n),
            'quartiles': lambda: sample_quantiles(
                sorted_x, np.array(DEFAULT_PROBS), qtype=7,
            ),
        }

        values: dict[str, Any] = {}
        for stat in STATISTICS:
            if stat not in compute:
                continue
            with timer.section(stat):
                try:
                    value = calculators[stat]()
                except ConsistencyError:
                    raise
                except (ValidationError, NumericalError) as e:
                    warnings_list.append(f"{stat}: {e}")
                    continue
            if isinstance(value, np.generic):
                value = value.item()
            values[stat] = value

        timer.stop()

        params = UnivariateParams(n=n, **values)

        return Result(
            params=params,
            info={
                'n': n,
                'dtype': str(design.dtype),
                'computed': sorted(compute),
                'population_size': population_size,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={**_default_provenance(), 'sort': 'randomized_quicksort'},
        )
