"""
Univariate statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.result import Result

if TYPE_CHECKING:
    from pyunivariate.univariate.design import UnivariateDesign


@dataclass(frozen=True)
class UnivariateParams:
    """
    Parameter payload for univariate statistics.

    All statistic fields are optional: None means the statistic was not
    requested, or was skipped because its precondition failed (the
    reason is recorded in Result.warnings).
    """
    n: int

    # Central tendency
    mean: float | None = None
    median: float | None = None
    mode: float | None = None
    harmonic_mean: float | None = None
    geometric_mean: float | None = None
    quadratic_mean: float | None = None

    # Dispersion
    variance: float | None = None
    population_variance: float | None = None
    sd: float | None = None
    population_sd: float | None = None
    average_deviation: float | None = None

    # Shape
    skewness: float | None = None
    pskewness: float | None = None
    kurtosis: float | None = None
    pkurtosis: float | None = None
    pearson_skewness: float | None = None

    # Sampling error
    se_mean: float | None = None
    se_skewness: float | None = None
    se_kurtosis: float | None = None

    # Order statistics: (0, 0.25, 0.5, 0.75, 1) quantiles, type 7
    quartiles: NDArray[np.floating[Any]] | None = None

    def computed(self) -> list[str]:
        """Names of the statistics that hold a value."""
        return [
            f.name for f in fields(self)
            if f.name != 'n' and getattr(self, f.name) is not None
        ]


# Names accepted by describe(compute=...), in computation order
STATISTICS: tuple[str, ...] = tuple(
    f.name for f in fields(UnivariateParams) if f.name != 'n'
)


@dataclass
class UnivariateSolution:
    """
    User-facing univariate statistics results.

    Wraps Result[UnivariateParams] and provides convenient accessors.
    """
    _result: Result[UnivariateParams]
    _design: 'UnivariateDesign'

    @property
    def params(self) -> UnivariateParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    # --- Central tendency ---

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> float | None:
        """One of the most frequent values (ties are unordered)."""
        return self._result.params.mode

    @property
    def harmonic_mean(self) -> float | None:
        return self._result.params.harmonic_mean

    @property
    def geometric_mean(self) -> float | None:
        return self._result.params.geometric_mean

    @property
    def quadratic_mean(self) -> float | None:
        return self._result.params.quadratic_mean

    # --- Dispersion ---

    @property
    def variance(self) -> float | None:
        """Sample variance (n-1)."""
        return self._result.params.variance

    @property
    def population_variance(self) -> float | None:
        """Population variance (n)."""
        return self._result.params.population_variance

    @property
    def sd(self) -> float | None:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def population_sd(self) -> float | None:
        return self._result.params.population_sd

    @property
    def average_deviation(self) -> float | None:
        return self._result.params.average_deviation

    # --- Shape ---

    @property
    def skewness(self) -> float | None:
        """Sample-adjusted skewness (G1)."""
        return self._result.params.skewness

    @property
    def pskewness(self) -> float | None:
        return self._result.params.pskewness

    @property
    def kurtosis(self) -> float | None:
        """Sample-adjusted excess kurtosis (G2)."""
        return self._result.params.kurtosis

    @property
    def pkurtosis(self) -> float | None:
        return self._result.params.pkurtosis

    @property
    def pearson_skewness(self) -> float | None:
        return self._result.params.pearson_skewness

    # --- Sampling error ---

    @property
    def se_mean(self) -> float | None:
        return self._result.params.se_mean

    @property
    def se_skewness(self) -> float | None:
        return self._result.params.se_skewness

    @property
    def se_kurtosis(self) -> float | None:
        return self._result.params.se_kurtosis

    # --- Order statistics ---

    @property
    def quartiles(self) -> NDArray[np.floating[Any]] | None:
        """Min, Q1, median, Q3, max (type 7)."""
        return self._result.params.quartiles

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def summary(self) -> str:
        """Plain-text table of every computed statistic."""
        params = self._result.params
        title = f"Descriptive Statistics: {self.name}" if self.name else "Descriptive Statistics"
        lines = [title, f"  n = {params.n}"]

        scalars = [name for name in params.computed() if name != 'quartiles']
        if scalars:
            width = max(len(name) for name in scalars)
            for name in scalars:
                lines.append(f"  {name.ljust(width)}  {getattr(params, name):.6f}")

        if params.quartiles is not None:
            labels = ("Min.", "1st Qu.", "Median", "3rd Qu.", "Max.")
            lines.append("  " + "  ".join(lbl.rjust(10) for lbl in labels))
            lines.append("  " + "  ".join(f"{q:10.6f}" for q in params.quartiles))

        for w in self._result.warnings:
            lines.append(f"  warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.params.computed()
        stats_str = ", ".join(computed) if computed else "none"
        return f"UnivariateSolution(n={self.n}, computed=[{stats_str}])"
