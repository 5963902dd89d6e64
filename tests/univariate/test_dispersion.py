"""
Tests for dispersion: squared deviations, variance, standard deviation,
average deviation and standard scores.

Reference values cross-checked with numpy.var / numpy.std (ddof 0 and 1).
"""

import numpy as np
import pytest

from pyunivariate.core.compute.tolerances import FLOAT64, select_tolerance
from pyunivariate.core.exceptions import ConsistencyError, NumericalError, ValidationError
from pyunivariate.univariate import (
    average_deviation,
    population_standard_deviation,
    population_variance,
    standard_deviation,
    standard_scores,
    sum_square_deviations,
    variance,
)


class TestSumSquareDeviations:

    def test_about_mean(self, dispersion_sample):
        # population variance 1.25 * n
        np.testing.assert_allclose(sum_square_deviations(dispersion_sample), 10.0, rtol=1e-12)

    def test_supplied_center_used_verbatim(self):
        assert sum_square_deviations([1.0, 2.0, 3.0], center=0.0) == 14.0

    def test_constant_sample_is_zero(self):
        assert sum_square_deviations([4.0, 4.0, 4.0]) == 0.0

    def test_nan_center_is_consistency_fault(self):
        with pytest.raises(ConsistencyError) as excinfo:
            sum_square_deviations([1.0, 2.0], center=float("nan"))
        assert excinfo.value.quantity == "sum_square_deviations"

    def test_overflow_fails(self):
        with pytest.raises(NumericalError, match="sum_square_deviations") as excinfo:
            sum_square_deviations([1e200, -1e200])
        assert not isinstance(excinfo.value, ConsistencyError)

    @pytest.mark.parametrize("fn", [
        variance, population_variance, standard_deviation, population_standard_deviation,
    ])
    def test_variance_family_overflow_fails(self, fn):
        with pytest.raises(NumericalError, match="overflow"):
            fn([1e200, -1e200])

    def test_empty_fails(self):
        with pytest.raises(ValidationError):
            sum_square_deviations([])


class TestVariance:

    def test_known_value(self, dispersion_sample):
        assert abs(variance(dispersion_sample) - 1.428571) < 1e-6

    def test_matches_numpy(self, rng):
        v = rng.standard_normal(100)
        np.testing.assert_allclose(
            variance(v), np.var(v, ddof=1), rtol=FLOAT64.rtol, atol=FLOAT64.atol
        )

    def test_supplied_mean(self):
        # SSD about 0 is 14, divided by n - 1
        assert variance([1.0, 2.0, 3.0], xbar=0.0) == 7.0

    @pytest.mark.parametrize("v", [[], [1.0]])
    def test_too_small_fails(self, v):
        with pytest.raises(ValidationError, match="at least 2"):
            variance(v)

    def test_float32(self, dispersion_sample):
        v = np.array(dispersion_sample, dtype=np.float32)
        tol = select_tolerance(np.float32)
        np.testing.assert_allclose(variance(v), 10.0 / 7.0, rtol=tol.rtol, atol=tol.atol)

    def test_integers(self):
        assert variance([1, 2, 3, 4]) == pytest.approx(5.0 / 3.0)


class TestPopulationVariance:

    def test_known_value(self, dispersion_sample):
        np.testing.assert_allclose(population_variance(dispersion_sample), 1.25, rtol=1e-12)

    def test_single_is_zero(self):
        assert population_variance([3.0]) == 0.0

    def test_empty_fails(self):
        with pytest.raises(ValidationError, match="at least 1"):
            population_variance([])

    def test_supplied_mu(self):
        np.testing.assert_allclose(population_variance([1.0, 2.0, 3.0], mu=0.0), 14.0 / 3.0)


class TestStandardDeviation:

    def test_sample(self, dispersion_sample):
        assert abs(standard_deviation(dispersion_sample) - 1.195229) < 1e-6

    def test_population(self, dispersion_sample):
        assert abs(population_standard_deviation(dispersion_sample) - 1.118034) < 1e-6

    def test_matches_numpy(self, rng):
        v = rng.uniform(-5, 5, size=64)
        np.testing.assert_allclose(standard_deviation(v), np.std(v, ddof=1), rtol=1e-10)
        np.testing.assert_allclose(population_standard_deviation(v), np.std(v), rtol=1e-10)

    def test_sample_too_small(self):
        with pytest.raises(ValidationError):
            standard_deviation([1.0])

    def test_population_empty(self):
        with pytest.raises(ValidationError):
            population_standard_deviation([])


class TestAverageDeviation:

    def test_about_mean(self):
        np.testing.assert_allclose(average_deviation([2.0, 2.25, 2.5, 2.5, 3.25]), 0.3, rtol=1e-12)

    def test_supplied_center(self):
        np.testing.assert_allclose(
            average_deviation([2.0, 2.25, 2.5, 2.5, 3.25], center=2.75), 0.45, rtol=1e-12
        )

    def test_overflow_fails(self):
        with pytest.raises(NumericalError, match="average_deviation"):
            average_deviation([1.7e308, -1.7e308])

    def test_empty_fails(self):
        with pytest.raises(ValidationError):
            average_deviation([])


class TestStandardScores:

    def test_known_values(self, dispersion_sample):
        expected = [
            -1.150407536484354, -0.941242529850835, -0.941242529850835,
            -0.10458250331675945, 0.10458250331675945, 0.31374750995027834,
            1.150407536484354, 1.5687375497513918,
        ]
        np.testing.assert_allclose(standard_scores(dispersion_sample), expected, rtol=1e-12)

    def test_position_aligned(self):
        v = [3.0, 1.0, 2.0]
        scores = standard_scores(v)
        assert scores.shape == (3,)
        assert scores[0] > scores[2] > scores[1]

    def test_zero_mean_unit_sd(self, rng):
        scores = standard_scores(rng.standard_normal(50) * 4 + 10)
        np.testing.assert_allclose(scores.mean(), 0.0, atol=1e-12)
        np.testing.assert_allclose(scores.std(ddof=1), 1.0, rtol=1e-12)

    def test_float32_preserved(self):
        assert standard_scores(np.array([1.0, 2.0, 4.0], dtype=np.float32)).dtype == np.float32

    def test_constant_fails(self):
        with pytest.raises(NumericalError, match="zero"):
            standard_scores([2.0, 2.0, 2.0])

    def test_too_small_fails(self):
        with pytest.raises(ValidationError):
            standard_scores([1.0])
