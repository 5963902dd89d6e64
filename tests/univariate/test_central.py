"""
Tests for central tendency: mean, harmonic/geometric/quadratic means, mode.
"""

from enum import Enum

import numpy as np
import pytest

from pyunivariate.core.compute.tolerances import select_tolerance
from pyunivariate.core.exceptions import NumericalError, ValidationError
from pyunivariate.univariate import (
    geometric_mean,
    harmonic_mean,
    mean,
    mode,
    quadratic_mean,
)


class TestMean:

    def test_known_value(self, dispersion_sample):
        assert mean(dispersion_sample) == 1.375

    def test_integers(self):
        assert mean([1, 2, 3, 4]) == 2.5

    def test_single(self):
        assert mean([7.0]) == 7.0

    def test_empty_fails(self):
        with pytest.raises(ValidationError, match="at least 1"):
            mean([])

    def test_within_range(self, rng):
        for _ in range(50):
            v = rng.standard_normal(rng.integers(1, 40)) * rng.uniform(0.1, 100)
            m = mean(v)
            assert v.min() <= m <= v.max()

    @pytest.mark.parametrize("v", [
        [1e308, 1e308],
        [1.7e308, 1.5e308, 1.6e308],
        [-1e308, -1e308],
    ])
    def test_sum_overflow_stays_within_range(self, v):
        m = mean(v)
        assert np.isfinite(m)
        assert min(v) <= m <= max(v)

    def test_float32(self, dispersion_sample):
        v = np.array(dispersion_sample, dtype=np.float32)
        tol = select_tolerance(v.dtype)
        np.testing.assert_allclose(mean(v), 1.375, rtol=tol.rtol, atol=tol.atol)

    def test_does_not_mutate(self):
        v = np.array([3.0, 1.0, 2.0])
        mean(v)
        np.testing.assert_array_equal(v, [3.0, 1.0, 2.0])


class TestHarmonicMean:

    @pytest.mark.parametrize("v, expected", [
        ([0.25, 0.5, 1.0, 1.0], 0.5),
        ([0.5, 0.5, 0.5], 0.5),
        ([1.0, 2.0, 4.0], 12.0 / 7.0),
    ])
    def test_known_values(self, v, expected):
        np.testing.assert_allclose(harmonic_mean(v), expected, rtol=1e-12)

    def test_zero_element_fails(self):
        with pytest.raises(NumericalError, match="zero"):
            harmonic_mean([1.0, 0.0, 2.0])

    def test_reciprocals_cancel_fails(self):
        with pytest.raises(NumericalError, match="sum to zero"):
            harmonic_mean([1.0, -1.0])

    def test_subnormal_reciprocal_overflow_fails(self):
        with pytest.raises(NumericalError, match="harmonic_mean"):
            harmonic_mean([5e-324, 5e-324])

    def test_empty_fails(self):
        with pytest.raises(ValidationError):
            harmonic_mean([])


class TestGeometricMean:

    def test_known_value(self):
        np.testing.assert_allclose(geometric_mean([1.0, 2.0, 6.125, 12.25]), 3.5, rtol=1e-12)

    def test_large_values_do_not_overflow(self):
        np.testing.assert_allclose(geometric_mean([1e200, 1e200, 1e200]), 1e200, rtol=1e-12)

    def test_zero_gives_zero(self):
        assert geometric_mean([0.0, 2.0, 8.0]) == 0.0

    def test_negative_fails(self):
        with pytest.raises(ValidationError, match="non-negative"):
            geometric_mean([-1.0, 2.0])

    def test_not_greater_than_mean(self, rng):
        v = rng.uniform(0.1, 10.0, size=30)
        assert geometric_mean(v) <= mean(v)


class TestQuadraticMean:

    def test_known_value(self):
        np.testing.assert_allclose(
            quadratic_mean([-3.0, -2.0, 0.0, 2.0, 3.0]), 2.280350850198276, rtol=1e-12
        )

    def test_constant(self):
        np.testing.assert_allclose(quadratic_mean([-2.0, 2.0, 2.0]), 2.0, rtol=1e-12)

    def test_overflow_fails(self):
        with pytest.raises(NumericalError, match="quadratic_mean"):
            quadratic_mean([1e200, 1e200])


class Color(Enum):
    BLUE = 1
    GREEN = 2
    YELLOW = 3


class TestMode:

    def test_integers(self):
        v = [2, 4, 3, 5, 4, 6, 1, 1, 6, 4, 0, 0]
        result = mode(v)
        assert result == 4
        assert v.count(result) == max(v.count(e) for e in v)

    def test_single(self):
        assert mode([1]) == 1

    def test_iterator_input(self):
        assert mode(iter([1, 1, 1, 4][3:])) == 4

    def test_enum_members(self):
        assert mode([Color.BLUE, Color.GREEN, Color.YELLOW, Color.GREEN]) is Color.GREEN

    def test_strings(self):
        assert mode("abracadabra") == "a"

    def test_numpy_array(self):
        assert mode(np.array([1.5, 2.5, 2.5])) == 2.5

    def test_empty_returns_none(self):
        assert mode([]) is None

    def test_tie_returns_a_maximal_element(self):
        v = [1, 1, 2, 2, 3]
        assert mode(v) in {1, 2}
