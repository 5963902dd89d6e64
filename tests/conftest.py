"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def dispersion_sample():
    """Eight-point sample with mean 1.375 and population variance 1.25."""
    return [0.0, 0.25, 0.25, 1.25, 1.5, 1.75, 2.75, 3.25]


@pytest.fixture
def skewed_sample():
    """Right-skewed eight-point sample used for moment checks."""
    return [1.25, 1.5, 1.5, 1.75, 1.75, 2.5, 2.75, 4.5]
