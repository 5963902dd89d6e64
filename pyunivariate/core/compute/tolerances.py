"""
Tolerance tiers for numerical validation.

Defines precision expectations per floating representation:
- float64 (reference): machine precision match with closed-form values
- float32: relaxed for single-precision arithmetic
- float16: relaxed further

Used by the test suite to compare statistics computed in the caller's
precision against float64 reference values.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision: matches closed-form reference values',
)

FLOAT32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='float32',
    description='Single precision: statistically equivalent',
)

FLOAT16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='float16',
    description='Half precision: coarse agreement only',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for a floating dtype."""
    dtype = np.dtype(dtype)
    if dtype == np.float16:
        return FLOAT16
    if dtype == np.float32:
        return FLOAT32
    return FLOAT64
