"""
Core infrastructure for PyUnivariate.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Selection kernels, timing, tolerance tiers
"""

from pyunivariate.core.protocols import Backend
from pyunivariate.core.result import Result
from pyunivariate.core.exceptions import (
    PyUnivariateError,
    ValidationError,
    DimensionError,
    NumericalError,
    ConsistencyError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyUnivariateError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConsistencyError",
]
