"""
Exception hierarchy for PyUnivariate.

All exceptions inherit from PyUnivariateError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyUnivariateError(Exception):
    """Base exception for all PyUnivariate errors."""
    pass


class ValidationError(PyUnivariateError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty or
    too-small samples, non-finite data, out-of-range parameters.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not a 1-D sequence.
    """
    pass


class NumericalError(PyUnivariateError):
    """
    Numerical computation is degenerate.

    Raised when a statistic would divide by a zero scale (constant sample,
    zero standard deviation, zero element in a harmonic mean).
    """
    pass


class ConsistencyError(NumericalError):
    """
    An internal consistency check failed.

    Indicates a numeric-type or algorithm fault rather than bad user input,
    e.g. a sum of squared deviations that came out negative or NaN.

    Attributes:
        quantity: Name of the quantity that failed the check
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.value = value
