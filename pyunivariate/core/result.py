"""
Generic result container for PyUnivariate batch computations.

The Result class provides a standardized envelope for backend output.
This enables shared tooling for timing, reproducibility and reporting
while letting each surface define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (computed statistics, sample size)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Versions of the software stack that produced a result."""
    from pyunivariate import __version__

    return {
        'pyunivariate_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed statistics
        info: Structured metadata (sample size, computed statistics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Software versions and algorithm details

    Examples:
        >>> Result(
        ...     params=UnivariateParams(mean=1.375),
        ...     info={'n': 8, 'computed': ['mean']},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_univariate'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
