"""
Shared compute infrastructure for PyUnivariate.

This module provides the selection/sort kernels, timing utilities and
tolerance tiers that are shared by the statistics modules.

Submodules:
    selection: Randomized quicksort / quickselect
    timing: Execution timing utilities
    tolerances: Tolerance tiers per floating dtype
"""

from pyunivariate.core.compute.selection import (
    quicksort,
    quickselect,
    sorted_copy,
    resolve_rng,
)
from pyunivariate.core.compute.timing import Timer, timed

__all__ = [
    # Selection
    "quicksort",
    "quickselect",
    "sorted_copy",
    "resolve_rng",
    # Timing
    "Timer",
    "timed",
]
