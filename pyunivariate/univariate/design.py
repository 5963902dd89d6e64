"""
UnivariateDesign: validated sample wrapper for describe().

Wraps a 1D sample and provides validation and metadata for the batch
statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.validation import check_sample


@dataclass(frozen=True)
class UnivariateDesign:
    """
    Design for univariate descriptive statistics.

    Holds a private, read-only copy of the sample so later changes to the
    caller's array cannot leak into a computation. Immutable after
    construction.

    Construction:
        UnivariateDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data) -> UnivariateDesign:
        """
        Build UnivariateDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D numeric sample with at least one finite value. Objects
            with a ``.values`` attribute (e.g. pandas Series) are
            unwrapped and their ``.name`` is kept.
        """
        if hasattr(data, 'values') and not callable(data.values):
            name = getattr(data, 'name', None)
            name = None if name is None else str(name)
            values = data.values
        else:
            name = None
            values = data

        arr = np.array(check_sample(values, 'data'), copy=True)
        arr.flags.writeable = False
        return cls(_data=arr, _n=int(arr.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only sample, shape (n,)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Series name, or None if not available."""
        return self._name

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __repr__(self) -> str:
        name = f", name={self._name!r}" if self._name is not None else ""
        return f"UnivariateDesign(n={self._n}, dtype={self._data.dtype}{name})"
