"""
Core protocols for PyUnivariate.

We use Protocol (structural typing) rather than ABC (nominal typing) so
alternative backends only need to match the shape of the interface.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope.
    Backends are stateless: all configuration is passed per call.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_univariate'.
        """
        ...

    def solve(self, design: D, **kwargs) -> 'Result':
        """
        Execute the computation.

        Raises:
            ValidationError: If the request is invalid for this backend
        """
        ...
