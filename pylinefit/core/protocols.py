"""
Core protocols for pylinefit.

Backends are matched structurally (Protocol) rather than by inheritance,
so a CPU loop, a vectorized CPU pass and a PyTorch kernel can be swapped
freely by the solver dispatch.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinefit.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. Backends are stateless apart from
    construction-time configuration (device, dtype), which makes them
    easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_normal', 'cpu_grid', 'cpu_grid_loop', 'gpu_grid'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If the design admits no solution
            ValidationError: If the design is invalid for this backend
        """
        ...
