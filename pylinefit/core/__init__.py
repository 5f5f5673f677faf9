"""
Core infrastructure for pylinefit.

Shared abstractions used by the simulation, fitting and report modules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, timing, tolerances, grid kernels
"""

from pylinefit.core.protocols import Backend
from pylinefit.core.result import Result
from pylinefit.core.exceptions import (
    PyLineFitError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateInputError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLineFitError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateInputError",
]
