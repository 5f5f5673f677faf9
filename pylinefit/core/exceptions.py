"""
Exception hierarchy for pylinefit.

All exceptions inherit from PyLineFitError to allow catching any
library-specific error. Domain code raises the most specific class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLineFitError(Exception):
    """Base exception for all pylinefit errors."""
    pass


class ValidationError(PyLineFitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    samples, empty candidate grids, non-finite values, invalid ranges.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an array is not one-dimensional or when x and y
    have different lengths.
    """
    pass


class NumericalError(PyLineFitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input is valid in shape but admits no unique least-squares line.

    Raised by the closed-form estimator when every x value is identical,
    so the slope denominator Σ(x - x̄)² is zero.

    Attributes:
        variable: Name of the degenerate variable (typically 'x')
        variance: Observed population variance of that variable
    """

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        variance: float | None = None,
    ):
        super().__init__(message)
        self.variable = variable
        self.variance = variance
