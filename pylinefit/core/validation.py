"""
Input validation utilities for pylinefit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Integral, Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinefit.core.exceptions import (
    ValidationError,
    DimensionError,
    DegenerateInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types) or any other non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_not_constant(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 1D array takes at least two distinct values.

    A constant predictor makes Σ(x - x̄)² zero, so the least-squares
    slope is undefined.

    Raises:
        DegenerateInputError: If every element is identical
    """
    if array.size > 0 and np.ptp(array) == 0:
        raise DegenerateInputError(
            f"{name}: all {array.size} values equal {array[0]!r} (zero variance); "
            f"the least-squares slope is undefined",
            variable=name,
            variance=float(np.var(array)),
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1 and return it as a Python int.

    Booleans are rejected even though they subclass int.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as a float.

    Raises:
        ValidationError: If value is not real or not finite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value


def check_non_negative(value: Any, name: str) -> float:
    """
    Verify value is a finite real number >= 0.

    Raises:
        ValidationError: If value is negative or not finite
    """
    value = check_finite_scalar(value, name)
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return value


def check_interval(bounds: Any, name: str) -> tuple[float, float]:
    """
    Verify bounds is a (low, high) pair of finite reals with low < high.

    Returns:
        (low, high) as floats

    Raises:
        ValidationError: If bounds is not a valid increasing pair
    """
    try:
        low, high = bounds
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a (low, high) pair, got {bounds!r}") from e

    low = check_finite_scalar(low, f"{name}[0]")
    high = check_finite_scalar(high, f"{name}[1]")
    if not low < high:
        raise ValidationError(f"{name}: lower bound {low} must be < upper bound {high}")
    return low, high
