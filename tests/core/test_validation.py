"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_not_constant: zero-variance detection
    - scalar checks: positive ints, finite reals, non-negative reals, intervals
"""

import numpy as np
import pytest

from pylinefit.core.exceptions import DegenerateInputError, DimensionError, ValidationError
from pylinefit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_finite_scalar,
    check_interval,
    check_min_samples,
    check_ndim,
    check_non_negative,
    check_not_constant,
    check_positive_int,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "x")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "x")

    def test_empty_array(self):
        result = check_array([], "x")
        assert len(result) == 0

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 3.0]), "x")


# ═══════════════════════════════════════════════════════════════════════
# Dimensions and lengths
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected_as_1d(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_0d_rejected(self):
        with pytest.raises(DimensionError):
            check_ndim(np.array(5.0), 1, "x")

    def test_consistent_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_inconsistent_lengths_rejected(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.ones(4), names=("x", "y"))

    def test_names_must_match_arrays(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 1 samples, got 0"):
            check_min_samples(np.zeros(0), 1, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_not_constant
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNotConstant:

    def test_varying_passes(self):
        check_not_constant(np.array([0.0, 0.0, 1e-300]), "x")

    def test_constant_rejected(self):
        with pytest.raises(DegenerateInputError, match="zero variance") as exc_info:
            check_not_constant(np.array([0.0, 0.0, 0.0]), "x")
        assert exc_info.value.variable == "x"
        assert exc_info.value.variance == 0.0

    def test_single_value_is_constant(self):
        with pytest.raises(DegenerateInputError):
            check_not_constant(np.array([4.0]), "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_positive_int(self):
        assert check_positive_int(5, "n") == 5
        assert check_positive_int(np.int64(3), "n") == 3

    @pytest.mark.parametrize("bad", [0, -1])
    def test_positive_int_rejects_small(self, bad):
        with pytest.raises(ValidationError, match="n: must be >= 1"):
            check_positive_int(bad, "n")

    @pytest.mark.parametrize("bad", [2.0, "3", True])
    def test_positive_int_rejects_non_integers(self, bad):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_positive_int(bad, "n")

    def test_finite_scalar(self):
        assert check_finite_scalar(2, "b") == 2.0

    def test_finite_scalar_rejects_nan(self):
        with pytest.raises(ValidationError, match="must be finite"):
            check_finite_scalar(float("nan"), "b")

    def test_non_negative_accepts_zero(self):
        assert check_non_negative(0, "noise_sd") == 0.0

    def test_non_negative_rejects_negative(self):
        with pytest.raises(ValidationError, match="noise_sd: must be >= 0"):
            check_non_negative(-0.1, "noise_sd")

    def test_interval(self):
        assert check_interval((0, 10), "x_range") == (0.0, 10.0)

    @pytest.mark.parametrize("bad", [(1, 1), (2, 1)])
    def test_interval_rejects_non_increasing(self, bad):
        with pytest.raises(ValidationError, match="must be <"):
            check_interval(bad, "x_range")

    @pytest.mark.parametrize("bad", [(1,), (1, 2, 3), 5])
    def test_interval_rejects_non_pairs(self, bad):
        with pytest.raises(ValidationError, match="pair"):
            check_interval(bad, "x_range")
