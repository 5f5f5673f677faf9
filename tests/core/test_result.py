"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinefit.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_timing_none(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_reassign_backend_name(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu",
            warnings=("best pair lies on the grid boundary",),
        )
        assert result.has_warning("boundary")
        assert not result.has_warning("converge")

    def test_no_warnings(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert not result.has_warning("anything")
