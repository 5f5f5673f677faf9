"""
Report configuration.

ReportConfig gathers everything one report run needs: the population
line, the sampling range, the sample sizes and noise levels to compare,
the candidate grid and the seed. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Integral
from typing import Any, Sequence

from numpy.typing import ArrayLike

from pylinefit.core.exceptions import ValidationError
from pylinefit.core.validation import (
    check_finite_scalar,
    check_interval,
    check_non_negative,
    check_positive_int,
)
from pylinefit.fitting.design import ParameterGrid


GRID_BACKENDS = ('auto', 'cpu', 'cpu_loop', 'gpu')


@dataclass(frozen=True)
class ReportConfig:
    """
    Frozen configuration for a comparison report.

    Attributes:
        intercept: True intercept of the population line.
        slope: True slope of the population line.
        x_range: (low, high) range x is drawn from.
        sample_sizes: Sample sizes to compare, in report order.
        noise_levels: Noise standard deviations to compare, in report order.
        grid: Candidate grid for the grid search.
        seed: Seed for the whole report; None draws fresh OS entropy.
        backend: Grid-search backend choice.

    Construction:
        ReportConfig.build()                       # reference defaults
        ReportConfig.build(sample_sizes=(50,), noise_levels=(0.5, 2.0), seed=7)
    """
    intercept: float
    slope: float
    x_range: tuple[float, float]
    sample_sizes: tuple[int, ...]
    noise_levels: tuple[float, ...]
    grid: ParameterGrid
    seed: int | None
    backend: str

    @classmethod
    def build(
        cls,
        *,
        intercept: float = 2.0,
        slope: float = 3.0,
        x_range: tuple[float, float] = (0.0, 10.0),
        sample_sizes: Sequence[int] = (10, 100, 1000),
        noise_levels: Sequence[float] = (1.0, 6.0),
        grid: ParameterGrid | ArrayLike | None = None,
        seed: int | None = 1,
        backend: str = 'auto',
    ) -> ReportConfig:
        """
        Create a report configuration with validation.

        Raises:
            ValidationError: If any value is out of range or a sequence is empty
        """
        return cls(
            intercept=check_finite_scalar(intercept, 'intercept'),
            slope=check_finite_scalar(slope, 'slope'),
            x_range=check_interval(x_range, 'x_range'),
            sample_sizes=_check_sequence(sample_sizes, 'sample_sizes', check_positive_int),
            noise_levels=_check_sequence(noise_levels, 'noise_levels', check_non_negative),
            grid=ParameterGrid.coerce(grid),
            seed=_check_seed(seed),
            backend=_check_backend(backend),
        )

    def with_seed(self, seed: int | None) -> ReportConfig:
        """Same configuration, different seed."""
        return replace(self, seed=_check_seed(seed))


def _check_sequence(values: Sequence[Any], name: str, check) -> tuple:
    """Validate every element of a nonempty sequence with check(value, name)."""
    if isinstance(values, (str, bytes)):
        raise ValidationError(f"{name}: expected a sequence of numbers, got {values!r}")
    try:
        items = tuple(values)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence, got {type(values).__name__}") from e
    if not items:
        raise ValidationError(f"{name}: must contain at least one value")
    return tuple(check(v, f"{name}[{k}]") for k, v in enumerate(items))


def _check_seed(seed: Any) -> int | None:
    """None, or a non-negative integer accepted by numpy.random.SeedSequence."""
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, Integral):
        raise ValidationError(f"seed: expected an integer or None, got {type(seed).__name__}")
    if seed < 0:
        raise ValidationError(f"seed: must be >= 0, got {seed}")
    return int(seed)


def _check_backend(backend: str) -> str:
    if backend not in GRID_BACKENDS:
        raise ValueError(f"Unknown backend: {backend!r}")
    return backend
