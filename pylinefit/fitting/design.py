"""
Line-fitting designs.

LineDesign wraps a validated (x, y) sample. ParameterGrid holds the
candidate intercepts and slopes for the grid search. Both are immutable
and validated at construction; backends trust them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinefit.core.exceptions import ValidationError
from pylinefit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
    check_positive_int,
    check_interval,
)

if TYPE_CHECKING:
    from pylinefit.simulation.solution import Sample


DEFAULT_GRID_BOUNDS = (-10.0, 10.0)
DEFAULT_GRID_POINTS = 300


@dataclass(frozen=True)
class LineDesign:
    """
    Validated sample for fitting y ≈ b0 + b1·x.

    Construction:
        LineDesign.from_arrays(x, y)
        LineDesign.from_sample(sample)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> LineDesign:
        """
        Build a design from array-likes.

        Raises:
            ValidationError: If x or y is non-numeric, empty, or non-finite
            DimensionError: If x or y is not 1D, or their lengths differ
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])

    @classmethod
    def from_sample(cls, sample: 'Sample') -> LineDesign:
        """Build a design from a simulated Sample."""
        return cls.from_arrays(sample.x, sample.y)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def x_mean(self) -> float:
        return float(np.mean(self._x))

    def y_mean(self) -> float:
        return float(np.mean(self._y))

    def tss(self) -> float:
        """Total sum of squares Σ(y - ȳ)²."""
        centered = self._y - self.y_mean()
        return float(np.sum(centered * centered))


@dataclass(frozen=True)
class ParameterGrid:
    """
    Candidate values for the grid search.

    The search enumerates intercepts in the outer loop and slopes in the
    inner loop. The single-sequence constructors use the same candidates
    for both parameters; pass intercepts and slopes separately when the
    two parameters live on different scales.

    Construction:
        ParameterGrid.linspace(-10, 10, 300)         # shared, evenly spaced
        ParameterGrid.uniform([0.0, 0.5, 1.0])       # shared, explicit
        ParameterGrid.build(intercepts=a, slopes=b)  # separate
        ParameterGrid.default()                      # 300 points on [-10, 10]
    """
    intercepts: NDArray[np.floating[Any]]
    slopes: NDArray[np.floating[Any]]

    @classmethod
    def build(cls, intercepts: ArrayLike, slopes: ArrayLike) -> ParameterGrid:
        """
        Build a grid from two candidate sequences.

        Raises:
            ValidationError: If either sequence is empty, non-numeric or non-finite
            DimensionError: If either sequence is not 1D
        """
        b0 = _check_candidates(intercepts, 'intercepts')
        b1 = _check_candidates(slopes, 'slopes')
        return cls(intercepts=b0, slopes=b1)

    @classmethod
    def uniform(cls, values: ArrayLike) -> ParameterGrid:
        """Same candidate sequence for intercept and slope."""
        candidates = _check_candidates(values, 'grid')
        return cls(intercepts=candidates, slopes=candidates)

    @classmethod
    def linspace(cls, lower: float, upper: float, num: int) -> ParameterGrid:
        """num evenly spaced candidates on [lower, upper], shared by both parameters."""
        lower, upper = check_interval((lower, upper), 'grid bounds')
        num = check_positive_int(num, 'num')
        return cls.uniform(np.linspace(lower, upper, num))

    @classmethod
    def default(cls) -> ParameterGrid:
        return cls.linspace(*DEFAULT_GRID_BOUNDS, DEFAULT_GRID_POINTS)

    @classmethod
    def coerce(cls, grid: 'ParameterGrid | ArrayLike | None') -> ParameterGrid:
        """Accept a ParameterGrid, a shared candidate sequence, or None (default)."""
        if grid is None:
            return cls.default()
        if isinstance(grid, ParameterGrid):
            return grid
        return cls.uniform(grid)

    @property
    def shape(self) -> tuple[int, int]:
        return self.intercepts.shape[0], self.slopes.shape[0]

    @property
    def n_pairs(self) -> int:
        n_b0, n_b1 = self.shape
        return n_b0 * n_b1

    @property
    def is_shared(self) -> bool:
        """True if intercept and slope use identical candidates."""
        return self.intercepts is self.slopes or np.array_equal(self.intercepts, self.slopes)

    def __repr__(self) -> str:
        if self.is_shared:
            return (
                f"ParameterGrid(shared, size={self.intercepts.shape[0]}, "
                f"range=[{self.intercepts.min():g}, {self.intercepts.max():g}])"
            )
        return (
            f"ParameterGrid(intercepts={self.intercepts.shape[0]} in "
            f"[{self.intercepts.min():g}, {self.intercepts.max():g}], "
            f"slopes={self.slopes.shape[0]} in "
            f"[{self.slopes.min():g}, {self.slopes.max():g}])"
        )


def _check_candidates(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate one candidate sequence: numeric, 1D, nonempty, finite."""
    arr = check_array(values, name)
    check_1d(arr, name)
    if arr.shape[0] == 0:
        raise ValidationError(
            f"{name}: candidate grid is empty; the minimum RSS is undefined"
        )
    check_finite(arr, name)
    return arr
