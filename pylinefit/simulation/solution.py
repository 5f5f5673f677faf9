"""
Simulated sample type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinefit.simulation.design import SimulationDesign


@dataclass(frozen=True)
class Sample:
    """
    A synthetic sample together with the design that generated it.

    Unpacks as a pair so callers can write ``x, y = generate(...)``.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    design: SimulationDesign

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return self.x.shape[0]

    @property
    def n(self) -> int:
        return self.x.shape[0]

    @property
    def true_params(self) -> tuple[float, float]:
        """(intercept, slope) of the population regression line."""
        return self.design.intercept, self.design.slope

    @property
    def noise_sd(self) -> float:
        return self.design.noise_sd

    def true_line(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the population regression line at x."""
        x = np.asarray(x, dtype=np.float64)
        return self.design.intercept + self.design.slope * x

    def __repr__(self) -> str:
        return (
            f"Sample(n={self.n}, intercept={self.design.intercept}, "
            f"slope={self.design.slope}, noise_sd={self.design.noise_sd})"
        )
