"""
Simulation Design.

SimulationDesign holds the population regression line and sampling
configuration for the synthetic data generator. Immutable, validated at
construction, so a design can be passed around and reused across seeds.
"""

from __future__ import annotations

from dataclasses import dataclass

from pylinefit.core.validation import (
    check_positive_int,
    check_finite_scalar,
    check_non_negative,
    check_interval,
)


@dataclass(frozen=True)
class SimulationDesign:
    """
    Frozen configuration for drawing a sample from y = b0 + b1·x + N(0, σ²).

    Attributes:
        n: Sample size (>= 1).
        x_range: (low, high) bounds of the uniform x distribution, low < high.
        intercept: True intercept b0 of the population line.
        slope: True slope b1 of the population line.
        noise_sd: Standard deviation σ of the Gaussian noise (>= 0).

    Construction:
        SimulationDesign.build(n=100, x_range=(0, 10), intercept=2, slope=3, noise_sd=1)
    """
    n: int
    x_range: tuple[float, float]
    intercept: float
    slope: float
    noise_sd: float

    @classmethod
    def build(
        cls,
        n: int,
        x_range: tuple[float, float],
        intercept: float,
        slope: float,
        noise_sd: float,
    ) -> SimulationDesign:
        """
        Create a simulation design with validation.

        Raises:
            ValidationError: If n < 1, x_range is not an increasing pair of
                finite numbers, or noise_sd is negative or non-finite.
        """
        return cls(
            n=check_positive_int(n, 'n'),
            x_range=check_interval(x_range, 'x_range'),
            intercept=check_finite_scalar(intercept, 'intercept'),
            slope=check_finite_scalar(slope, 'slope'),
            noise_sd=check_non_negative(noise_sd, 'noise_sd'),
        )

    def with_size(self, n: int) -> SimulationDesign:
        """Same population line and noise, different sample size."""
        return SimulationDesign.build(n, self.x_range, self.intercept, self.slope, self.noise_sd)

    def with_noise(self, noise_sd: float) -> SimulationDesign:
        """Same population line and size, different noise level."""
        return SimulationDesign.build(self.n, self.x_range, self.intercept, self.slope, noise_sd)
