"""
Synthetic sample generation.

Provides generate() (explicit arguments) and simulate() (from a
SimulationDesign). Randomness comes only from the caller-supplied
source; the global NumPy random state is never touched.
"""

from __future__ import annotations

import numpy as np

from pylinefit.simulation.design import SimulationDesign
from pylinefit.simulation.solution import Sample


RandomSource = np.random.Generator | np.random.SeedSequence | int | None


def resolve_rng(rng: RandomSource) -> np.random.Generator:
    """
    Turn a random source into a Generator.

    A Generator is returned as-is (and will be advanced by the caller's
    draws); seeds, SeedSequences and None go through default_rng.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def simulate(design: SimulationDesign, rng: RandomSource = None) -> Sample:
    """
    Draw one sample from a validated design.

    All n x values are drawn before the n noise values, so two designs
    differing only in noise_sd, drawn with the same seed, share x and
    the same standardized noise.
    """
    gen = resolve_rng(rng)
    low, high = design.x_range
    x = gen.uniform(low, high, size=design.n)
    noise = gen.normal(0.0, design.noise_sd, size=design.n)
    y = design.intercept + design.slope * x + noise
    return Sample(x=x, y=y, design=design)


def generate(
    n: int,
    x_range: tuple[float, float],
    intercept: float,
    slope: float,
    noise_sd: float,
    rng: RandomSource = None,
) -> Sample:
    """
    Generate a sample from the linear model y = intercept + slope·x + ε.

    x_i ~ Uniform[x_range[0], x_range[1]), ε_i ~ N(0, noise_sd²), all
    independent.

    Args:
        n: Number of points (>= 1).
        x_range: (low, high) with low < high.
        intercept: True intercept.
        slope: True slope.
        noise_sd: Noise standard deviation (>= 0). Zero gives points
            exactly on the population line.
        rng: numpy Generator, SeedSequence, int seed, or None (fresh
            OS entropy, not reproducible).

    Returns:
        Sample; unpacks as (x, y).

    Raises:
        ValidationError: If any argument violates the constraints above.
            Raised before any random draws are taken.

    Example:
        >>> x, y = generate(100, (0, 10), 2.0, 3.0, 1.0, rng=42)
    """
    design = SimulationDesign.build(n, x_range, intercept, slope, noise_sd)
    return simulate(design, rng)
