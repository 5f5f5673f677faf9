"""
Synthetic data from a known linear model.

Public API:
    generate(n, x_range, intercept, slope, noise_sd, rng) -> Sample
    simulate(design, rng) -> Sample

Example:
    >>> from pylinefit.simulation import generate
    >>> sample = generate(100, (0, 10), intercept=2, slope=3, noise_sd=1, rng=1)
    >>> x, y = sample
"""

from pylinefit.simulation.design import SimulationDesign
from pylinefit.simulation.solution import Sample
from pylinefit.simulation.solvers import generate, simulate, resolve_rng

__all__ = [
    "generate",
    "simulate",
    "resolve_rng",
    "SimulationDesign",
    "Sample",
]
