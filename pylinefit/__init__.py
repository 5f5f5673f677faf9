"""
pylinefit: least-squares line fitting on synthetic data.

Draws samples from a known line plus Gaussian noise, recovers the line
by brute-force grid search and by the closed-form normal equations,
and compares the two across sample sizes and noise levels.

Submodules:
    simulation: Sample generator
    fitting: Grid-search and closed-form estimators
    report: Comparison study, summary tables and plots
"""

__version__ = "0.1.0"

from pylinefit import simulation
from pylinefit import fitting
from pylinefit import report
from pylinefit.simulation import generate
from pylinefit.fitting import fit, fit_grid_search, fit_normal_equations, ParameterGrid
from pylinefit.report import compare

__all__ = [
    "__version__",
    "simulation",
    "fitting",
    "report",
    "generate",
    "fit",
    "fit_grid_search",
    "fit_normal_equations",
    "ParameterGrid",
    "compare",
]
