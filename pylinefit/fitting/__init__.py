"""
Least-squares line fitting.

Two estimators of (intercept, slope) for y ≈ b0 + b1·x:

Public API:
    fit_normal_equations(x, y) -> LineSolution
    fit_grid_search(x, y, grid) -> LineSolution
    fit(x, y, method='normal' | 'grid') -> LineSolution

Example:
    >>> from pylinefit.fitting import fit_grid_search, fit_normal_equations
    >>> closed = fit_normal_equations(x, y)
    >>> searched = fit_grid_search(x, y, ParameterGrid.linspace(-10, 10, 300))
    >>> print(closed.summary())
"""

from pylinefit.fitting.design import LineDesign, ParameterGrid
from pylinefit.fitting.solution import LineParams, LineSolution
from pylinefit.fitting.solvers import fit, fit_grid_search, fit_normal_equations

__all__ = [
    "fit",
    "fit_grid_search",
    "fit_normal_equations",
    "LineDesign",
    "ParameterGrid",
    "LineParams",
    "LineSolution",
]
