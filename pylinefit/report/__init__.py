"""
Reports: comparisons across sample sizes and noise levels, and plots.

Public API:
    compare(sample_sizes, noise_levels, ...) -> ComparisonSolution
    run_report(config) -> ComparisonSolution (prints the summary)
    plot_fit(sample, fits) -> matplotlib Axes
    plot_comparison(solution, path) -> matplotlib Figure

Example:
    >>> from pylinefit.report import compare
    >>> result = compare((10, 100), (1.0, 6.0), seed=1)
    >>> print(result.summary())
    >>> result.plot("comparison.png")
"""

from pylinefit.report.design import ReportConfig
from pylinefit.report.solution import ComparisonRow, ComparisonSolution
from pylinefit.report.solvers import compare, run_report
from pylinefit.report.plotting import plot_fit, plot_comparison

__all__ = [
    "compare",
    "run_report",
    "plot_fit",
    "plot_comparison",
    "ReportConfig",
    "ComparisonRow",
    "ComparisonSolution",
]
