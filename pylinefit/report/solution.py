"""
Comparison report types.

ComparisonRow holds one (sample size, noise level) cell of the study;
ComparisonSolution is the user-facing collection with text, table and
figure renderings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TYPE_CHECKING

from pylinefit.fitting.solution import LineSolution
from pylinefit.simulation.solution import Sample

if TYPE_CHECKING:
    import pandas as pd
    from matplotlib.figure import Figure
    from pylinefit.report.design import ReportConfig


@dataclass(frozen=True)
class ComparisonRow:
    """
    Both estimators applied to one simulated sample.

    Attributes:
        n: Sample size.
        noise_sd: Noise standard deviation used to draw the sample.
        sample: The simulated sample.
        grid_fit: Grid-search estimate.
        normal_fit: Closed-form estimate.
    """
    n: int
    noise_sd: float
    sample: Sample
    grid_fit: LineSolution
    normal_fit: LineSolution

    @property
    def grid_error(self) -> tuple[float, float]:
        """|estimate - truth| for (intercept, slope), grid search."""
        return _abs_error(self.grid_fit.params, self.sample.true_params)

    @property
    def normal_error(self) -> tuple[float, float]:
        """|estimate - truth| for (intercept, slope), closed form."""
        return _abs_error(self.normal_fit.params, self.sample.true_params)

    @property
    def estimate_gap(self) -> tuple[float, float]:
        """|grid - closed form| for (intercept, slope)."""
        return _abs_error(self.grid_fit.params, self.normal_fit.params)

    @property
    def rss_gap(self) -> float:
        """Grid-search RSS minus closed-form RSS; >= 0 up to rounding."""
        return self.grid_fit.rss - self.normal_fit.rss


@dataclass
class ComparisonSolution:
    """
    User-facing results of a sample-size × noise-level comparison.

    Rows are ordered sample size outer, noise level inner.
    """
    _rows: tuple[ComparisonRow, ...]
    _config: 'ReportConfig'

    @property
    def rows(self) -> tuple[ComparisonRow, ...]:
        return self._rows

    @property
    def config(self) -> 'ReportConfig':
        return self._config

    @property
    def true_params(self) -> tuple[float, float]:
        return self._config.intercept, self._config.slope

    def row(self, n: int, noise_sd: float) -> ComparisonRow:
        """
        Look up the cell for a sample size and noise level.

        Raises:
            KeyError: If no such cell was run
        """
        for r in self._rows:
            if r.n == n and r.noise_sd == noise_sd:
                return r
        raise KeyError(
            f"No comparison cell for n={n}, noise_sd={noise_sd}. "
            f"Sample sizes: {self._config.sample_sizes}, "
            f"noise levels: {self._config.noise_levels}"
        )

    def records(self) -> list[dict[str, Any]]:
        """One flat dict per cell."""
        out = []
        for r in self._rows:
            out.append({
                'n': r.n,
                'noise_sd': r.noise_sd,
                'grid_intercept': r.grid_fit.intercept,
                'grid_slope': r.grid_fit.slope,
                'grid_rss': r.grid_fit.rss,
                'normal_intercept': r.normal_fit.intercept,
                'normal_slope': r.normal_fit.slope,
                'normal_rss': r.normal_fit.rss,
                'rss_gap': r.rss_gap,
                'grid_on_boundary': r.grid_fit.info['on_boundary'],
            })
        return out

    def to_dataframe(self) -> 'pd.DataFrame':
        """Cells as a pandas DataFrame, one row per (n, noise_sd)."""
        import pandas as pd
        return pd.DataFrame.from_records(self.records())

    def plot(self, path: str | Path | None = None) -> 'Figure':
        """One panel per cell; saved to path when given."""
        from pylinefit.report.plotting import plot_comparison
        return plot_comparison(self, path=path)

    def summary(self) -> str:
        """Generate the comparison table as text."""
        b0, b1 = self.true_params
        lo, hi = self._config.x_range
        lines = [
            "Least Squares Line Fitting: Grid Search vs Normal Equations",
            "=" * 86,
            f"Population line: y = {b0:g} + {b1:g}x, x ~ Uniform({lo:g}, {hi:g})",
            f"Grid: {self._config.grid!r}",
            f"Seed: {self._config.seed}",
            "",
            f"{'n':>6} {'sigma':>7} {'grid b0':>10} {'grid b1':>10} {'normal b0':>10} "
            f"{'normal b1':>10} {'grid RSS':>12} {'normal RSS':>12}",
            "-" * 86,
        ]
        for r in self._rows:
            flag = " *" if r.grid_fit.info['on_boundary'] else ""
            lines.append(
                f"{r.n:>6d} {r.noise_sd:>7.3g} {r.grid_fit.intercept:>10.4f} "
                f"{r.grid_fit.slope:>10.4f} {r.normal_fit.intercept:>10.4f} "
                f"{r.normal_fit.slope:>10.4f} {r.grid_fit.rss:>12.4f} "
                f"{r.normal_fit.rss:>12.4f}{flag}"
            )
        lines.append("-" * 86)
        if any(r.grid_fit.info['on_boundary'] for r in self._rows):
            lines.append("* grid-search winner on the grid boundary")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ComparisonSolution(sample_sizes={self._config.sample_sizes}, "
            f"noise_levels={self._config.noise_levels}, cells={len(self._rows)})"
        )


def _abs_error(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float]:
    return abs(a[0] - b[0]), abs(a[1] - b[1])
