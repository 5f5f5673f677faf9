"""
Scatter plots with true and fitted lines.

matplotlib is imported lazily so the numeric modules import without it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TYPE_CHECKING

import numpy as np

from pylinefit.fitting.solution import LineSolution
from pylinefit.simulation.solution import Sample

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from pylinefit.report.solution import ComparisonSolution


_METHOD_LABELS = {
    'grid': 'grid search',
    'normal': 'normal equations',
}
_FIT_STYLES = ('--', '-.', ':')


def plot_fit(
    sample: Sample,
    fits: LineSolution | Sequence[LineSolution] = (),
    *,
    ax: 'Axes | None' = None,
    labels: Sequence[str] | None = None,
) -> 'Axes':
    """
    Scatter the sample and overlay the population line and fitted lines.

    Args:
        sample: Simulated sample (carries the true line).
        fits: One or more fitted lines to overlay.
        ax: Axes to draw on; a new figure is created when None.
        labels: Legend labels for fits; defaults to the fit method with
            its estimates.

    Returns:
        The Axes drawn on.

    Raises:
        ValueError: If labels is given with a different length than fits
    """
    import matplotlib.pyplot as plt

    if isinstance(fits, LineSolution):
        fits = (fits,)
    fits = tuple(fits)
    if labels is not None and len(labels) != len(fits):
        raise ValueError(f"Got {len(labels)} labels for {len(fits)} fits")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    lo, hi = sample.design.x_range
    line_x = np.linspace(lo, hi, 2)
    b0, b1 = sample.true_params

    ax.scatter(sample.x, sample.y, s=12, alpha=0.6, color='#4e79a7', edgecolor='k',
               linewidth=0.3, label='observed')
    ax.plot(line_x, sample.true_line(line_x), color='k', linewidth=1.5,
            label=f'true: {b0:g} + {b1:g}x')

    for k, fit in enumerate(fits):
        if labels is not None:
            label = labels[k]
        else:
            method = _METHOD_LABELS.get(fit.method, fit.method)
            label = f'{method}: {fit.intercept:.3f} + {fit.slope:.3f}x'
        ax.plot(line_x, fit.predict(line_x), linestyle=_FIT_STYLES[k % len(_FIT_STYLES)],
                linewidth=1.5, label=label)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(f'n = {sample.n}, σ = {sample.noise_sd:g}')
    ax.grid(alpha=0.3)
    ax.legend(fontsize='small')
    return ax


def plot_comparison(
    solution: 'ComparisonSolution',
    path: str | Path | None = None,
) -> 'Figure':
    """
    One panel per (sample size, noise level) cell.

    Rows are sample sizes, columns noise levels. Saved to path at 150 dpi
    when path is given; the figure is returned either way.
    """
    import matplotlib.pyplot as plt

    sizes = solution.config.sample_sizes
    levels = solution.config.noise_levels
    fig, axes = plt.subplots(
        len(sizes), len(levels),
        figsize=(5 * len(levels), 3.5 * len(sizes)),
        squeeze=False,
    )

    # rows are ordered sample size outer, noise level inner
    for k, row in enumerate(solution.rows):
        i, j = divmod(k, len(levels))
        ax = axes[i][j]
        plot_fit(row.sample, (row.grid_fit, row.normal_fit), ax=ax)

    fig.suptitle('Least squares: grid search vs normal equations')
    fig.tight_layout()

    if path is not None:
        fig.savefig(path, dpi=150)
    return fig
