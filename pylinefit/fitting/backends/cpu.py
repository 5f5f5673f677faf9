"""
CPU backends for line fitting.

CPUNormalEquationsBackend: closed-form least squares, the reference.
CPUGridSearchBackend: RSS surface over a ParameterGrid, one intercept row
    at a time with NumPy.
CPULoopGridSearchBackend: the same search walking every pair in order.
    Slow, but the most literal statement of the algorithm; used to check
    the vectorized backends.
"""

from typing import Any
import numpy as np

from pylinefit.core.result import Result
from pylinefit.core.compute.timing import Timer
from pylinefit.core.compute.grid import (
    grid_product,
    rss,
    rss_surface,
    first_argmin,
)
from pylinefit.core.exceptions import DegenerateInputError
from pylinefit.core.validation import check_not_constant
from pylinefit.fitting.design import LineDesign, ParameterGrid
from pylinefit.fitting.solution import LineParams, line_params
from pylinefit.fitting._common import grid_result


class CPUNormalEquationsBackend:
    """
    Closed-form simple linear regression.

    slope = Σ(x - x̄)(y - ȳ) / Σ(x - x̄)²
    intercept = ȳ - slope·x̄

    The unique global minimizer of RSS whenever x is not constant.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        """
        Solve for the least-squares line.

        Deviations from the mean are divided by their largest magnitude
        before the sums are formed, so x spread over very small or very
        large scales neither underflows nor overflows Σ(x - x̄)².

        Raises:
            DegenerateInputError: If every x value is identical, or x is
                too extreme in scale for a finite slope
        """
        check_not_constant(design.x, 'x')

        timer = Timer()
        timer.start()

        with timer.section('moments'):
            x_mean = design.x_mean()
            y_mean = design.y_mean()
            dx = design.x - x_mean
            dy = design.y - y_mean
            scale = float(np.max(np.abs(dx)))
            if not (np.isfinite(x_mean) and 0.0 < scale < np.inf):
                raise DegenerateInputError(
                    f"x: spread {scale!r} around mean {x_mean!r} leaves Σ(x - x̄)² "
                    f"unrepresentable; the least-squares slope is undefined",
                    variable='x',
                )
            dx = dx / scale
            sxx_scaled = float(np.sum(dx * dx))
            sxy_scaled = float(np.sum(dx * dy))

        with timer.section('solve'):
            slope = (sxy_scaled / sxx_scaled) / scale
            intercept = y_mean - slope * x_mean

        if not (np.isfinite(slope) and np.isfinite(intercept)):
            raise DegenerateInputError(
                f"slope {slope!r} or intercept {intercept!r} is not finite at this scale of the data",
                variable='x',
                variance=sxx_scaled * scale * scale / design.n,
            )

        with timer.section('residuals'):
            params = line_params(design, intercept, slope)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'normal',
            'sxx': sxx_scaled * scale * scale,
            'sxy': sxy_scaled * scale,
            'x_mean': x_mean,
            'y_mean': y_mean,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUGridSearchBackend:
    """
    Brute-force grid search, vectorized over slopes.

    Computes the full RSS surface then takes the first minimum in
    row-major order (intercept outer, slope inner).
    """

    def __init__(self, grid: ParameterGrid):
        self.grid = grid

    @property
    def name(self) -> str:
        return 'cpu_grid'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        timer = Timer()
        timer.start()

        with timer.section('surface'):
            surface = rss_surface(design.x, design.y, self.grid.intercepts, self.grid.slopes)

        with timer.section('argmin'):
            i, j = first_argmin(surface)

        with timer.section('residuals'):
            params = line_params(design, self.grid.intercepts[i], self.grid.slopes[j])

        timer.stop()

        return grid_result(self.name, self.grid, i, j, float(surface[i, j]), params, timer)


class CPULoopGridSearchBackend:
    """
    Brute-force grid search, one (intercept, slope) pair at a time.

    A later pair replaces the incumbent only with strictly lower RSS,
    so the first minimum in enumeration order wins.
    """

    def __init__(self, grid: ParameterGrid):
        self.grid = grid

    @property
    def name(self) -> str:
        return 'cpu_grid_loop'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        timer = Timer()
        timer.start()

        best_rss = np.inf
        best_i, best_j = 0, 0
        with timer.section('search'):
            for i, j, b0, b1 in grid_product(self.grid.intercepts, self.grid.slopes):
                value = rss(design.x, design.y, b0, b1)
                if value < best_rss:
                    best_rss, best_i, best_j = value, i, j

        with timer.section('residuals'):
            params = line_params(
                design, self.grid.intercepts[best_i], self.grid.slopes[best_j]
            )

        timer.stop()

        return grid_result(self.name, self.grid, best_i, best_j, best_rss, params, timer)
