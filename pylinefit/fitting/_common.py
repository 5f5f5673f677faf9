"""
Shared result construction for the grid-search backends.

Every grid backend reports the same search metadata so solutions look
identical regardless of where the surface was evaluated.
"""

from typing import Any

from pylinefit.core.result import Result
from pylinefit.core.compute.timing import Timer
from pylinefit.core.compute.grid import on_boundary
from pylinefit.fitting.design import ParameterGrid
from pylinefit.fitting.solution import LineParams


BOUNDARY_WARNING = "lies on the grid boundary"


def grid_result(
    backend_name: str,
    grid: ParameterGrid,
    i: int,
    j: int,
    min_rss: float,
    params: LineParams,
    timer: Timer,
) -> Result[LineParams]:
    """Wrap a grid-search winner at grid index (i, j) with its search metadata."""
    boundary = on_boundary(i, j, grid.shape)
    warnings: tuple[str, ...] = ()
    if boundary:
        warnings = (
            f"best pair (intercept={params.intercept:g}, slope={params.slope:g}) "
            f"{BOUNDARY_WARNING}; the least-squares line may be outside the grid",
        )

    info: dict[str, Any] = {
        'method': 'grid',
        'grid_index': (i, j),
        'grid_shape': grid.shape,
        'n_pairs': grid.n_pairs,
        'min_rss': min_rss,
        'on_boundary': boundary,
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=warnings,
    )
