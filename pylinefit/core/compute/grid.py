"""
Two-parameter grid iteration and residual-sum-of-squares kernels.

The grid search enumerates every (intercept, slope) pair of two ordered
candidate sequences in row-major order: intercept outer, slope inner.
Every kernel here preserves that order so "first minimum" means the
same pair whether the surface is walked pair by pair or computed in bulk.
"""

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray


def grid_product(
    outer: Sequence[float] | NDArray[np.floating[Any]],
    inner: Sequence[float] | NDArray[np.floating[Any]],
) -> Iterator[tuple[int, int, float, float]]:
    """
    Cartesian product of two ordered sequences, with indices.

    Yields (i, j, outer[i], inner[j]) for i over outer, j over inner,
    the inner index varying fastest.

    Example:
        >>> list(grid_product([0.0, 1.0], [5.0, 6.0]))
        [(0, 0, 0.0, 5.0), (0, 1, 0.0, 6.0), (1, 0, 1.0, 5.0), (1, 1, 1.0, 6.0)]
    """
    for i, a in enumerate(outer):
        for j, b in enumerate(inner):
            yield i, j, float(a), float(b)


def rss(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    intercept: float,
    slope: float,
) -> float:
    """Residual sum of squares of the line intercept + slope·x."""
    residuals = y - (intercept + slope * x)
    return float(np.sum(residuals * residuals))


def rss_surface(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    intercepts: NDArray[np.floating[Any]],
    slopes: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    RSS for every (intercept, slope) pair.

    Evaluated one intercept row at a time so peak memory is
    O(len(slopes)·n) rather than O(len(intercepts)·len(slopes)·n).

    Returns:
        Array of shape (len(intercepts), len(slopes)); entry [i, j] is
        the RSS of intercepts[i] + slopes[j]·x.
    """
    surface = np.empty((intercepts.shape[0], slopes.shape[0]), dtype=np.float64)
    slope_x = slopes[:, np.newaxis] * x[np.newaxis, :]
    for i, b0 in enumerate(intercepts):
        residuals = y[np.newaxis, :] - (b0 + slope_x)
        surface[i] = np.sum(residuals * residuals, axis=1)
    return surface


def first_argmin(surface: NDArray[np.floating[Any]]) -> tuple[int, int]:
    """
    Index of the first minimum of a 2D surface in row-major order.

    np.argmin returns the first occurrence, so ties resolve to the
    smallest row, then the smallest column.
    """
    flat = int(np.argmin(surface))
    i, j = np.unravel_index(flat, surface.shape)
    return int(i), int(j)


def on_boundary(i: int, j: int, shape: tuple[int, int]) -> bool:
    """True if (i, j) lies on the edge of a grid of the given shape."""
    n_rows, n_cols = shape
    row_edge = n_rows > 1 and i in (0, n_rows - 1)
    col_edge = n_cols > 1 and j in (0, n_cols - 1)
    return row_edge or col_edge
