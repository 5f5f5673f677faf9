"""
Solver dispatch for line fitting.

This module provides the public fitting functions and backend selection:

    fit_normal_equations(x, y)          closed-form least squares
    fit_grid_search(x, y, grid)         brute-force search over a grid
    fit(x, y, method=...)               either, by name
"""

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pylinefit.core.compute.device import select_device
from pylinefit.fitting.design import LineDesign, ParameterGrid
from pylinefit.fitting.solution import LineSolution
from pylinefit.fitting.backends.cpu import (
    CPUNormalEquationsBackend,
    CPUGridSearchBackend,
    CPULoopGridSearchBackend,
)


BackendChoice = Literal['auto', 'cpu', 'cpu_loop', 'gpu']
MethodChoice = Literal['normal', 'grid']


def fit_normal_equations(x: ArrayLike | LineDesign, y: ArrayLike | None = None) -> LineSolution:
    """
    Fit a line by the closed-form least-squares formulas.

        slope = Σ(x - x̄)(y - ȳ) / Σ(x - x̄)²
        intercept = ȳ - slope·x̄

    Args:
        x: Predictor values, or a prebuilt LineDesign (then y is omitted).
        y: Response values, same length as x.

    Returns:
        LineSolution with intercept, slope, RSS and residuals.

    Raises:
        ValidationError: If x or y is empty, non-numeric or non-finite
        DimensionError: If x and y are not 1D or differ in length
        DegenerateInputError: If every x value is identical

    Example:
        >>> sol = fit_normal_equations([1, 2, 3], [2, 4, 6])
        >>> sol.intercept, sol.slope
        (0.0, 2.0)
    """
    design = _ensure_design(x, y)
    result = CPUNormalEquationsBackend().solve(design)
    return LineSolution(_result=result, _design=design)


def fit_grid_search(
    x: ArrayLike | LineDesign,
    y: ArrayLike | None = None,
    grid: ParameterGrid | ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> LineSolution:
    """
    Fit a line by exhaustive search over a grid of candidate parameters.

    Every intercept candidate (outer) is paired with every slope
    candidate (inner); the pair with the smallest residual sum of squares
    wins, the first such pair in that order on ties. The answer is the
    best point of the grid, not the continuous least-squares optimum.

    Args:
        x: Predictor values, or a prebuilt LineDesign (then y is None).
        y: Response values, same length as x.
        grid: A ParameterGrid, or a sequence of candidates used for both
            intercept and slope. None uses 300 points on [-10, 10].
        backend:
            - 'auto': GPU if a float64-capable GPU is present, else 'cpu'
            - 'cpu': NumPy, surface computed one intercept row at a time
            - 'cpu_loop': pure pair-by-pair enumeration (reference)
            - 'gpu': PyTorch on CUDA or MPS

    Returns:
        LineSolution; info holds 'grid_index', 'grid_shape' and
        'on_boundary'.

    Raises:
        ValidationError: If the grid is empty or the sample invalid
        DimensionError: If x and y are not 1D or differ in length

    Warns:
        UserWarning: If the winner lies on the edge of the grid.
    """
    design = _ensure_design(x, y)
    param_grid = ParameterGrid.coerce(grid)
    backend_impl = _get_grid_backend(backend, param_grid)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, UserWarning, stacklevel=2)

    return LineSolution(_result=result, _design=design)


def fit(
    x: ArrayLike | LineDesign,
    y: ArrayLike | None = None,
    *,
    method: MethodChoice = 'normal',
    grid: ParameterGrid | ArrayLike | None = None,
    backend: BackendChoice = 'auto',
) -> LineSolution:
    """
    Fit a least-squares line with the named method.

    Args:
        x, y: Sample, or a LineDesign as x.
        method: 'normal' (closed form) or 'grid' (grid search).
        grid: Candidate grid, used by method='grid' only.
        backend: Backend choice, see fit_grid_search. The closed form
            only runs on 'auto' or 'cpu'.

    Raises:
        ValueError: If method or backend is unknown for the method
    """
    if method == 'normal':
        if backend not in ('auto', 'cpu'):
            raise ValueError(f"Backend {backend!r} not available for method 'normal'")
        if grid is not None:
            raise ValueError("grid is only used by method='grid'")
        return fit_normal_equations(x, y)
    elif method == 'grid':
        return fit_grid_search(x, y, grid, backend=backend)
    else:
        raise ValueError(f"Unknown method: {method!r}")


def _ensure_design(x: ArrayLike | LineDesign, y: ArrayLike | None) -> LineDesign:
    """Convert raw arrays to LineDesign if needed."""
    if isinstance(x, LineDesign):
        if y is not None:
            raise ValueError("y must be None when x is a LineDesign")
        return x
    if y is None:
        raise ValueError("y required when x is not a LineDesign")
    return LineDesign.from_arrays(x, y)


def _get_grid_backend(choice: BackendChoice, grid: ParameterGrid):
    """
    Select and instantiate the grid-search backend.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'auto':
        device = select_device('auto')
        if device.is_gpu and device.supports_fp64:
            from pylinefit.fitting.backends.gpu import GPUGridSearchBackend
            return GPUGridSearchBackend(grid, device=device)
        return CPUGridSearchBackend(grid)

    elif choice == 'cpu':
        return CPUGridSearchBackend(grid)

    elif choice == 'cpu_loop':
        return CPULoopGridSearchBackend(grid)

    elif choice == 'gpu':
        device = select_device('gpu')
        from pylinefit.fitting.backends.gpu import GPUGridSearchBackend
        return GPUGridSearchBackend(grid, device=device)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
