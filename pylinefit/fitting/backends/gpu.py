"""
GPU backend for the grid search using PyTorch.

Performance path for large grids, validated against the CPU reference.
Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).

CUDA computes in float64 and reproduces the CPU winner; MPS has no
float64, so it runs in float32 and near-ties may resolve to a
neighbouring grid point.
"""

from __future__ import annotations

from pylinefit.core.result import Result
from pylinefit.core.compute.timing import Timer
from pylinefit.core.compute.device import DeviceInfo
from pylinefit.fitting.design import LineDesign, ParameterGrid
from pylinefit.fitting.solution import LineParams, line_params
from pylinefit.fitting._common import grid_result


class GPUGridSearchBackend:
    """
    Grid search with the RSS surface evaluated on a PyTorch device.

    Intercept rows are processed in chunks so the (rows, slopes, n)
    residual tensor stays under max_elements.
    """

    def __init__(
        self,
        grid: ParameterGrid,
        device: DeviceInfo | None = None,
        max_elements: int = 2**26,
    ):
        import torch

        self.grid = grid
        self.max_elements = max_elements

        if device is not None:
            if device.device_type == 'cuda':
                self.device = torch.device(f'cuda:{device.device_index or 0}')
                self.dtype = torch.float64
            elif device.device_type == 'mps':
                self.device = torch.device('mps')
                self.dtype = torch.float32
            else:
                raise ValueError(f"GPUGridSearchBackend requires GPU device, got {device.device_type}")
        else:
            if torch.cuda.is_available():
                self.device = torch.device('cuda')
                self.dtype = torch.float64
            elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
                self.device = torch.device('mps')
                self.dtype = torch.float32
            else:
                raise RuntimeError(
                    "No GPU available. Use backend='cpu' instead."
                )

    @property
    def name(self) -> str:
        precision = 'fp64' if self.dtype == _torch().float64 else 'fp32'
        return f'gpu_grid_{precision}'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        torch = _torch()

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        with timer.section('transfer'):
            x = torch.as_tensor(design.x, dtype=self.dtype, device=self.device)
            y = torch.as_tensor(design.y, dtype=self.dtype, device=self.device)
            b0 = torch.as_tensor(self.grid.intercepts, dtype=self.dtype, device=self.device)
            b1 = torch.as_tensor(self.grid.slopes, dtype=self.dtype, device=self.device)

        n_b0, n_b1 = self.grid.shape
        rows_per_chunk = max(1, self.max_elements // max(1, n_b1 * design.n))

        with timer.section('surface'):
            slope_x = b1[:, None] * x[None, :]
            chunks = []
            for start in range(0, n_b0, rows_per_chunk):
                rows = b0[start:start + rows_per_chunk]
                residuals = y[None, None, :] - (rows[:, None, None] + slope_x[None, :, :])
                chunks.append((residuals * residuals).sum(dim=2))
            surface = torch.cat(chunks, dim=0)

        with timer.section('argmin'):
            # torch.argmin does not promise the first index on ties
            min_value = surface.min()
            flat = int(torch.nonzero(surface.reshape(-1) == min_value)[0, 0].item())
            i, j = divmod(flat, n_b1)

        with timer.section('residuals'):
            params = line_params(design, self.grid.intercepts[i], self.grid.slopes[j])

        timer.stop()

        return grid_result(
            self.name, self.grid, i, j, float(min_value.item()), params, timer
        )


def _torch():
    import torch
    return torch
