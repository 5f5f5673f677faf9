"""
How closely a grid-search backend must reproduce the CPU reference.

The GPU tests compare minimum RSS values with the tier for the backend
that produced them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    rtol: float
    atol: float
    name: str


CPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='cpu_fp64')
GPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='gpu_fp64')
# float32 accumulation over n residuals
GPU_FP32 = ToleranceTier(rtol=1e-4, atol=1e-5, name='gpu_fp32')


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Tier for a backend name such as 'cpu_grid' or 'gpu_grid_fp32'."""
    if not backend_name.startswith('gpu'):
        return CPU_FP64
    return GPU_FP64 if backend_name.endswith('fp64') else GPU_FP32
