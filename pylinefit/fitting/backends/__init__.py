"""
Line-fitting backends.

Available backends:
    CPUNormalEquationsBackend: closed-form least squares (reference)
    CPUGridSearchBackend: NumPy grid search
    CPULoopGridSearchBackend: pair-by-pair grid search
    GPUGridSearchBackend: PyTorch grid search (import from .gpu; needs torch)
"""

from pylinefit.fitting.backends.cpu import (
    CPUNormalEquationsBackend,
    CPUGridSearchBackend,
    CPULoopGridSearchBackend,
)

__all__ = [
    "CPUNormalEquationsBackend",
    "CPUGridSearchBackend",
    "CPULoopGridSearchBackend",
]
