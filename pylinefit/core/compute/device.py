"""
Compute device selection for the grid search.

torch is optional: without it, or without a CUDA/MPS device, every
choice except an explicit GPU request resolves to the CPU.
"""

from dataclasses import dataclass
from typing import Literal


DeviceType = Literal['cpu', 'cuda', 'mps']


@dataclass(frozen=True)
class DeviceInfo:
    """
    Where a backend runs.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: CUDA ordinal (None for CPU and MPS)
        name: Human-readable device name
    """
    device_type: DeviceType
    device_index: int | None = None
    name: str = 'CPU'

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'

    @property
    def supports_fp64(self) -> bool:
        """MPS has no float64 kernels."""
        return self.device_type != 'mps'


CPU = DeviceInfo('cpu')


def detect_gpu() -> DeviceInfo | None:
    """The best available GPU (CUDA before MPS), or None."""
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo('cuda', idx, torch.cuda.get_device_name(idx))
    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo('mps', None, 'Apple Silicon GPU')
    return None


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Resolve a device preference.

    Raises:
        RuntimeError: If 'gpu' is requested and no GPU is available
    """
    if prefer == 'cpu':
        return CPU
    gpu = detect_gpu()
    if gpu is not None:
        return gpu
    if prefer == 'gpu':
        raise RuntimeError(
            "GPU requested but none available; install PyTorch with CUDA or MPS "
            "support, or use backend='cpu'"
        )
    return CPU
