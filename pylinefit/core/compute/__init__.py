"""
Shared compute infrastructure for pylinefit.

Domain backends live in {domain}/backends/; this package holds what
they share.

Submodules:
    device: Device selection for the grid search
    timing: Per-section backend timing
    tolerances: Precision tiers for comparing compute paths
    grid: Two-parameter grid iteration and RSS kernels
"""

from pylinefit.core.compute.device import DeviceInfo, select_device
from pylinefit.core.compute.timing import Timer
from pylinefit.core.compute.grid import (
    grid_product,
    rss,
    rss_surface,
    first_argmin,
    on_boundary,
)

__all__ = [
    "DeviceInfo",
    "select_device",
    "Timer",
    "grid_product",
    "rss",
    "rss_surface",
    "first_argmin",
    "on_boundary",
]
