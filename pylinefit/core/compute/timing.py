"""
Per-section wall-clock timing for backends.

Every backend reports a timing dict with 'total_seconds' plus one entry
per named section, e.g. {'total_seconds': 0.02, 'surface': 0.019}.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    With sync_cuda=True every boundary waits for queued CUDA kernels, so
    GPU work is charged to the section that launched it.
    """

    def __init__(self, sync_cuda: bool = False):
        self._sync_cuda = sync_cuda
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._sync_cuda:
            import torch
            torch.cuda.synchronize()
        return time.perf_counter()

    def start(self) -> None:
        self._started = self._now()

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        begin = self._now()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + self._now() - begin

    def result(self) -> dict[str, float]:
        """
        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
