"""
Line-fitting solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinefit.core.result import Result

if TYPE_CHECKING:
    from pylinefit.fitting.design import LineDesign


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for a fitted line.

    This is the immutable data computed by backends.
    """
    intercept: float
    slope: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float


def line_params(design: 'LineDesign', intercept: float, slope: float) -> LineParams:
    """Evaluate a candidate line on the design's sample."""
    fitted_values = intercept + slope * design.x
    residuals = design.y - fitted_values
    return LineParams(
        intercept=float(intercept),
        slope=float(slope),
        fitted_values=fitted_values,
        residuals=residuals,
        rss=float(np.sum(residuals * residuals)),
        tss=design.tss(),
    )


@dataclass
class LineSolution:
    """
    User-facing line-fit results.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[LineParams]
    _design: 'LineDesign'

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def params(self) -> tuple[float, float]:
        """(intercept, slope)."""
        return self.intercept, self.slope

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at new x values."""
        x = np.asarray(x, dtype=np.float64)
        return self.intercept + self.slope * x

    def summary(self) -> str:
        """Generate a printable summary block."""
        title = {
            'normal': "Least Squares Line (normal equations)",
            'grid': "Least Squares Line (grid search)",
        }.get(self.method, "Least Squares Line")
        lines = [
            title,
            "=" * 60,
            f"Observations: {self.n}",
            f"Intercept: {self.intercept:14.6f}",
            f"Slope:     {self.slope:14.6f}",
            f"RSS: {self.rss:.6f}",
            f"R-squared: {self.r_squared:.6f}",
        ]

        if self.method == 'grid':
            n_b0, n_b1 = self.info['grid_shape']
            i, j = self.info['grid_index']
            lines.append(
                f"Grid: {n_b0} x {n_b1} candidates, best at index ({i}, {j})"
                + (" [on boundary]" if self.info['on_boundary'] else "")
            )

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(method={self.method!r}, n={self.n}, "
            f"intercept={self.intercept:.4f}, slope={self.slope:.4f}, rss={self.rss:.4f})"
        )
