"""
Generic result container for all pylinefit computations.

The Result class provides a standardized envelope that every backend
returns. Domains define their own parameter payloads; the envelope
carries the shared metadata (method info, timing, warnings).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (grid indices, boundary flags)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a line fit.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (intercept, slope, rss, ...)
        info: Structured metadata (method, grid indices, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=LineParams(...),
        ...     info={'method': 'normal'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_normal'
        ... )

        >>> # Search method
        >>> Result(
        ...     params=LineParams(...),
        ...     info={'method': 'grid', 'n_pairs': 90000, 'on_boundary': False},
        ...     timing={'total_seconds': 0.02, 'surface': 0.019},
        ...     backend_name='cpu_grid'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
