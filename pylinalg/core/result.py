"""
Generic result container for PyLinalg solves.

Every solve strategy returns its payload inside a Result so callers get
the same envelope (method name, timing, warnings) regardless of which
strategy produced the numbers.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (order, determinant, swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a linear-algebra computation.

    Type Parameters:
        P: The strategy-specific parameter payload type

    Attributes:
        params: Strategy-specific payload (unknowns, determinant values, ...)
        info: Structured metadata (order, coefficient determinant, ...)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the strategy that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EquationParams(unknowns=(1.0, 2.0)),
        ...     info={'order': 2, 'determinant': 7.0},
        ...     timing={'total_seconds': 0.001},
        ...     method='cramer'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
