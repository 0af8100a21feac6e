"""
Linear-equation solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np

from pylinalg.core.compute.elements import to_scalar
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    is_ill_conditioned,
    select_tolerance,
)
from pylinalg.core.result import Result
from pylinalg.core.validation import is_valid_index

if TYPE_CHECKING:
    from pylinalg.equations.system import LinearEquations


@dataclass(frozen=True)
class EquationParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends.
    """
    unknowns: tuple[Any, ...]


@dataclass
class EquationSolution:
    """
    User-facing linear-system results.

    Wraps the backend Result and provides accessors for the unknowns,
    the residuals of the original equations, and a comparison against
    a solution produced by another method.
    """
    _result: Result[EquationParams]
    _system: LinearEquations

    @property
    def unknowns(self) -> tuple[Any, ...]:
        return self._result.params.unknowns

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def determinant(self) -> Any | None:
        """Coefficient determinant, if the method computed one."""
        return self._result.info.get('determinant')

    def x(self, i: int) -> Any | None:
        """The i-th unknown (1-based), or None if out of range."""
        if not is_valid_index(i, len(self.unknowns)):
            return None
        return self.unknowns[i - 1]

    @property
    def residuals(self) -> list[Any]:
        """
        A·x - b for every equation.

        Exactly zero for exact element types, rounding-sized for floats.
        """
        a = self._system.coefficients().to_numpy()
        b = self._system.constants().to_numpy()[:, 0]
        x = np.array(self.unknowns, dtype=a.dtype)
        return [to_scalar(r) for r in np.dot(a, x) - b]

    def agrees_with(
        self,
        other: EquationSolution,
        tier: ToleranceTier | None = None,
    ) -> bool:
        """
        True if other holds the same unknowns within a tolerance tier.

        Args:
            other: Solution of the same system, usually by another method
            tier: Tolerance to compare with; chosen from the element
                dtype and conditioning when None (exact for object arrays)
        """
        if tier is None:
            tier = select_tolerance(
                self._system.dtype,
                is_ill_conditioned(self._system.coefficients().to_numpy()),
            )
        return tier.allclose(list(self.unknowns), list(other.unknowns))

    def summary(self) -> str:
        """Plain-text report of the solve."""
        lines = [
            "Linear System Solution",
            "=" * 40,
            f"Equations: {self._system.equations}",
            f"Unknowns: {self._system.unknowns}",
            f"Method: {self.method}",
        ]
        if self.determinant is not None:
            lines.append(f"Determinant: {self.determinant}")
        lines.append("-" * 40)
        for i, value in enumerate(self.unknowns, start=1):
            lines.append(f"  x[{i}] = {value}")
        lines.append("-" * 40)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EquationSolution(method={self.method!r}, "
            f"unknowns={self.unknowns!r})"
        )
