"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from pylinalg.core.exceptions import SingularMatrixError, ValidationError
from pylinalg.core.protocols import Backend
from pylinalg.core.validation import check_positive_int
from pylinalg.equations.backends import CramerBackend, InverseBackend
from pylinalg.equations.solution import EquationParams, EquationSolution
from pylinalg.equations.system import LinearEquations
from pylinalg.table import Table


# Type alias for method selection
MethodChoice = Literal['cramer', 'inverse']


def solve(
    augmented: LinearEquations | Table | Sequence[Sequence[Any]],
    *,
    method: MethodChoice = 'cramer',
    max_workers: int | None = None,
) -> EquationSolution:
    """
    Solve a square linear system.

    Unlike LinearEquations.calculate(), which quietly leaves the solution
    empty, this entry point raises when the system cannot be solved.

    Args:
        augmented: Augmented system: a LinearEquations, a Table whose last
            column holds the constants, or row-major nested sequences
        method: Solve strategy:
            - 'cramer': Cramer's rule on permutation-expanded determinants
            - 'inverse': constants times the adjoint-based inverse
        max_workers: Pool size for the adjoint ('inverse' only), or None
            for the default

    Returns:
        EquationSolution with unknowns, residuals and timing

    Raises:
        ValidationError: If the method or worker count is invalid, or the
            input is not numeric
        DimensionError: If nested rows have inconsistent lengths
        SingularMatrixError: If the coefficients are not square or have
            a zero determinant

    Example:
        >>> from pylinalg.equations import solve
        >>> result = solve([[3, 2, 7], [-2, 1, 0]])
        >>> result.unknowns
        (1.0, 2.0)
    """
    # === Input Validation ===
    if max_workers is not None:
        max_workers = check_positive_int(max_workers, 'max_workers')
    backend_impl = _get_backend(method, max_workers)
    system = _as_system(augmented)

    # === Solve ===
    result = backend_impl.solve(system)
    if result is None:
        raise SingularMatrixError(
            f"cannot solve {system.equations} equations in {system.unknowns} "
            f"unknowns with method {method!r}: coefficients are not square "
            f"or their determinant is zero",
            matrix_name='coefficients',
            method=method,
        )

    # === Wrap and Return ===
    return EquationSolution(_result=result, _system=system)


def _as_system(augmented: Any) -> LinearEquations:
    """Copy or build the system to solve; the caller's object is not touched."""
    if isinstance(augmented, LinearEquations):
        return LinearEquations.from_table(augmented.to_table())
    if isinstance(augmented, Table):
        return LinearEquations.from_table(augmented)
    return LinearEquations.from_rows(augmented)


def _get_backend(
    choice: str,
    max_workers: int | None,
) -> Backend[LinearEquations, EquationParams]:
    """
    Instantiate the backend for a method name.

    Raises:
        ValidationError: If the method is unknown
    """
    if choice == 'cramer':
        return CramerBackend()
    if choice == 'inverse':
        return InverseBackend(max_workers)
    raise ValidationError(
        f"method: unknown solve method {choice!r}, expected 'cramer' or 'inverse'"
    )
