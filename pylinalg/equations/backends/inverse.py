"""
Inverse-matrix backend for linear systems.

    x = A⁻¹ b

The inverse is built from the adjoint, whose cofactors are evaluated on
a bounded worker pool.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import logging

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import conditioning_warnings
from pylinalg.core.result import Result
from pylinalg.equations.solution import EquationParams

if TYPE_CHECKING:
    from pylinalg.equations.system import LinearEquations

logger = logging.getLogger(__name__)


class InverseBackend:
    """
    Solve by multiplying the constants with the inverse coefficient matrix.

    Implements the Backend protocol for LinearEquations -> EquationParams.
    """

    def __init__(self, max_workers: int | None = None):
        self.max_workers = max_workers

    @property
    def name(self) -> str:
        return 'inverse'

    def solve(self, system: LinearEquations) -> Result[EquationParams] | None:
        """
        Solve a square system through the inverse matrix.

        Args:
            system: Augmented linear system

        Returns:
            Result containing EquationParams, or None if the coefficient
            matrix is not invertible
        """
        n = system.unknowns
        if n < 1:
            logger.debug("inverse: abandoned, no unknowns")
            return None

        timer = Timer()
        timer.start()

        coefficients = system.coefficients()
        with timer.section('inverse'):
            inverse = coefficients.inverse(self.max_workers)

        if inverse is None:
            logger.debug(
                "inverse: abandoned, %dx%d coefficient matrix is not invertible",
                system.equations, n,
            )
            return None

        with timer.section('multiply'):
            column = inverse * system.constants()

        with timer.section('conditioning'):
            warnings = conditioning_warnings(coefficients.to_numpy())

        timer.stop()

        info: dict[str, Any] = {
            'order': n,
        }

        return Result(
            params=EquationParams(unknowns=tuple(column.get_column(1))),
            info=info,
            timing=timer.result(),
            method=self.name,
            warnings=warnings,
        )
