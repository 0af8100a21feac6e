"""
Cramer's-rule backend for linear systems.

    x_i = det(A_i) / det(A)

where A_i is the coefficient determinant with column i replaced by the
constants. Every determinant is evaluated by permutation expansion, so
this backend doubles as the exact reference for small systems.
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


class CramerBackend:
    """
    Solve by Cramer's rule.

    Implements the Backend protocol for LinearEquations -> EquationParams.
    """

    @property
    def name(self) -> str:
        return 'cramer'

    def solve(self, system: LinearEquations) -> Result[EquationParams] | None:
        """
        Solve a square system by Cramer's rule.

        Algorithm:
            1. Evaluate the coefficient determinant D
            2. For each unknown i, substitute the constants into column i
               (restoring column i-1 first) and evaluate D_i
            3. x_i = D_i / D

        Args:
            system: Augmented linear system

        Returns:
            Result containing EquationParams, or None if the coefficient
            table is not square or D is exactly zero
        """
        n = system.unknowns
        if n < 1 or system.equations != n:
            logger.debug(
                "cramer: abandoned, %d equations for %d unknowns",
                system.equations, n,
            )
            return None

        timer = Timer()
        timer.start()

        with timer.section('coefficient_determinant'):
            base = system.coefficients().det()
            denominator = base.general_calculate()

        if denominator == 0:
            logger.debug("cramer: abandoned, coefficient determinant is zero")
            return None

        constants = system.constants().get_column(1)
        work = base.copy()
        unknowns: list[Any] = []

        with timer.section('substitution'):
            for i in range(1, n + 1):
                if i > 1:
                    work.set_column(i - 1, base.get_column(i - 1))
                work.set_column(i, constants)
                unknowns.append(work.general_calculate() / denominator)

        with timer.section('conditioning'):
            warnings = conditioning_warnings(base.to_numpy())

        timer.stop()

        info: dict[str, Any] = {
            'order': n,
            'determinant': denominator,
        }

        return Result(
            params=EquationParams(unknowns=tuple(unknowns)),
            info=info,
            timing=timer.result(),
            method=self.name,
            warnings=warnings,
        )
