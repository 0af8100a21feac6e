"""
Linear-equation systems.

Public API:
    solve(augmented, ...) -> EquationSolution
    LinearEquations       augmented system with calculate() / calculate_inverse()

Example:
    >>> from pylinalg.equations import solve
    >>> result = solve([[1, 2, 3, -1], [-1, 2, -1, -3], [-5, 2, 1, 0]])
    >>> print(result.summary())
"""

from pylinalg.equations.backends import CramerBackend, InverseBackend
from pylinalg.equations.solution import EquationParams, EquationSolution
from pylinalg.equations.solvers import solve
from pylinalg.equations.system import LinearEquations

__all__ = [
    "solve",
    "LinearEquations",
    "EquationSolution",
    "EquationParams",
    "CramerBackend",
    "InverseBackend",
]
