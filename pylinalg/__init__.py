"""
PyLinalg: a small dense linear-algebra kernel for Python.

Tables, determinants, matrices and linear-equation systems over any
numeric element type, from float64 to exact Fractions.

Submodules:
    table: Column-major 2-D storage
    determinant: Permutation-expansion and elimination evaluation
    matrix: Arithmetic, adjoint, inverse, row reduction
    equations: Cramer's rule and inverse-matrix solvers
"""

import logging

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    InvalidDimension,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.core.sequence import add, scale, dot, cross, equal, proportional
from pylinalg.table import Table
from pylinalg.determinant import Determinant
from pylinalg.matrix import Matrix
from pylinalg.equations import LinearEquations, EquationSolution, solve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Types
    "Table",
    "Determinant",
    "Matrix",
    "LinearEquations",
    "EquationSolution",
    "solve",
    # Vector helpers
    "add",
    "scale",
    "dot",
    "cross",
    "equal",
    "proportional",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "InvalidDimension",
    "NumericalError",
    "SingularMatrixError",
]
