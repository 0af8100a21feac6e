"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the table,
determinant, matrix and equations subpackages.

Key components:
    protocols: Element, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    sequence: Element-wise vector helpers
    compute: Timing, tolerances, permutation and elimination kernels
"""

from pylinalg.core.protocols import Element, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    InvalidDimension,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Element",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "InvalidDimension",
    "NumericalError",
    "SingularMatrixError",
]
