"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError so callers can catch any
library-specific error in one place.

Most operations in this library never raise: out-of-range indices and
shape mismatches produce None (queries) or leave the receiver unchanged
(mutations). Exceptions are reserved for inputs from which no valid
object can be built at all:
    - a table with a zero row or column count
    - element data that is not numeric
    - an explicit solve request that the chosen method cannot satisfy
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.
    """
    pass


class InvalidDimension(DimensionError):
    """
    A table was requested with a zero row or column count.

    No valid table can exist with a zero dimension, so this is the one
    construction failure the table layer reports loudly.

    Attributes:
        rows: Requested row count
        columns: Requested column count
    """

    def __init__(self, message: str, rows: int, columns: int):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by the public solve() entry point when the coefficient matrix
    of a linear system has a zero determinant, or is not square.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant value, if it was computed
        method: Solve method that gave up
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: object | None = None,
        method: str | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.method = method
