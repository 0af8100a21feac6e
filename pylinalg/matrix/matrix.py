"""
Matrix: a Table with arithmetic.

Operations whose preconditions fail return None instead of raising:

    A + B      None unless A and B are homotypic
    A * k      None when k == 0
    A * B      None unless A.columns == B.rows
    A.det()    None unless A is square
    A.inverse()  None unless A is square with a nonzero determinant

In-place forms (+=, *=) leave the matrix unchanged instead.
"""

from __future__ import annotations

from typing import Any
import logging

import numpy as np
from numpy.typing import DTypeLike

from pylinalg.core.compute.elements import one_of
from pylinalg.core.compute.elimination import back_substitute, forward_eliminate
from pylinalg.core.validation import is_valid_index
from pylinalg.determinant import Determinant
from pylinalg.matrix._adjoint import cofactor_array
from pylinalg.table import Table

logger = logging.getLogger(__name__)


class Matrix(Table):
    """
    Dense matrix with 1-based indices and column-major storage.

    Construction is the same as Table:
        Matrix()                  # 1x1 matrix holding 1
        Matrix(M, N, data)        # data is column-major
        Matrix.from_rows(rows)
        Matrix.identity(N)
    """

    @classmethod
    def identity(cls, order: int, *, dtype: DTypeLike = None) -> Matrix:
        """order x order identity matrix."""
        flat = [1 if i == j else 0 for j in range(order) for i in range(order)]
        return cls(order, order, flat, dtype=dtype)

    # === Arithmetic ===

    def __add__(self, other: Any) -> Matrix | None:
        if not isinstance(other, Table):
            return NotImplemented
        if not self.homotype(other):
            return None
        return type(self)._from_array(self._data + other._data)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Table):
            return NotImplemented
        if self.homotype(other):
            self._data = np.asfortranarray(self._data + other._data)
        return self

    def __sub__(self, other: Any) -> Matrix | None:
        if not isinstance(other, Table):
            return NotImplemented
        if not self.homotype(other):
            return None
        return type(self)._from_array(self._data - other._data)

    def __mul__(self, other: Any) -> Matrix | None:
        if isinstance(other, Table):
            return self._matmul(other)
        if isinstance(other, np.ndarray):
            return NotImplemented
        if other == 0:
            return None
        return type(self)._from_array(self._data * other)

    def __rmul__(self, other: Any) -> Matrix | None:
        if isinstance(other, (Table, np.ndarray)):
            return NotImplemented
        return self * other

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Table):
            result = self._matmul(other)
            if result is not None:
                self._data = result._data
            return self
        if isinstance(other, np.ndarray):
            return NotImplemented
        if other != 0:
            self._data = np.asfortranarray(self._data * other)
        return self

    def __matmul__(self, other: Any) -> Matrix | None:
        if not isinstance(other, Table):
            return NotImplemented
        return self._matmul(other)

    def _matmul(self, other: Table) -> Matrix | None:
        """Each cell (i, j) is row i of self dotted with column j of other."""
        if self.columns != other.rows:
            return None
        return type(self)._from_array(np.dot(self._data, other._data))

    # === Determinant, adjoint, inverse ===

    def det(self) -> Determinant | None:
        """Determinant built from this matrix's rows, or None if not square."""
        if not self.square():
            return None
        return Determinant._from_array(self._data)

    def adjoint(self, max_workers: int | None = None) -> Matrix | None:
        """
        Matrix of signed cofactors, with cofactor (i, j) stored at (i, j).

        The classical adjugate is the transpose of this matrix. Cells are
        evaluated concurrently; the call returns after all of them finish.

        Args:
            max_workers: Worker pool size, or None for the default

        Returns:
            Cofactor matrix, or None if the matrix is not square or has
            order 1
        """
        if not self.square() or self.rows == 1:
            return None
        return type(self)._from_array(cofactor_array(self.det(), max_workers))

    def inverse(self, max_workers: int | None = None) -> Matrix | None:
        """
        Inverse via adjugate / determinant.

        Returns:
            The inverse, or None if the matrix is not square or its
            determinant is exactly zero
        """
        snapshot = self.det()
        if snapshot is None:
            return None

        value = snapshot.general_calculate()
        if value == 0:
            logger.debug("inverse: determinant is zero for order %d", self.rows)
            return None

        if self.rows == 1:
            result = self.copy()
            result.set_element(1, 1, one_of(self._data) / value)
            return result

        return self.adjoint(max_workers).transpose() * (1 / value)

    # === Elementary operations ===

    def row_times(self, row: int, k: Any) -> None:
        """row <- k * row."""
        if not is_valid_index(row, self.rows):
            return
        self._data[row - 1, :] = self._data[row - 1, :] * k

    def column_times(self, column: int, k: Any) -> None:
        """column <- k * column."""
        if not is_valid_index(column, self.columns):
            return
        self._data[:, column - 1] = self._data[:, column - 1] * k

    def row_add_times_row(self, row_1: int, row_2: int, k: Any) -> None:
        """row_1 <- row_1 + k * row_2."""
        if not (is_valid_index(row_1, self.rows) and is_valid_index(row_2, self.rows)):
            return
        self._data[row_1 - 1, :] = self._data[row_1 - 1, :] + self._data[row_2 - 1, :] * k

    def column_add_times_column(self, column_1: int, column_2: int, k: Any) -> None:
        """column_1 <- column_1 + k * column_2."""
        if not (is_valid_index(column_1, self.columns) and is_valid_index(column_2, self.columns)):
            return
        self._data[:, column_1 - 1] = self._data[:, column_1 - 1] + self._data[:, column_2 - 1] * k

    def elimination(self) -> None:
        """
        Reduce in place to reduced row-echelon form.

        Pivots sit on the diagonal. Each nonzero pivot row is scaled to a
        leading 1 and the entries below and then above it are cleared.
        A single row or column is left unchanged.
        """
        if self.rows == 1 or self.columns == 1:
            return
        a = self.to_numpy()
        forward_eliminate(a, normalize=True)
        back_substitute(a)
        self._data = np.asfortranarray(a)
