"""
Augmented linear-equation system.

An M x N table whose first N-1 columns are coefficients and whose last
column holds the constants. Solving fills a solution vector of N-1
unknowns; before that the vector is empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, IO

import numpy as np
from numpy.typing import DTypeLike

from pylinalg.core.result import Result
from pylinalg.core.validation import is_valid_index
from pylinalg.equations.backends import CramerBackend, InverseBackend
from pylinalg.equations.solution import EquationParams
from pylinalg.matrix import Matrix
from pylinalg.table import Table


class LinearEquations:
    """
    System of M linear equations in N-1 unknowns.

    Construction:
        LinearEquations()                     # 1 * x = 0
        LinearEquations(M, N, data)           # data is column-major
        LinearEquations.from_rows(rows)       # row-major, last column = constants
        LinearEquations.from_table(table)

    Both solve methods leave the receiver's equations untouched. A solve
    that cannot proceed clears the solution vector.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        rows: int | None = None,
        columns: int | None = None,
        data: Iterable[Any] = (),
        *,
        dtype: DTypeLike = None,
    ):
        if rows is None and columns is None:
            self._table = Table(1, 2, [1, 0], dtype=dtype)
        else:
            self._table = Table(rows, columns, data, dtype=dtype)
        self._x: tuple[Any, ...] = ()
        self._last_result: Result[EquationParams] | None = None

    @classmethod
    def from_table(cls, table: Table) -> LinearEquations:
        """Build from an augmented table. The table is copied."""
        obj = cls.__new__(cls)
        obj._table = Table._from_array(table.to_numpy())
        obj._x = ()
        obj._last_result = None
        return obj

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        *,
        dtype: DTypeLike = None,
    ) -> LinearEquations:
        """Build from row-major equations, each ending with its constant."""
        return cls.from_table(Table.from_rows(rows, dtype=dtype))

    # === Shape ===

    @property
    def equations(self) -> int:
        """Number of equations (M)."""
        return self._table.rows

    @property
    def columns(self) -> int:
        """Number of augmented columns (N)."""
        return self._table.columns

    @property
    def unknowns(self) -> int:
        """Number of unknowns (N-1)."""
        return self._table.columns - 1

    @property
    def dtype(self) -> np.dtype:
        return self._table.dtype

    # === Equations ===

    def get_element(self, row: int, column: int) -> Any | None:
        return self._table.get_element(row, column)

    def set_element(self, row: int, column: int, value: Any) -> None:
        """Set one entry of the augmented table. Clears any solution."""
        if self._table.get_element(row, column) is None:
            return
        self._table.set_element(row, column, value)
        self._clear()

    def get_row(self, row: int) -> list[Any] | None:
        return self._table.get_row(row)

    def set_row(self, row: int, values: Sequence[Any]) -> None:
        """Replace one equation. Clears any solution."""
        if self._table.get_row(row) is None or len(values) != self.columns:
            return
        self._table.set_row(row, values)
        self._clear()

    def to_table(self) -> Table:
        """Copy of the augmented table."""
        return self._table.copy()

    def coefficients(self) -> Matrix | None:
        """M x (N-1) coefficient matrix, or None if there are no unknowns."""
        if self.unknowns < 1:
            return None
        return Matrix._from_array(self._table.to_numpy()[:, :-1])

    def constants(self) -> Matrix:
        """M x 1 matrix of the constants."""
        return Matrix._from_array(self._table.to_numpy()[:, -1:])

    # === Solving ===

    def calculate(self) -> None:
        """
        Solve by Cramer's rule.

        No-op for a single equation. The solution is cleared when the
        coefficient table is not square or its determinant is zero.
        """
        if self.equations <= 1:
            return
        self._store(CramerBackend().solve(self))

    def calculate_inverse(self, max_workers: int | None = None) -> None:
        """
        Solve through the inverse coefficient matrix.

        No-op for a single equation. The solution is cleared when the
        coefficient matrix is not invertible.

        Args:
            max_workers: Pool size for the adjoint, or None for the default
        """
        if self.equations <= 1:
            return
        self._store(InverseBackend(max_workers).solve(self))

    def _store(self, result: Result[EquationParams] | None) -> None:
        if result is None:
            self._clear()
            return
        self._x = result.params.unknowns
        self._last_result = result

    def _clear(self) -> None:
        self._x = ()
        self._last_result = None

    # === Solution ===

    def x_n(self, i: int) -> Any | None:
        """The i-th unknown (1-based), or None if unsolved or out of range."""
        if not is_valid_index(i, len(self._x)):
            return None
        return self._x[i - 1]

    @property
    def solution(self) -> tuple[Any, ...]:
        """All unknowns in order; empty until a solve succeeds."""
        return self._x

    @property
    def last_result(self) -> Result[EquationParams] | None:
        """Result envelope of the last successful solve."""
        return self._last_result

    # === Comparison and output ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearEquations):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        return (
            f"LinearEquations({self.equations}, {self.columns}, "
            f"{self._table.flat()!r})"
        )

    def to_text(self) -> str:
        return self._table.to_text()

    def __str__(self) -> str:
        return self.to_text()

    def dump(self, stream: IO[str] | None = None) -> None:
        self._table.dump(stream)
