"""
Square determinant with two independent evaluation strategies.

    general_calculate()      permutation expansion, O(N! * N)
    elimination_calculate()  Gaussian elimination, O(N^3)

Both must agree up to rounding; the first is the reference, the second
is the one to use beyond order 6 or so.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any, IO
import operator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinalg.core.compute.elements import one_of, to_scalar
from pylinalg.core.compute.elimination import forward_eliminate
from pylinalg.core.compute.permutation import Less
from pylinalg.core.sequence import proportional
from pylinalg.determinant._leibniz import leibniz
from pylinalg.table import Table


class Determinant:
    """
    Determinant of order N, stored in an N x N table.

    Construction:
        Determinant()                  # order 1, holding 1
        Determinant(N, data)           # data is column-major, padded/truncated
        Determinant(N, data, dtype=object)

    Element, row and column access outside [1, N] returns None; setters
    ignore it.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        order: int | None = None,
        data: Iterable[Any] = (),
        *,
        dtype: DTypeLike = None,
    ):
        if order is None:
            self._table = Table()
        else:
            self._table = Table(order, order, data, dtype=dtype)

    @classmethod
    def _from_array(cls, array: NDArray[Any]) -> Determinant:
        obj = cls.__new__(cls)
        obj._table = Table._from_array(array)
        return obj

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        *,
        dtype: DTypeLike = None,
    ) -> Determinant | None:
        """Build from row-major nested sequences; None if they are not square."""
        table = Table.from_rows(rows, dtype=dtype)
        if not table.square():
            return None
        return cls._from_array(table.to_numpy())

    # === Order ===

    @property
    def order(self) -> int:
        return self._table.rows

    def set_order(self, order: int) -> None:
        """Resize to order x order, truncating or zero-padding."""
        self._table.set_rows(order)
        self._table.set_columns(order)

    @property
    def dtype(self) -> np.dtype:
        return self._table.dtype

    # === Elements (delegated to the table) ===

    def get_element(self, row: int, column: int) -> Any | None:
        return self._table.get_element(row, column)

    def set_element(self, row: int, column: int, value: Any) -> None:
        self._table.set_element(row, column, value)

    def get_row(self, row: int) -> list[Any] | None:
        return self._table.get_row(row)

    def set_row(self, row: int, values: Sequence[Any]) -> None:
        self._table.set_row(row, values)

    def get_column(self, column: int) -> list[Any] | None:
        return self._table.get_column(column)

    def set_column(self, column: int, values: Sequence[Any]) -> None:
        self._table.set_column(column, values)

    def swap_row(self, i: int, j: int) -> None:
        self._table.swap_row(i, j)

    def swap_column(self, i: int, j: int) -> None:
        self._table.swap_column(i, j)

    # === Derived determinants ===

    def _in_range(self, i: int, j: int) -> bool:
        return (
            self.get_element(i, j) is not None
            and self.order > 1
        )

    def minor(self, i: int, j: int) -> Determinant | None:
        """
        Order N-1 determinant with row i and column j removed.

        None if i or j is outside [1, N], or if N == 1.
        """
        if not self._in_range(i, j):
            return None
        a = self._table.to_numpy()
        a = np.delete(np.delete(a, i - 1, axis=0), j - 1, axis=1)
        return type(self)._from_array(a)

    def cofactor(self, i: int, j: int) -> Determinant | None:
        """
        minor(i, j) with every entry negated when i + j is odd.

        Negating all N-1 rows scales the value by (-1)^(N-1); use
        cofactor_value() for the signed scalar cofactor.
        """
        result = self.minor(i, j)
        if result is None or (i + j) % 2 == 0:
            return result
        return type(self)._from_array(-result._table.to_numpy())

    def cofactor_value(self, i: int, j: int) -> Any | None:
        """(-1)^(i+j) * minor(i, j).general_calculate(), or None."""
        result = self.minor(i, j)
        if result is None:
            return None
        value = result.general_calculate()
        return -value if (i + j) % 2 else value

    def transpose(self) -> Determinant:
        return type(self)._from_array(self._table.to_numpy().T)

    def copy(self) -> Determinant:
        return type(self)._from_array(self._table.to_numpy())

    def __copy__(self) -> Determinant:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Determinant:
        return self.copy()

    def to_table(self) -> Table:
        return self._table.copy()

    def to_numpy(self) -> NDArray[Any]:
        return self._table.to_numpy()

    # === Evaluation ===

    def general_calculate(self, less: Less = operator.lt) -> Any:
        """
        Evaluate by permutation expansion.

        Args:
            less: Total order for counting inversions (default: <)
        """
        return leibniz(self._table.to_numpy(), less)

    def elimination(self) -> int:
        """
        Reduce this determinant to upper-triangular form in place.

        Zero pivots are replaced by swapping in the first row below with
        a nonzero entry in the pivot column; when no such row exists the
        pivot stays zero.

        Returns:
            Number of row swaps performed (each flips the sign)
        """
        a = self._table.to_numpy()
        swaps = forward_eliminate(a)
        self._table = Table._from_array(a)
        return swaps

    def elimination_calculate(self) -> Any:
        """Evaluate by elimination on a copy; self is not modified."""
        if self.order == 1:
            return self.get_element(1, 1)

        work = self.copy()
        swaps = work.elimination()

        a = work._table.to_numpy()
        result = one_of(a)
        for k in range(self.order):
            result = result * a[k, k]
        if swaps % 2:
            result = -result
        return to_scalar(result)

    def has_proportional_rows(self) -> bool:
        """
        True if any two rows are proportional.

        A sufficient (not necessary) condition for a zero determinant.
        """
        rows = [self.get_row(i) for i in range(1, self.order + 1)]
        return any(
            proportional(r1, r2) or proportional(r2, r1)
            for r1, r2 in combinations(rows, 2)
        )

    # === Comparison and output ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Determinant):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        return f"Determinant({self.order}, {self._table.flat()!r})"

    def to_text(self) -> str:
        return self._table.to_text()

    def __str__(self) -> str:
        return self.to_text()

    def dump(self, stream: IO[str] | None = None) -> None:
        self._table.dump(stream)
