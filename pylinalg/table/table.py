"""
Dense M x N table.

The table is the storage layer every other type builds on. It owns a
Fortran-ordered (column-major) numpy array, so a flat initializer is
read column by column:

    Table(2, 3, [1, 2, 3, 4, 5, 6])

    1 3 5
    2 4 6

Indices are 1-based. Invalid indices never raise: getters return None
and setters leave the table unchanged. Only construction raises, most
notably InvalidDimension for a zero row or column count.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, IO, TypeVar
import copy as _copy
import sys

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinalg.core.compute.elements import full_like_zero, one_of, to_scalar, zero_of
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import as_element_array, check_dimension, is_valid_index

TableT = TypeVar('TableT', bound='Table')


class Table:
    """
    Resizable dense table of numeric elements.

    Construction:
        Table()                         # 1x1 table holding 1
        Table(M, N, data)               # data is column-major, padded/truncated
        Table(M, N, data, dtype=object) # exact element types (Fraction, Decimal)
        Table.from_rows([[...], ...])   # row-major nested sequences

    Integer and boolean data are stored as float64.
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
            rows, columns, data = 1, 1, (1,)
        elif rows is None or columns is None:
            raise TypeError("rows and columns must be given together")

        check_dimension(rows, columns)
        flat = as_element_array(data, dtype)

        size = rows * columns
        store = np.full(size, zero_of(flat), dtype=flat.dtype)
        count = min(size, flat.size)
        store[:count] = flat[:count]

        self._data: NDArray[Any] = store.reshape((rows, columns), order='F')

    @classmethod
    def _from_array(cls: type[TableT], array: NDArray[Any]) -> TableT:
        """Wrap a copy of a 2-D array without re-validating it."""
        obj = cls.__new__(cls)
        obj._data = np.array(array, order='F', copy=True)
        return obj

    @classmethod
    def from_rows(
        cls: type[TableT],
        rows: Sequence[Sequence[Any]],
        *,
        dtype: DTypeLike = None,
    ) -> TableT:
        """
        Build a table from row-major nested sequences.

        Raises:
            InvalidDimension: If there are no rows or the rows are empty
            DimensionError: If the rows have different lengths
        """
        rows = [list(r) for r in rows]
        n_rows = len(rows)
        n_cols = len(rows[0]) if rows else 0
        check_dimension(n_rows, n_cols)

        lengths = {len(r) for r in rows}
        if len(lengths) > 1:
            raise DimensionError(f"rows have inconsistent lengths: {sorted(lengths)}")

        flat = [rows[i][j] for j in range(n_cols) for i in range(n_rows)]
        return cls(n_rows, n_cols, flat, dtype=dtype)

    # === Shape ===

    @property
    def rows(self) -> int:
        """Number of rows (M)."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns (N)."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def set_rows(self, rows: int) -> None:
        """Truncate or zero-pad trailing rows. A count below 1 is ignored."""
        if not is_valid_index(rows, sys.maxsize):
            return
        resized = full_like_zero((rows, self.columns), self._data)
        keep = min(rows, self.rows)
        resized[:keep, :] = self._data[:keep, :]
        self._data = resized

    def set_columns(self, columns: int) -> None:
        """Truncate or zero-pad trailing columns. A count below 1 is ignored."""
        if not is_valid_index(columns, sys.maxsize):
            return
        resized = full_like_zero((self.rows, columns), self._data)
        keep = min(columns, self.columns)
        resized[:, :keep] = self._data[:, :keep]
        self._data = resized

    def homotype(self, other: Table) -> bool:
        """True if both tables have the same row and column counts."""
        return self.rows == other.rows and self.columns == other.columns

    def square(self) -> bool:
        return self.rows == self.columns

    # === Elements ===

    def get_element(self, row: int, column: int) -> Any | None:
        if not (is_valid_index(row, self.rows) and is_valid_index(column, self.columns)):
            return None
        return to_scalar(self._data[row - 1, column - 1])

    def set_element(self, row: int, column: int, value: Any) -> None:
        if not (is_valid_index(row, self.rows) and is_valid_index(column, self.columns)):
            return
        self._data[row - 1, column - 1] = value

    def get_row(self, row: int) -> list[Any] | None:
        if not is_valid_index(row, self.rows):
            return None
        return [to_scalar(v) for v in self._data[row - 1, :]]

    def set_row(self, row: int, values: Sequence[Any]) -> None:
        """Replace a row. No-op unless len(values) equals the column count."""
        if not is_valid_index(row, self.rows) or len(values) != self.columns:
            return
        self._data[row - 1, :] = list(values)

    def get_column(self, column: int) -> list[Any] | None:
        if not is_valid_index(column, self.columns):
            return None
        return [to_scalar(v) for v in self._data[:, column - 1]]

    def set_column(self, column: int, values: Sequence[Any]) -> None:
        """Replace a column. No-op unless len(values) equals the row count."""
        if not is_valid_index(column, self.columns) or len(values) != self.rows:
            return
        self._data[:, column - 1] = list(values)

    def swap_row(self, i: int, j: int) -> None:
        if not (is_valid_index(i, self.rows) and is_valid_index(j, self.rows)):
            return
        self._data[[i - 1, j - 1], :] = self._data[[j - 1, i - 1], :]

    def swap_column(self, i: int, j: int) -> None:
        if not (is_valid_index(i, self.columns) and is_valid_index(j, self.columns)):
            return
        self._data[:, [i - 1, j - 1]] = self._data[:, [j - 1, i - 1]]

    # === Derived tables ===

    def transpose(self: TableT) -> TableT:
        """New table of the same class with (i, j) -> (j, i)."""
        return type(self)._from_array(self._data.T)

    def copy(self: TableT) -> TableT:
        return type(self)._from_array(self._data)

    def __copy__(self: TableT) -> TableT:
        return self.copy()

    def __deepcopy__(self: TableT, memo: dict[int, Any]) -> TableT:
        obj = type(self).__new__(type(self))
        obj._data = _copy.deepcopy(self._data, memo)
        return obj

    def take(self: TableT) -> TableT:
        """
        Move the storage into a new table.

        This table is left as the default 1x1 table holding 1, so it
        stays usable afterwards.
        """
        moved = type(self).__new__(type(self))
        moved._data = self._data
        self._data = np.full((1, 1), one_of(moved._data), dtype=moved._data.dtype, order='F')
        return moved

    def to_numpy(self) -> NDArray[Any]:
        """Independent 2-D copy of the elements."""
        return self._data.copy()

    def flat(self) -> list[Any]:
        """Elements in column-major order."""
        return [to_scalar(v) for v in self._data.ravel(order='F')]

    # === Comparison and output ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(self._data == other._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}, {self.columns}, {self.flat()!r})"

    def to_text(self) -> str:
        """Header "matrix <rows> <columns>" then one space-separated line per row."""
        lines = [f"matrix {self.rows} {self.columns}"]
        for i in range(1, self.rows + 1):
            lines.append(' '.join(str(v) for v in self.get_row(i)))
        return '\n'.join(lines) + '\n'

    def __str__(self) -> str:
        return self.to_text()

    def dump(self, stream: IO[str] | None = None) -> None:
        """Write to_text() to stream (default: sys.stdout)."""
        (stream if stream is not None else sys.stdout).write(self.to_text())
