"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They run
at construction boundaries only; once a table exists, every operation
on it degrades to None or a no-op instead of raising.

Design principles:
    - Each function validates ONE thing
    - Clear, actionable error messages with actual values
    - Parameter names included in all error messages
"""

from collections.abc import Iterable
from typing import Any
import numbers

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinalg.core.exceptions import InvalidDimension, ValidationError
from pylinalg.core.protocols import Element


def check_dimension(rows: int, columns: int) -> None:
    """
    Verify a requested table shape has no zero dimension.

    Args:
        rows: Requested row count
        columns: Requested column count

    Raises:
        ValidationError: If either count is not an integer
        InvalidDimension: If either count is below 1
    """
    for name, value in (('rows', rows), ('columns', columns)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if rows < 1:
        raise InvalidDimension(
            f"rows must be >= 1, got {rows} (columns={columns})",
            rows=rows,
            columns=columns,
        )
    if columns < 1:
        raise InvalidDimension(
            f"columns must be >= 1, got {columns} (rows={rows})",
            rows=rows,
            columns=columns,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is below 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def resolve_dtype(values: NDArray[Any], dtype: DTypeLike = None) -> np.dtype:
    """
    Decide the storage dtype for table elements.

    Integer and boolean data are promoted to float64 so that elimination
    and inversion can store fractional results. Exact numeric objects
    (Fraction, Decimal, ...) are kept in an object array.

    Args:
        values: Element data as converted by np.asarray
        dtype: Explicit dtype request, or None to infer from values

    Returns:
        The dtype to store elements with

    Raises:
        ValidationError: If the data (or the requested dtype) is not numeric
    """
    resolved = np.dtype(dtype) if dtype is not None else values.dtype

    if resolved == object:
        bad = [v for v in values.ravel() if not isinstance(v, Element)]
        if bad:
            raise ValidationError(
                f"data: {len(bad)} non-numeric element(s), first is {bad[0]!r}"
            )
        return resolved

    if not np.issubdtype(resolved, np.number) and not np.issubdtype(resolved, np.bool_):
        raise ValidationError(
            f"data: non-numeric dtype {resolved}, expected numeric data"
        )

    if not np.issubdtype(resolved, np.inexact):
        return np.dtype(np.float64)

    return resolved


def as_element_array(data: Iterable[Any], dtype: DTypeLike = None) -> NDArray[Any]:
    """
    Convert flat element data to a 1-D numpy array with a resolved dtype.

    Args:
        data: Flat element sequence
        dtype: Explicit dtype request, or None to infer

    Returns:
        1-D numpy array

    Raises:
        ValidationError: If data is not a flat numeric sequence
    """
    items = list(data)
    if not items:
        values = np.zeros(0, dtype=np.float64 if dtype is None else dtype)
        return values.astype(resolve_dtype(values, dtype))

    try:
        values = np.asarray(items)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"data: cannot convert to array: {e}") from e

    if values.ndim != 1:
        raise ValidationError(
            f"data: expected a flat sequence, got shape {values.shape}"
        )

    resolved = resolve_dtype(values, dtype)
    try:
        return values.astype(resolved)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"data: cannot convert to {resolved}: {e}") from e


def is_valid_index(index: Any, upper: int) -> bool:
    """
    True if index is a 1-based position in [1, upper].

    Used by the table types to turn bad indices into None / no-op
    instead of an exception.
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 1 <= index <= upper
