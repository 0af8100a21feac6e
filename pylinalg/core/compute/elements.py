"""
Element-type helpers shared by the table kernels.

Tables store numeric dtypes (float64, complex128, ...) or object arrays
holding exact numbers such as Fraction. These helpers hide that split
from the algorithms.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def to_scalar(value: Any) -> Any:
    """Unwrap numpy scalars to the matching Python number; leave objects alone."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def zero_of(values: NDArray[Any]) -> Any:
    """
    Additive identity for the element type of values.

    For object arrays the zero is derived from the first element
    (x - x) so a Fraction table pads with Fraction(0), not int 0.
    """
    if values.dtype != object:
        return values.dtype.type(0)
    if values.size:
        first = values.flat[0]
        return first - first
    return 0


def one_of(values: NDArray[Any]) -> Any:
    """Multiplicative identity for the element type of values."""
    if values.dtype != object:
        return values.dtype.type(1)
    if values.size:
        first = values.flat[0]
        if first != 0:
            return first / first
    return 1


def full_like_zero(shape: tuple[int, ...], like: NDArray[Any]) -> NDArray[Any]:
    """Fortran-ordered array of the given shape filled with zero_of(like)."""
    return np.full(shape, zero_of(like), dtype=like.dtype, order='F')
