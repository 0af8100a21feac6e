"""
Element-wise arithmetic over ordered sequences.

Rows and columns of every table type are handed around as plain lists;
these helpers are the arithmetic the higher layers build their row
operations from. Binary helpers return None when the two sequences have
different lengths.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def add(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any] | None:
    """Element-wise sum, or None if the lengths differ."""
    if len(s1) != len(s2):
        return None
    return [a + b for a, b in zip(s1, s2)]


def scale(s: Sequence[Any], k: Any) -> list[Any]:
    """Every element multiplied by k."""
    return [a * k for a in s]


def dot(s1: Sequence[Any], s2: Sequence[Any]) -> Any | None:
    """
    Dot product, or None if the lengths differ.

    The dot product of two empty sequences is 0.
    """
    if len(s1) != len(s2):
        return None
    return sum((a * b for a, b in zip(s1, s2)), 0)


def cross(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any] | None:
    """Element-wise product, or None if the lengths differ."""
    if len(s1) != len(s2):
        return None
    return [a * b for a, b in zip(s1, s2)]


def equal(s1: Sequence[Any], s2: Sequence[Any]) -> bool | None:
    """Exact element-wise equality, or None if the lengths differ."""
    if len(s1) != len(s2):
        return None
    return all(a == b for a, b in zip(s1, s2))


def proportional(s1: Sequence[Any], s2: Sequence[Any]) -> bool | None:
    """
    Whether s1 == rate * s2 for a single rate.

    The rate is s1[i] / s2[i] at the first index where s2 is nonzero;
    wherever s2 is zero, s1 must be zero too. Two all-zero sequences are
    proportional.

    Returns:
        True or False, or None if the lengths differ
    """
    if len(s1) != len(s2):
        return None

    pivot = next((i for i, b in enumerate(s2) if b != 0), None)
    if pivot is None:
        return all(a == 0 for a in s1)

    rate = s1[pivot] / s2[pivot]
    return all(b * rate == a for a, b in zip(s1, s2))
