"""
Inversion counting for the permutation expansion of a determinant.
"""

from collections.abc import Callable, Sequence
from typing import Any
import operator

Less = Callable[[Any, Any], bool]


def inversions_of(seq: Sequence[Any], index: int, less: Less = operator.lt) -> int:
    """
    Count the inversions element seq[index] forms with the elements before it.

    A pair (a, index) with a < index is an inversion when
    less(seq[index], seq[a]) holds.
    """
    target = seq[index]
    return sum(1 for a in range(index) if less(target, seq[a]))


def count_inversions(seq: Sequence[Any], less: Less = operator.lt) -> int:
    """Total number of inversions of seq under the total order less."""
    return sum(inversions_of(seq, b, less) for b in range(1, len(seq)))


def permutation_sign(seq: Sequence[Any], less: Less = operator.lt) -> int:
    """+1 for an even inversion count, -1 for odd."""
    return -1 if count_inversions(seq, less) % 2 else 1
