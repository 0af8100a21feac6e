"""
Permutation (Leibniz) expansion of a determinant.

    det(A) = sum over permutations p of sign(p) * prod_i A[i, p(i)]

O(N! * N). Kept as the definitional reference that elimination is
checked against.
"""

from itertools import permutations
from typing import Any
import operator

from numpy.typing import NDArray

from pylinalg.core.compute.elements import to_scalar, zero_of
from pylinalg.core.compute.permutation import Less, permutation_sign


def leibniz(a: NDArray[Any], less: Less = operator.lt) -> Any:
    """
    Evaluate det(a) by full permutation expansion.

    Permutations are enumerated in lexicographic order. A term stops
    multiplying at the first factor that is exactly zero.

    Args:
        a: Square array
        less: Total order used to count inversions of a permutation

    Returns:
        The determinant, in the element type of a
    """
    n = a.shape[0]
    if n == 1:
        return to_scalar(a[0, 0])

    total = zero_of(a)
    for perm in permutations(range(n)):
        term: Any = permutation_sign(perm, less)
        for row, column in enumerate(perm):
            factor = a[row, column]
            if factor == 0:
                term = 0
                break
            term = term * factor
        total = total + term

    return to_scalar(total)
