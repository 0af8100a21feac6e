"""
Gaussian elimination kernels with naive partial pivoting.

Both kernels work in place on a 2-D numpy array (numeric or object
dtype) using 0-based indices. Pivots stay on the diagonal: when a pivot
is exactly zero the first row below it with a nonzero entry in the pivot
column is swapped in; if there is none, the column is left alone.
"""

from typing import Any
import logging

from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def _swap_rows(a: NDArray[Any], i: int, j: int) -> None:
    a[[i, j]] = a[[j, i]]


def forward_eliminate(a: NDArray[Any], *, normalize: bool = False) -> int:
    """
    Reduce a to upper-triangular (row-echelon) form.

    For each pivot p, rows below are replaced by
    row_k - (a[k, p] / a[p, p]) * row_p.

    Args:
        a: Array to reduce in place
        normalize: Scale every nonzero pivot row so the pivot is 1

    Returns:
        Number of row swaps performed
    """
    m, n = a.shape
    swaps = 0

    for p in range(min(m, n)):
        if a[p, p] == 0:
            below = next((r for r in range(p + 1, m) if a[r, p] != 0), None)
            if below is None:
                logger.debug("elimination: column %d has no nonzero pivot", p + 1)
                continue
            _swap_rows(a, p, below)
            swaps += 1

        if normalize:
            a[p] = a[p] / a[p, p]

        for r in range(p + 1, m):
            if a[r, p] != 0:
                a[r] = a[r] - (a[r, p] / a[p, p]) * a[p]

    return swaps


def back_substitute(a: NDArray[Any]) -> None:
    """
    Clear the entries above every nonzero diagonal pivot.

    Expects the output of forward_eliminate().
    """
    m, n = a.shape
    for p in range(min(m, n) - 1, 0, -1):
        if a[p, p] == 0:
            continue
        for r in range(p):
            if a[r, p] != 0:
                a[r] = a[r] - (a[r, p] / a[p, p]) * a[p]
