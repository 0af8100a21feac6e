"""
Concurrent cofactor evaluation for the adjoint.

Every cell of the result is an independent permutation expansion of one
minor, so the N*N cells are dispatched to a bounded worker pool. Workers
only read the determinant snapshot and return their value; the result
array is assembled after the join.
"""

from itertools import product
from typing import Any
import logging

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.parallel import fan_out, resolve_max_workers
from pylinalg.determinant import Determinant

logger = logging.getLogger(__name__)


def cofactor_array(snapshot: Determinant, max_workers: int | None = None) -> NDArray[Any]:
    """
    Array whose (i, j) cell is the signed cofactor (i, j) of snapshot.

    No transpose is applied. snapshot must not be mutated while this runs.

    Args:
        snapshot: Determinant of order >= 2
        max_workers: Pool size, or None for the default

    Returns:
        Fortran-ordered N x N array in the element type of snapshot
    """
    n = snapshot.order
    workers = resolve_max_workers(max_workers)
    cells = list(product(range(1, n + 1), repeat=2))
    logger.debug("adjoint: order %d, %d cells on %d workers", n, len(cells), workers)

    values = fan_out(lambda cell: snapshot.cofactor_value(*cell), cells, workers)

    result = np.empty((n, n), dtype=snapshot.dtype, order='F')
    for (i, j), value in zip(cells, values):
        result[i - 1, j - 1] = value
    return result
