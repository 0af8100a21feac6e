"""
Shared compute infrastructure for PyLinalg.

IMPORTANT: This is NOT where solve strategies live. Those go in
equations/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Agreement tiers for comparing evaluation paths
    parallel: Bounded thread-pool fan-out
    permutation: Inversion counting and permutation sign
    elimination: Forward elimination and back substitution kernels
    elements: Element-type helpers (zero, one, scalar unwrapping)
"""

from pylinalg.core.compute.parallel import DEFAULT_MAX_WORKERS, fan_out
from pylinalg.core.compute.permutation import (
    count_inversions,
    inversions_of,
    permutation_sign,
)
from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EXACT,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Parallel
    "DEFAULT_MAX_WORKERS",
    "fan_out",
    # Permutations
    "count_inversions",
    "inversions_of",
    "permutation_sign",
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
