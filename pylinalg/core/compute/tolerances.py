"""
Tolerance tiers for numerical comparison.

The library itself only ever tests for exact zero. These tiers describe
how closely independent evaluation paths (permutation expansion vs.
elimination, Cramer's rule vs. inverse matrix) are expected to agree:
- exact element types (Fraction): bit-for-bit
- float64, well-conditioned: close to machine precision
- float64, ill-conditioned: relaxed

Used by the test suite and by EquationSolution.agrees_with().
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def allclose(self, actual: ArrayLike, desired: ArrayLike) -> bool:
        """True if actual and desired agree within this tier."""
        a = np.asarray(actual)
        d = np.asarray(desired)
        if a.shape != d.shape:
            return False
        if a.dtype == object or d.dtype == object:
            if self.rtol == 0 and self.atol == 0:
                return bool(np.all(a == d))
            a = a.astype(np.complex128 if _any_complex(a, d) else np.float64)
            d = d.astype(a.dtype)
        return bool(np.allclose(a, d, rtol=self.rtol, atol=self.atol))


def _any_complex(*arrays: Any) -> bool:
    return any(isinstance(v, complex) for arr in arrays for v in np.ravel(arr))


# Exact element types: the two evaluation paths must agree exactly
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic (Fraction, Decimal): identical results',
)

# float64, well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64',
    description='Double precision: agreement to rounding error',
)

# float64, ill-conditioned input (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which the relaxed tier applies.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(
    dtype: Any,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select the tolerance tier for comparing results of a given dtype."""
    if np.dtype(dtype) == object:
        return EXACT
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64


def is_ill_conditioned(a: ArrayLike) -> bool:
    """
    True if the 2-norm condition number of a exceeds the threshold.

    Exact (object) arrays are never ill-conditioned.
    """
    arr = np.asarray(a)
    if arr.dtype == object:
        return False
    return bool(np.linalg.cond(arr) > ILL_CONDITIONED_THRESHOLD)


def conditioning_warnings(a: ArrayLike) -> tuple[str, ...]:
    """Result warnings for a coefficient matrix; empty when well-conditioned."""
    if is_ill_conditioned(a):
        return (
            f"coefficient matrix is ill-conditioned "
            f"(cond > {ILL_CONDITIONED_THRESHOLD:g})",
        )
    return ()
