"""
Determinants.

Determinant wraps a square Table and evaluates it either by full
permutation expansion or by Gaussian elimination.
"""

from pylinalg.determinant.determinant import Determinant

__all__ = [
    "Determinant",
]
