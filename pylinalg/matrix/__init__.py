"""
Matrices.

Matrix extends Table with addition, scalar and matrix products, the
cofactor adjoint, the inverse and elementary row/column operations.
"""

from pylinalg.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
