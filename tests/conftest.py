"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np

from pylinalg import Determinant, LinearEquations, Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def order2_determinant():
    """| 3 -2 |
       | 2  1 |  = 7 (data is column-major)."""
    return Determinant(2, [3, 2, -2, 1])


@pytest.fixture
def order4_determinant():
    """Order-4 determinant evaluating to 48."""
    return Determinant(4, [6, 1, 1, 1, 6, 3, 1, 1, 6, 1, 3, 1, 6, 1, 1, 3])


@pytest.fixture
def three_equations():
    """
    x + 2y + 3z = -1
    -x + 2y - z = -3
    -5x + 2y + z = 0
    """
    return LinearEquations.from_rows([
        [1, 2, 3, -1],
        [-1, 2, -1, -3],
        [-5, 2, 1, 0],
    ])


@pytest.fixture
def invertible_matrix(rng):
    """Well-conditioned random 4x4 matrix (diagonally dominant)."""
    a = rng.standard_normal((4, 4)) + 4 * np.eye(4)
    return Matrix.from_rows(a.tolist())


@pytest.fixture
def fraction_matrix():
    """3x3 matrix of exact Fractions with determinant -1/432."""
    rows = [
        [Fraction(1), Fraction(1, 2), Fraction(1, 3)],
        [Fraction(1, 2), Fraction(1, 3), Fraction(1, 4)],
        [Fraction(1, 3), Fraction(1, 4), Fraction(1, 6)],
    ]
    return Matrix.from_rows(rows)
