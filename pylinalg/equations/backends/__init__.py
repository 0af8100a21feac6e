"""Solve strategies for linear systems."""

from pylinalg.equations.backends.cramer import CramerBackend
from pylinalg.equations.backends.inverse import InverseBackend

__all__ = [
    "CramerBackend",
    "InverseBackend",
]
