"""
Dense 2-D tables.

Table is the column-major storage type that Determinant wraps and
Matrix extends.
"""

from pylinalg.table.table import Table

__all__ = [
    "Table",
]
