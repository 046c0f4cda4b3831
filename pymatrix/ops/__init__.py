"""
Elementwise and product operators.

Public API:
    add(A, B)       - Cell-by-cell sum (same dimensions)
    subtract(A, B)  - Cell-by-cell difference (same dimensions)
    multiply(A, B)  - Matrix product (A.cols == B.rows)
"""

from pymatrix.ops.elementwise import add, subtract, multiply

__all__ = [
    "add",
    "subtract",
    "multiply",
]
