"""
PyMatrix: a small dense-matrix computation kernel.

Elementwise addition and subtraction, matrix multiplication, and
reduction to row-reduced echelon form by Gauss-Jordan elimination with
partial pivoting, behind strict JSON and in-process calling boundaries.

Submodules:
    ops: add, subtract, multiply
    rref: rref, reduce (rank, pivots, step trace)
    boundary: wire (JSON) and host (numpy/pandas/torch) adapters
    server: FastAPI application (imported on demand)
"""

__version__ = "0.1.0"

from pymatrix.core.matrix import Matrix
from pymatrix.core.validation import Dimensions, validate
from pymatrix.ops import add, subtract, multiply
from pymatrix.rref import rref, reduce, RREFSolution

__all__ = [
    "__version__",
    "Matrix",
    "Dimensions",
    "validate",
    "add",
    "subtract",
    "multiply",
    "rref",
    "reduce",
    "RREFSolution",
]
