"""
Row reduction (RREF) module.

Public API:
    rref(A)    - Row-reduced echelon form as a Matrix
    reduce(A)  - Full solution: rank, pivot columns, step trace, timing
"""

from pymatrix.rref._elimination import RowOperation
from pymatrix.rref.solution import RREFParams, RREFSolution
from pymatrix.rref.solvers import rref, reduce

__all__ = [
    "rref",
    "reduce",
    "RREFParams",
    "RREFSolution",
    "RowOperation",
]
