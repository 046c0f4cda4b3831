"""
Core infrastructure for PyMatrix.

Shared abstractions used by the elementwise operators, the RREF engine
and the boundary adapters.

Key components:
    matrix: Matrix value type
    validation: Shape validator and cell checks
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    compute: Timing and tolerances
"""

from pymatrix.core.matrix import Matrix, MatrixLike
from pymatrix.core.result import Result
from pymatrix.core.validation import Dimensions, validate
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    DimensionMismatchError,
    DecodeError,
    NumericalError,
    KernelInvariantError,
)

__all__ = [
    # Values
    "Matrix",
    "MatrixLike",
    "Dimensions",
    "validate",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "DimensionMismatchError",
    "DecodeError",
    "NumericalError",
    "KernelInvariantError",
]
