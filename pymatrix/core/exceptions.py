"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. The calling boundary converts every subclass
except KernelInvariantError into an error string of the form
"<context>: <detail>".

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Literal


ShapeKind = Literal['empty_rows', 'empty_columns', 'jagged']


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs or options fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix is not a non-empty rectangle.

    Raised by the shape validator before any computation takes place.

    Attributes:
        kind: 'empty_rows', 'empty_columns' or 'jagged'
        operand: Name of the operand that failed ('A', 'B', ...), if known
        row: Offending row index (jagged only)
        actual: Actual length of the offending row (jagged only)
        expected: Length of the first row (jagged only)
    """

    def __init__(
        self,
        message: str,
        kind: ShapeKind,
        operand: str | None = None,
        row: int | None = None,
        actual: int | None = None,
        expected: int | None = None
    ):
        super().__init__(message)
        self.kind = kind
        self.operand = operand
        self.row = row
        self.actual = actual
        self.expected = expected


class DimensionMismatchError(ValidationError):
    """
    Two valid operands have incompatible shapes for an operation.

    Attributes:
        op: Operation name ('add', 'subtract', 'multiply')
        a_shape: (rows, cols) of the left operand
        b_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        op: str,
        a_shape: tuple[int, int],
        b_shape: tuple[int, int]
    ):
        super().__init__(message)
        self.op = op
        self.a_shape = a_shape
        self.b_shape = b_shape


class DecodeError(ValidationError):
    """
    Foreign input could not be turned into a matrix.

    Concerns representation (not an array, not a number), never shape.

    Attributes:
        operand: Name of the operand being decoded, if known
        row: Offending row index, if the problem is inside a row
        col: Offending column index, if the problem is a single cell
    """

    def __init__(
        self,
        message: str,
        operand: str | None = None,
        row: int | None = None,
        col: int | None = None
    ):
        super().__init__(message)
        self.operand = operand
        self.row = row
        self.col = col


class NumericalError(PyMatrixError):
    """
    Numerical computation produced a value that cannot be delivered.

    Raised when an operation result overflows to a non-finite value and
    the caller's representation cannot carry it.
    """
    pass


class KernelInvariantError(PyMatrixError):
    """
    An internal invariant was violated.

    Indicates a bug in PyMatrix, not a caller error. Boundaries never
    translate this into a response; it propagates.
    """
    pass
