"""
Elementwise and product operators.

Each operand is decoded (if needed) and validated on its own first, so a
failure names the operand at fault. Only then are the two shapes compared.
Results are fresh, read-only matrices.
"""

from __future__ import annotations

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import KernelInvariantError
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.validation import (
    Dimensions,
    check_inner_dimensions,
    check_same_shape,
    validate,
)


def _operand(value: MatrixLike, name: str) -> tuple[Matrix, Dimensions]:
    matrix = as_matrix(value, name)
    return matrix, validate(matrix, name)


def _finish(data: NDArray, expected: Dimensions, op: str) -> Matrix:
    if data.shape != expected.as_tuple():
        raise KernelInvariantError(
            f"{op}: produced shape {data.shape}, expected {expected}"
        )
    return Matrix._build(data)


def _cellwise(
    op: str,
    A: MatrixLike,
    B: MatrixLike,
    fn: Callable[[NDArray, NDArray], NDArray],
) -> Matrix:
    a, a_dims = _operand(A, 'A')
    b, b_dims = _operand(B, 'B')
    check_same_shape(op, a_dims, b_dims)
    # Overflow surfaces as inf in the result; encoders report it
    with np.errstate(over='ignore'):
        data = fn(a.data, b.data)
    return _finish(data, a_dims, op)


def add(A: MatrixLike, B: MatrixLike) -> Matrix:
    """
    Cell-by-cell sum.

    Args:
        A: Left operand (Matrix or nested sequences of numbers)
        B: Right operand, same dimensions as A

    Returns:
        New Matrix with result[i][j] = A[i][j] + B[i][j]

    Raises:
        DecodeError: If an operand is not an array of numbers
        ShapeError: If an operand is empty or jagged
        DimensionMismatchError: If the shapes differ

    Example:
        >>> add([[1, 2], [3, 4]], [[5, 6], [7, 8]]).to_rows()
        [[6.0, 8.0], [10.0, 12.0]]
    """
    return _cellwise('add', A, B, np.add)


def subtract(A: MatrixLike, B: MatrixLike) -> Matrix:
    """
    Cell-by-cell difference, result[i][j] = A[i][j] - B[i][j].

    Same contract as add().
    """
    return _cellwise('subtract', A, B, np.subtract)


def multiply(A: MatrixLike, B: MatrixLike) -> Matrix:
    """
    Matrix product.

    result[i][j] is the dot product of row i of A with column j of B.

    Args:
        A: Left operand (r x n)
        B: Right operand (n x c)

    Returns:
        New r x c Matrix

    Raises:
        DecodeError: If an operand is not an array of numbers
        ShapeError: If an operand is empty or jagged
        DimensionMismatchError: If A.cols != B.rows

    Example:
        >>> multiply([[1, 2, 3]], [[1], [2], [3]]).to_rows()
        [[14.0]]
    """
    a, a_dims = _operand(A, 'A')
    b, b_dims = _operand(B, 'B')
    check_inner_dimensions('multiply', a_dims, b_dims)
    with np.errstate(over='ignore', invalid='ignore'):
        data = np.matmul(a.data, b.data)
    return _finish(
        data,
        Dimensions(rows=a_dims.rows, cols=b_dims.cols),
        'multiply',
    )
