"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (booleans and strings are not numbers)
    - No default handling of edge cases (empty and jagged input is rejected)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operand names included in all error messages as "<name>: <detail>"
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence, Sized
import math

import numpy as np

from pymatrix.core.exceptions import (
    DecodeError,
    DimensionMismatchError,
    ShapeError,
)


@dataclass(frozen=True)
class Dimensions:
    """
    Shape of a validated matrix.

    Always derived from a matrix by validate(), never stored alongside it.
    """
    rows: int
    cols: int

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)


def _context(name: str | None, detail: str) -> str:
    return f"{name}: {detail}" if name else detail


def validate(rows: Sequence[Sized], name: str | None = None) -> Dimensions:
    """
    Confirm a matrix is a non-empty rectangle and compute its dimensions.

    Works on a Matrix (which iterates as rows) or any sequence of sized
    rows. Only lengths are inspected.

    Args:
        rows: Matrix or sequence of rows
        name: Operand name for error messages

    Returns:
        Dimensions of the matrix

    Raises:
        ShapeError: 'empty_rows' if there are no rows, 'empty_columns' if
            the first row is empty, 'jagged' if any row length differs from
            the first row's
    """
    n_rows = len(rows)
    if n_rows == 0:
        raise ShapeError(
            _context(name, "matrix has zero rows"),
            kind='empty_rows',
            operand=name,
        )

    expected = len(rows[0])
    if expected == 0:
        raise ShapeError(
            _context(name, "matrix has zero columns"),
            kind='empty_columns',
            operand=name,
        )

    for i, row in enumerate(rows):
        actual = len(row)
        if actual != expected:
            raise ShapeError(
                _context(name, f"row {i} has length {actual} (expected {expected})"),
                kind='jagged',
                operand=name,
                row=i,
                actual=actual,
                expected=expected,
            )

    return Dimensions(rows=n_rows, cols=expected)


def check_rectangular(rows: Sequence[Sized], name: str | None = None) -> None:
    """
    Verify all rows share the first row's length.

    Unlike validate(), zero rows or zero-length rows are accepted here;
    this is the check the boundary applies while decoding.

    Raises:
        ShapeError: 'jagged' with the first offending row
    """
    if len(rows) == 0:
        return
    expected = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != expected:
            raise ShapeError(
                _context(name, f"row {i} has length {len(row)} (expected {expected})"),
                kind='jagged',
                operand=name,
                row=i,
                actual=len(row),
                expected=expected,
            )


def check_cell(value: Any, row: int, col: int, name: str | None = None) -> float:
    """
    Convert a single cell to float, rejecting anything that is not a number.

    Booleans are rejected even though Python treats them as integers.
    NaN and infinities are rejected because they cannot be carried on
    the JSON wire.

    Returns:
        The cell as a Python float

    Raises:
        DecodeError: If the cell is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise DecodeError(
            _context(name, f"cell ({row}, {col}) is not a number, got {type(value).__name__}"),
            operand=name,
            row=row,
            col=col,
        )
    if isinstance(value, np.complexfloating):
        raise DecodeError(
            _context(name, f"cell ({row}, {col}) is complex, expected a real number"),
            operand=name,
            row=row,
            col=col,
        )
    try:
        result = float(value)
    except OverflowError:
        result = math.inf
    if not math.isfinite(result):
        raise DecodeError(
            _context(name, f"cell ({row}, {col}) is not finite ({result})"),
            operand=name,
            row=row,
            col=col,
        )
    return result


def check_same_shape(op: str, a: Dimensions, b: Dimensions) -> None:
    """
    Verify two operands have identical dimensions (add, subtract).

    Raises:
        DimensionMismatchError: With both shapes
    """
    if a != b:
        raise DimensionMismatchError(
            f"{op}: requires same dimensions, got {a} and {b}",
            op=op,
            a_shape=a.as_tuple(),
            b_shape=b.as_tuple(),
        )


def check_inner_dimensions(op: str, a: Dimensions, b: Dimensions) -> None:
    """
    Verify A.cols == B.rows (multiply).

    Raises:
        DimensionMismatchError: With both shapes
    """
    if a.cols != b.rows:
        raise DimensionMismatchError(
            f"{op}: requires A.cols == B.rows, got {a} and {b}",
            op=op,
            a_shape=a.as_tuple(),
            b_shape=b.as_tuple(),
        )
