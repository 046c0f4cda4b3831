"""
Human-readable rendering of matrices and values.

Presentation only: nothing here feeds back into computation, and the wire
encoder never uses it (wire values are exact floats).
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any
import math

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.matrix import Matrix
from pymatrix.core.validation import Dimensions


def to_fraction(x: float, max_denominator: int = 100, tol: float = 1e-8) -> str:
    """
    Render a float as an integer or small fraction when it is one.

    Falls back to at most six decimals (trailing zeros stripped) when no
    fraction with denominator <= max_denominator is within tol.

    Examples:
        >>> to_fraction(2.0), to_fraction(-0.5), to_fraction(1 / 3)
        ('2', '-1/2', '1/3')
        >>> to_fraction(0.1234567)
        '0.123457'
    """
    x = float(x)
    if not math.isfinite(x):
        return str(x)
    if abs(x - round(x)) < tol:
        return str(int(round(x)))

    frac = Fraction(x).limit_denominator(max_denominator)
    if abs(float(frac) - x) < tol:
        if frac.denominator == 1:
            return str(frac.numerator)
        return f"{frac.numerator}/{frac.denominator}"

    text = f"{x:.6f}".rstrip('0').rstrip('.')
    return "0" if text in ("-0", "") else text


def _as_array(matrix: Any) -> NDArray[np.float64]:
    return np.asarray(matrix.data if isinstance(matrix, Matrix) else matrix, dtype=np.float64)


def _shape(data: NDArray) -> str:
    return f"{data.shape[0]}x{data.shape[1]}"


def _grid(cells: list[list[str]]) -> str:
    widths = [max(len(row[j]) for row in cells) for j in range(len(cells[0]))]
    lines = []
    for row in cells:
        body = "  ".join(cell.rjust(w) for cell, w in zip(row, widths))
        lines.append(f"[ {body} ]")
    return "\n".join(lines)


def format_matrix(matrix: Any, max_denominator: int = 100) -> str:
    """
    Render a matrix as aligned rows of fraction-formatted cells.

    Accepts a Matrix, a 2D numpy array or nested sequences.

    Example:
        >>> print(format_matrix([[1, 0.5], [0, -2]]))
        [ 1  1/2 ]
        [ 0   -2 ]
    """
    data = _as_array(matrix)
    if data.size == 0:
        return "[]"
    return _grid([[to_fraction(v, max_denominator) for v in row] for row in data])


def _operand(x: float, max_denominator: int) -> str:
    # Negative right-hand terms are parenthesised: 1 - (-2)
    text = to_fraction(x, max_denominator)
    return f"({text})" if x < 0 else text


_SYMBOLS = {'add': '+', 'subtract': '-'}


def explain_elementwise(
    op: str,
    A: Any,
    B: Any,
    result: Any,
    max_denominator: int = 100,
) -> str:
    """
    Derivation text for add or subtract: each cell as "a + b", then the result.

    Example:
        >>> print(explain_elementwise('add', [[1, 2]], [[3, 4]], [[4, 6]]))
        A is 1x2, B is 1x2
        <BLANKLINE>
        A + B =
        [ 1 + 3  2 + 4 ]
        =
        [ 4  6 ]
    """
    if op not in _SYMBOLS:
        raise ValidationError(f"op: expected 'add' or 'subtract', got {op!r}")
    symbol = _SYMBOLS[op]
    a, b = _as_array(A), _as_array(B)

    cells = [
        [
            f"{to_fraction(a[i, j], max_denominator)} {symbol} "
            f"{_operand(b[i, j], max_denominator)}"
            for j in range(a.shape[1])
        ]
        for i in range(a.shape[0])
    ]
    return "\n".join([
        f"A is {_shape(a)}, B is {_shape(b)}",
        "",
        f"A {symbol} B =",
        _grid(cells),
        "=",
        format_matrix(result, max_denominator),
    ])


def explain_multiply(A: Any, B: Any, result: Any, max_denominator: int = 100) -> str:
    """
    Derivation text for a matrix product.

    Shows every entry as its dot-product expression, the result, then
    one line per entry with 1-based (row, column) labels, e.g.
    "(1, 1): 1·5 + 2·7 = 19".
    """
    a, b, r = _as_array(A), _as_array(B), _as_array(result)

    def terms(i: int, j: int) -> str:
        return " + ".join(
            f"{to_fraction(a[i, k], max_denominator)}·{_operand(b[k, j], max_denominator)}"
            for k in range(a.shape[1])
        )

    cells = [[terms(i, j) for j in range(b.shape[1])] for i in range(a.shape[0])]
    lines = [
        f"A is {_shape(a)}, B is {_shape(b)}",
        "",
        "A · B =",
        _grid(cells),
        "=",
        format_matrix(r, max_denominator),
        "",
        "Per-entry dot products:",
    ]
    for i in range(a.shape[0]):
        for j in range(b.shape[1]):
            lines.append(
                f"  ({i + 1}, {j + 1}): {terms(i, j)} = {to_fraction(r[i, j], max_denominator)}"
            )
    return "\n".join(lines)


def compatibility_hint(a: Dimensions, b: Dimensions) -> str:
    """
    Describe which operations two shapes allow.

    Example:
        >>> compatibility_hint(Dimensions(2, 3), Dimensions(3, 2))
        'Add/subtract require same sizes (A: 2x3, B: 3x2). Multiply requires A.cols == B.rows (3 vs 3).'
    """
    return (
        f"Add/subtract require same sizes (A: {a}, B: {b}). "
        f"Multiply requires A.cols == B.rows ({a.cols} vs {b.rows})."
    )
