"""
Host-runtime bridge.

Accepts whatever in-process value a caller happens to hold (Matrix, 2D
numpy array, pandas DataFrame, torch tensor, nested lists or tuples) and
decodes it strictly into a Matrix. Results go back as numpy arrays.

The call-style entry points mirror an embedded scripting boundary: they
take loose positional arguments and always return a
{'result': ..., 'error': ...} dict instead of raising.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DecodeError, KernelInvariantError, PyMatrixError
from pymatrix.core.matrix import Matrix
from pymatrix.ops.elementwise import add, subtract, multiply
from pymatrix.rref.solvers import rref


def from_host(value: Any, name: str | None = None) -> Matrix:
    """
    Decode a host value into a Matrix without coercing bad data.

    Parameters
    ----------
    value : Matrix, array-like, DataFrame or tensor
        Tensors are detached and moved to CPU; DataFrames contribute their
        .values. Anything else must be a list or tuple of rows.
    name : str, optional
        Operand name used as the error context.

    Raises
    ------
    DecodeError
        Wrong dimensionality, non-numeric dtype or cell, non-finite cell.
    ShapeError
        Jagged rows.
    """
    if isinstance(value, Matrix):
        return value

    if hasattr(value, 'detach') and hasattr(value, 'cpu'):
        value = value.detach().cpu().numpy()
    elif hasattr(value, 'values') and hasattr(value, 'columns'):
        value = value.values

    if isinstance(value, np.ndarray):
        return _from_ndarray(value, name)

    return Matrix.from_rows(value, name)


def _from_ndarray(array: NDArray, name: str | None) -> Matrix:
    prefix = f"{name}: " if name else ""

    if array.dtype == object:
        # Mixed or ragged content: decode cell by cell for a precise error
        return Matrix.from_rows(array.tolist(), name)

    if array.ndim == 1 and array.size == 0:
        return Matrix.from_rows([], name)

    if array.ndim != 2:
        raise DecodeError(
            f"{prefix}expected 2D array, got {array.ndim}D with shape {array.shape}",
            operand=name,
        )

    if not np.issubdtype(array.dtype, np.number):
        raise DecodeError(
            f"{prefix}non-numeric dtype {array.dtype}, expected numeric data",
            operand=name,
        )

    if np.issubdtype(array.dtype, np.complexfloating):
        raise DecodeError(
            f"{prefix}complex dtype {array.dtype}, expected real numbers",
            operand=name,
        )

    if array.shape[0] == 0:
        return Matrix.from_rows([], name)

    data = np.array(array, dtype=np.float64, copy=True)

    non_finite = ~np.isfinite(data)
    if np.any(non_finite):
        loc = np.argwhere(non_finite)[0]
        raise DecodeError(
            f"{prefix}cell ({loc[0]}, {loc[1]}) is not finite ({data[loc[0], loc[1]]})",
            operand=name,
            row=int(loc[0]),
            col=int(loc[1]),
        )

    return Matrix._build(data)


def to_host(matrix: Matrix) -> NDArray[np.float64]:
    """Writable float64 copy of the matrix."""
    return matrix.to_array()


# === Call-style entry points ===

def _call(
    op: str,
    args: tuple[Any, ...],
    fn: Callable[..., Matrix],
    arity: int,
) -> dict[str, Any]:
    if len(args) < arity:
        needed = "two arguments" if arity == 2 else "one argument"
        return {'result': None, 'error': f"{op}: requires {needed}"}

    try:
        operands = [from_host(arg, name) for arg, name in zip(args[:arity], ('A', 'B'))]
        result = fn(*operands)
    except KernelInvariantError:
        raise
    except PyMatrixError as e:
        return {'result': None, 'error': str(e)}

    return {'result': to_host(result), 'error': None}


def matrix_add(*args: Any) -> dict[str, Any]:
    """add(A, B) returning {'result': ndarray | None, 'error': str | None}."""
    return _call('add', args, add, 2)


def matrix_subtract(*args: Any) -> dict[str, Any]:
    """subtract(A, B) returning {'result', 'error'}."""
    return _call('subtract', args, subtract, 2)


def matrix_multiply(*args: Any) -> dict[str, Any]:
    """multiply(A, B) returning {'result', 'error'}."""
    return _call('multiply', args, multiply, 2)


def matrix_rref(*args: Any) -> dict[str, Any]:
    """rref(A) returning {'result', 'error'}."""
    return _call('rref', args, rref, 1)
