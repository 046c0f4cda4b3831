"""
Matrix: the kernel's dense matrix value type.

A Matrix wraps a read-only, C-contiguous float64 buffer (row stride =
n_cols, column stride = 1). Every operation works on a private writable
copy and returns a new Matrix; caller-supplied data is never mutated.

Construction:
    Matrix.from_rows([[1, 2], [3, 4]])   # strict decode of nested lists
    Matrix.identity(3)
    Matrix.random_integers(2, 3, rng=np.random.default_rng(0))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import ToleranceTier, ROUNDTRIP
from pymatrix.core.exceptions import DecodeError, KernelInvariantError, ValidationError
from pymatrix.core.validation import Dimensions, check_cell, check_rectangular


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable dense matrix of float64 values.

    May hold the explicit empty shape (0, 0) or a zero-column shape so that
    decoded empty input reaches the shape validator, which rejects it.
    Results of kernel operations are always non-empty.
    """
    _data: NDArray[np.float64]

    @classmethod
    def _build(cls, data: NDArray) -> Matrix:
        """Internal builder. Takes ownership of ``data``."""
        if data.ndim != 2:
            raise KernelInvariantError(
                f"Matrix buffer must be 2D, got {data.ndim}D with shape {data.shape}"
            )
        data = np.ascontiguousarray(data, dtype=np.float64)
        data.flags.writeable = False
        return cls(_data=data)

    @classmethod
    def from_rows(cls, rows: Any, name: str | None = None) -> Matrix:
        """
        Build a Matrix from a sequence of rows of numbers.

        Fails closed on the first malformed element: the outer value and
        every row must be a list or tuple, rows must share one length and
        every cell must be a finite real number. Zero rows give the explicit
        empty matrix.

        Parameters
        ----------
        rows : list or tuple of lists or tuples
            Row-major cell values.
        name : str, optional
            Operand name used as the error context.

        Raises
        ------
        DecodeError
            Non-array outer value or row, or a non-numeric cell.
        ShapeError
            Rows of differing length ('jagged').
        """
        prefix = f"{name}: " if name else ""
        if not isinstance(rows, (list, tuple)):
            raise DecodeError(
                f"{prefix}expected an array of rows, got {type(rows).__name__}",
                operand=name,
            )

        for i, row in enumerate(rows):
            if not isinstance(row, (list, tuple)):
                raise DecodeError(
                    f"{prefix}row {i} is not an array, got {type(row).__name__}",
                    operand=name,
                    row=i,
                )

        if len(rows) == 0:
            return cls._build(np.zeros((0, 0)))

        check_rectangular(rows, name)

        data = np.empty((len(rows), len(rows[0])), dtype=np.float64)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                data[i, j] = check_cell(value, i, j, name)

        return cls._build(data)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """All-zero matrix."""
        _check_size(rows, cols)
        return cls._build(np.zeros((rows, cols)))

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        """All-ones matrix."""
        _check_size(rows, cols)
        return cls._build(np.ones((rows, cols)))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        _check_size(n, n)
        return cls._build(np.eye(n))

    @classmethod
    def random_integers(
        cls,
        rows: int,
        cols: int,
        low: int = -9,
        high: int = 9,
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """
        Matrix of uniformly drawn integers in [low, high], stored as floats.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Source of randomness. A fresh default_rng() if omitted.
        """
        _check_size(rows, cols)
        if low > high:
            raise ValidationError(f"low: must not exceed high ({low} > {high})")
        if rng is None:
            rng = np.random.default_rng()
        return cls._build(rng.integers(low, high, size=(rows, cols), endpoint=True).astype(np.float64))

    # === Shape ===

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def dimensions(self) -> Dimensions:
        """(rows, cols) as a Dimensions value."""
        return Dimensions(rows=self.n_rows, cols=self.n_cols)

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    # === Access ===

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the underlying buffer."""
        return self._data

    def to_array(self) -> NDArray[np.float64]:
        """Writable copy of the underlying buffer."""
        return self._data.copy()

    def to_rows(self) -> list[list[float]]:
        """Nested lists of Python floats (exact values, no formatting)."""
        return self._data.tolist()

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, tuple):
            return float(self._data[index])
        return self._data[index]

    # === Comparison ===

    def equals(self, other: Matrix) -> bool:
        """Exact cell-by-cell equality with matching shapes."""
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, tier: ToleranceTier = ROUNDTRIP) -> bool:
        """Cell-by-cell agreement within a tolerance tier."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def __repr__(self) -> str:
        return f"Matrix({self.to_rows()!r})"


def as_matrix(value: Any, name: str | None = None) -> Matrix:
    """Return ``value`` if it is already a Matrix, else decode it from rows."""
    if isinstance(value, Matrix):
        return value
    return Matrix.from_rows(value, name)


def _check_size(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValidationError(
            f"size: rows and cols must be at least 1, got {rows}x{cols}"
        )


MatrixLike = Matrix | Sequence[Sequence[float]]
