"""
Gauss-Jordan elimination with partial pivoting.

Operates in place on a private float64 working buffer owned by the caller
(never on a Matrix buffer). Row operations are vectorized across columns;
rows are visited one at a time so that near-zero factors can be skipped
and each operation can be recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.formatting import to_fraction
from pymatrix.core.exceptions import KernelInvariantError, NumericalError


RowOperationKind = Literal['swap', 'scale', 'eliminate']


@dataclass(frozen=True)
class RowOperation:
    """
    One recorded elementary row operation.

    Attributes:
        kind: 'swap' (target <-> source), 'scale' (target <- target / factor)
            or 'eliminate' (target <- target - factor * source)
        target: Row that was changed (0-based)
        source: Other row involved; equals target for 'scale'
        factor: Pivot value for 'scale', multiplier for 'eliminate',
            None for 'swap'
        snapshot: Read-only copy of the working matrix after the operation
    """
    kind: RowOperationKind
    target: int
    source: int
    factor: float | None
    snapshot: NDArray[np.float64] = field(repr=False)

    def describe(self) -> str:
        """Human-readable form with 1-based row labels."""
        t, s = self.target + 1, self.source + 1
        if self.kind == 'swap':
            return f"R{t} <-> R{s}"
        if self.kind == 'scale':
            return f"R{t} <- (1/{to_fraction(self.factor)})·R{t}"
        sign = '+' if self.factor < 0 else '-'
        return f"R{t} <- R{t} {sign} {to_fraction(abs(self.factor))}·R{s}"


@dataclass
class EliminationTrace:
    """Mutable bookkeeping filled in by gauss_jordan()."""
    pivot_columns: list[int] = field(default_factory=list)
    steps: list[RowOperation] = field(default_factory=list)
    # (column, largest candidate magnitude) for columns skipped on nonzero noise
    skipped: list[tuple[int, float]] = field(default_factory=list)


def _snapshot(work: NDArray[np.float64]) -> NDArray[np.float64]:
    snap = work.copy()
    snap.flags.writeable = False
    return snap


def gauss_jordan(
    work: NDArray[np.float64],
    pivot_tol: float,
    cleanup_tol: float,
    record_steps: bool = False,
) -> EliminationTrace:
    """
    Reduce ``work`` to row-reduced echelon form in place.

    For each column, the row with the largest magnitude at or below the
    pivot cursor becomes the pivot (first such row on ties). Columns whose
    best candidate is below ``pivot_tol`` are skipped without moving the
    cursor. The pivot row is scaled so the pivot is exactly 1, then every
    other row whose factor is at least ``pivot_tol`` in magnitude is
    eliminated. Finally cells below ``cleanup_tol`` are set to 0.

    Args:
        work: Writable 2D float64 array, modified in place
        pivot_tol: Pivot acceptance and factor skip threshold
        cleanup_tol: Final zero-snapping threshold
        record_steps: Record every row operation with a snapshot

    Returns:
        EliminationTrace with pivot columns, optional steps and skipped
        columns

    Raises:
        NumericalError: If a row operation overflows to inf or NaN
    """
    n_rows, n_cols = work.shape
    trace = EliminationTrace()

    row = 0
    with np.errstate(over='ignore', invalid='ignore'):
        for col in range(n_cols):
            if row >= n_rows:
                break

            candidates = np.abs(work[row:, col])
            offset = int(np.argmax(candidates))
            max_abs = float(candidates[offset])
            if max_abs < pivot_tol:
                if max_abs > 0.0:
                    trace.skipped.append((col, max_abs))
                continue

            pivot_row = row + offset
            if pivot_row != row:
                work[[row, pivot_row]] = work[[pivot_row, row]]
                if record_steps:
                    trace.steps.append(
                        RowOperation('swap', row, pivot_row, None, _snapshot(work))
                    )

            pivot = float(work[row, col])
            work[row, col:] /= pivot
            _check_row_finite(work, row, col, 'scaling')
            if record_steps and abs(pivot - 1.0) > pivot_tol:
                trace.steps.append(
                    RowOperation('scale', row, row, pivot, _snapshot(work))
                )

            for i in range(n_rows):
                if i == row:
                    continue
                factor = float(work[i, col])
                if abs(factor) < pivot_tol:
                    continue
                work[i, col:] -= factor * work[row, col:]
                _check_row_finite(work, i, col, 'eliminating')
                if record_steps:
                    trace.steps.append(
                        RowOperation('eliminate', i, row, factor, _snapshot(work))
                    )

            trace.pivot_columns.append(col)
            row += 1

    work[np.abs(work) < cleanup_tol] = 0.0

    _check_pivots(work, trace.pivot_columns)
    return trace


def _check_row_finite(work: NDArray[np.float64], i: int, col: int, action: str) -> None:
    """Overflow in a row operation ends the reduction."""
    if not np.all(np.isfinite(work[i, col:])):
        raise NumericalError(
            f"rref: row {i} overflowed to a non-finite value while {action} "
            f"column {col}"
        )


def _check_pivots(work: NDArray[np.float64], pivot_columns: list[int]) -> None:
    """Each pivot cell must be exactly 1 after reduction."""
    for r, c in enumerate(pivot_columns):
        if work[r, c] != 1.0:
            raise KernelInvariantError(
                f"rref: pivot at ({r}, {c}) is {work[r, c]!r}, expected 1.0"
            )


def trace_info(trace: EliminationTrace, shape: tuple[int, int]) -> dict[str, Any]:
    """Summary metadata for a finished elimination."""
    n_rows, n_cols = shape
    return {
        'method': 'gauss_jordan',
        'pivoting': 'partial',
        'rank': len(trace.pivot_columns),
        'n_rows': n_rows,
        'n_cols': n_cols,
        'n_steps': len(trace.steps),
    }
