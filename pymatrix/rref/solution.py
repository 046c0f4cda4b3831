"""
RREF solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.formatting import format_matrix
from pymatrix.core.matrix import Matrix
from pymatrix.core.result import Result
from pymatrix.rref._elimination import RowOperation


@dataclass(frozen=True)
class RREFParams:
    """
    Parameter payload for row reduction.

    reduced is the row-reduced echelon form; pivot_columns lists the
    column of each leading 1 in row order; steps is empty unless steps
    were recorded.
    """
    reduced: Matrix
    pivot_columns: tuple[int, ...]
    steps: tuple[RowOperation, ...] = ()


@dataclass
class RREFSolution:
    """
    User-facing RREF result.

    Wraps Result[RREFParams] and provides convenient accessors.
    """
    _result: Result[RREFParams]
    _source: Matrix

    @property
    def reduced(self) -> Matrix:
        """Row-reduced echelon form of the input."""
        return self._result.params.reduced

    @property
    def source(self) -> Matrix:
        """The validated input matrix (unchanged)."""
        return self._source

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        """Number of pivots found."""
        return len(self._result.params.pivot_columns)

    @property
    def free_columns(self) -> tuple[int, ...]:
        """Columns without a pivot (free variables)."""
        pivots = set(self.pivot_columns)
        return tuple(c for c in range(self.reduced.n_cols) if c not in pivots)

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self.reduced.shape)

    @property
    def steps(self) -> tuple[RowOperation, ...]:
        """Recorded row operations (empty unless record_steps=True)."""
        return self._result.params.steps

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Derivation-style text: input, recorded steps, result."""
        lines = ["Gauss-Jordan elimination to RREF", ""]
        lines.append(f"A ({self._source.dimensions}):")
        lines.append(format_matrix(self._source))

        for step in self.steps:
            lines.append("")
            lines.append(f"{step.describe()}  =>")
            lines.append(format_matrix(step.snapshot))

        lines.append("")
        lines.append(f"RREF (rank {self.rank}, pivot columns {list(self.pivot_columns)}):")
        lines.append(format_matrix(self.reduced))

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RREFSolution(shape={self.reduced.dimensions}, rank={self.rank}, "
            f"pivot_columns={self.pivot_columns})"
        )
