"""
Entry points for row reduction.

rref() returns just the reduced matrix; reduce() returns the full
RREFSolution (rank, pivots, optional step trace, timing, warnings).
"""

from __future__ import annotations

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    CLEANUP_TOLERANCE,
    PIVOT_TOLERANCE,
    check_tolerances,
)
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.result import Result
from pymatrix.core.validation import validate
from pymatrix.rref._elimination import gauss_jordan, trace_info
from pymatrix.rref.solution import RREFParams, RREFSolution


BACKEND_NAME = 'cpu_gauss_jordan'


def reduce(
    A: MatrixLike,
    *,
    record_steps: bool = False,
    pivot_tol: float = PIVOT_TOLERANCE,
    cleanup_tol: float = CLEANUP_TOLERANCE,
) -> RREFSolution:
    """
    Reduce a matrix to row-reduced echelon form.

    Gauss-Jordan elimination with partial pivoting on a private copy of A.
    Singular, rank-deficient and non-square inputs all succeed: columns
    without a usable pivot become free columns and produce trailing zero
    rows.

    Args:
        A: Matrix or nested sequences of numbers
        record_steps: If True, record every row operation with a snapshot
        pivot_tol: Candidate pivots and elimination factors below this
            magnitude are treated as zero
        cleanup_tol: Cells below this magnitude are snapped to 0 at the end

    Returns:
        RREFSolution with reduced matrix, rank, pivot columns and metadata

    Raises:
        DecodeError: If A is not an array of numbers
        ShapeError: If A is empty or jagged
        NumericalError: If finite input overflows during elimination
        ValidationError: If the tolerances are unusable

    Example:
        >>> sol = reduce([[1, 2], [2, 4]])
        >>> sol.reduced.to_rows()
        [[1.0, 2.0], [0.0, 0.0]]
        >>> sol.rank, sol.free_columns
        (1, (1,))
    """
    check_tolerances(pivot_tol, cleanup_tol)

    source = as_matrix(A, 'A')
    validate(source, 'A')

    timer = Timer()
    timer.start()

    with timer.section('copy'):
        work = source.to_array()

    with timer.section('elimination'):
        trace = gauss_jordan(work, pivot_tol, cleanup_tol, record_steps=record_steps)

    timer.stop()

    warnings_list = [
        f"column {col}: largest candidate pivot {max_abs:.3e} is below "
        f"pivot_tol {pivot_tol:g}, treated as zero"
        for col, max_abs in trace.skipped
    ]

    info = trace_info(trace, source.shape)
    info['pivot_tol'] = pivot_tol
    info['cleanup_tol'] = cleanup_tol

    result = Result(
        params=RREFParams(
            reduced=Matrix._build(work),
            pivot_columns=tuple(trace.pivot_columns),
            steps=tuple(trace.steps),
        ),
        info=info,
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(warnings_list),
    )
    return RREFSolution(_result=result, _source=source)


def rref(A: MatrixLike) -> Matrix:
    """
    Row-reduced echelon form of A.

    Fails when A is not a valid matrix, or when finite input overflows
    during elimination; otherwise always succeeds.

    Example:
        >>> rref([[2, 4], [1, 3]]).to_rows()
        [[1.0, 0.0], [0.0, 1.0]]
    """
    return reduce(A).reduced
