"""
Calling-boundary adapters.

Two bridges share one decoding contract (arrays of rows of finite real
numbers, rectangular, zero rows allowed as an explicit empty matrix):

    wire: JSON values in, {result, error} envelopes out
    host: in-process values (numpy, pandas, torch, sequences) in, numpy out
"""

from pymatrix.boundary.wire import (
    MatrixResponse,
    OneMatrixRequest,
    TwoMatrixRequest,
    decode,
    describe_error,
    encode,
    execute,
    handle,
    handle_body,
)
from pymatrix.boundary.host import (
    from_host,
    to_host,
    matrix_add,
    matrix_subtract,
    matrix_multiply,
    matrix_rref,
)

__all__ = [
    # Wire
    "MatrixResponse",
    "OneMatrixRequest",
    "TwoMatrixRequest",
    "decode",
    "describe_error",
    "encode",
    "execute",
    "handle",
    "handle_body",
    # Host
    "from_host",
    "to_host",
    "matrix_add",
    "matrix_subtract",
    "matrix_multiply",
    "matrix_rref",
]
