"""
JSON-object bridge.

Translates wire payloads into kernel calls and kernel outcomes into the
response envelope used by every calling boundary:

    two-operand request  {"A": [[...]], "B": [[...]]}   add / subtract / multiply
    one-operand request  {"A": [[...]]}                 rref
    response             {"result": [[...]] | null, "error": "<context>: <detail>" | null}

Requests and responses are pydantic models. Schema errors from pydantic are
rendered in the same "<context>: <detail>" form as kernel errors, so callers
see one error vocabulary whichever layer rejected the input. Floats are
passed through unformatted so that a JSON encoder writes their shortest
round-trip form.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import numpy as np
import pydantic
from pydantic import (
    BaseModel,
    StrictFloat,
    StrictInt,
    ValidationInfo,
    field_validator,
    model_validator,
)

from pymatrix.core.exceptions import (
    KernelInvariantError,
    NumericalError,
    PyMatrixError,
    ValidationError,
)
from pymatrix.core.matrix import Matrix
from pymatrix.ops.elementwise import add, subtract, multiply
from pymatrix.rref.solvers import rref


BINARY_OPERATIONS: dict[str, Callable[[Matrix, Matrix], Matrix]] = {
    'add': add,
    'subtract': subtract,
    'multiply': multiply,
}

UNARY_OPERATIONS: dict[str, Callable[[Matrix], Matrix]] = {
    'rref': rref,
}

# Booleans and numeric strings are not numbers on the wire
Rows = list[list[Union[StrictInt, StrictFloat]]]


# === Matrix <-> wire value ===

def decode(value: Any, name: str | None = None) -> Matrix:
    """
    Decode a wire matrix (array of arrays of numbers).

    An empty outer array decodes to the explicit empty matrix; the shape
    validator rejects it later with 'matrix has zero rows'.

    Raises:
        DecodeError: Non-array value or row, non-numeric or non-finite cell
        ShapeError: Jagged rows
    """
    return Matrix.from_rows(value, name)


def encode(matrix: Matrix) -> list[list[float]]:
    """
    Encode a matrix as nested lists of Python floats.

    Raises:
        NumericalError: If the matrix holds NaN or Inf (e.g. after
            overflow), which JSON cannot carry
    """
    data = matrix.data
    if not np.all(np.isfinite(data)):
        n_nan = int(np.sum(np.isnan(data)))
        n_inf = int(np.sum(np.isinf(data)))
        raise NumericalError(
            f"result: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
    return matrix.to_rows()


# === Requests ===

def _check_rows(rows: Rows, name: str) -> Rows:
    try:
        decode(rows, name)
    except PyMatrixError as e:
        raise ValueError(str(e)) from e
    return rows


class TwoMatrixRequest(BaseModel):
    """{A, B} request for add, subtract and multiply."""

    A: Rows
    B: Rows

    model_config = {"frozen": True}

    @field_validator("A", "B")
    @classmethod
    def validate_rows(cls, v: Rows, info: ValidationInfo) -> Rows:
        """Rectangular rows of finite numbers."""
        return _check_rows(v, info.field_name)

    def matrices(self) -> tuple[Matrix, Matrix]:
        return decode(self.A, 'A'), decode(self.B, 'B')


class OneMatrixRequest(BaseModel):
    """{A} request for rref."""

    A: Rows

    model_config = {"frozen": True}

    @field_validator("A")
    @classmethod
    def validate_rows(cls, v: Rows, info: ValidationInfo) -> Rows:
        """Rectangular rows of finite numbers."""
        return _check_rows(v, info.field_name)

    def matrices(self) -> tuple[Matrix]:
        return (decode(self.A, 'A'),)


def describe_error(error: dict[str, Any]) -> str:
    """
    Render one pydantic error as "<context>: <detail>".

    Accepts errors from model validation and from FastAPI request parsing
    (whose locations start with 'body').

    Example:
        >>> describe_error({'type': 'missing', 'loc': ('body', 'B'), 'msg': 'Field required'})
        'B: missing from request'
    """
    kind = error['type']
    loc = tuple(error.get('loc', ()))
    if loc and loc[0] == 'body':
        loc = loc[1:]
    ctx = error.get('ctx') or {}
    found = type(error.get('input')).__name__

    if kind == 'json_invalid':
        return f"request: invalid JSON: {ctx.get('error', error['msg'])}"
    if not loc:
        if kind == 'missing':
            return "request: missing JSON body"
        return f"request: expected a JSON object, got {found}"

    name = loc[0]
    if kind == 'missing':
        return f"{name}: missing from request"
    if kind == 'value_error':
        if 'error' in ctx:
            return str(ctx['error'])
        return error['msg'].removeprefix('Value error, ')
    if len(loc) == 1:
        return f"{name}: expected an array of rows, got {found}"
    if len(loc) == 2:
        return f"{name}: row {loc[1]} is not an array, got {found}"
    # Union members append a tag after (row, col)
    return f"{name}: cell ({loc[1]}, {loc[2]}) is not a number, got {found}"


# === Responses ===

class MatrixResponse(BaseModel):
    """
    Response envelope: exactly one of result / error is set.
    """

    result: list[list[float]] | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_exactly_one(self) -> MatrixResponse:
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of result or error must be set")
        return self

    @classmethod
    def success(cls, matrix: Matrix) -> MatrixResponse:
        return cls(result=encode(matrix))

    @classmethod
    def failure(cls, message: str) -> MatrixResponse:
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None


def respond(compute: Callable[[], Matrix]) -> MatrixResponse:
    """
    Run a kernel call and fold its outcome into a MatrixResponse.

    Every PyMatrixError becomes an error response, except
    KernelInvariantError, which propagates.
    """
    try:
        return MatrixResponse.success(compute())
    except KernelInvariantError:
        raise
    except PyMatrixError as e:
        return MatrixResponse.failure(str(e))


# === Dispatch ===

def request_model(op: str) -> type[TwoMatrixRequest] | type[OneMatrixRequest]:
    """
    Request model for ``op``.

    Raises:
        ValidationError: If op is not a known operation
    """
    if op in BINARY_OPERATIONS:
        return TwoMatrixRequest
    if op in UNARY_OPERATIONS:
        return OneMatrixRequest
    known = sorted(BINARY_OPERATIONS) + sorted(UNARY_OPERATIONS)
    raise ValidationError(f"op: unknown operation {op!r}, expected one of {known}")


def execute(op: str, request: TwoMatrixRequest | OneMatrixRequest) -> MatrixResponse:
    """Run ``op`` on an already-validated request."""
    fn = BINARY_OPERATIONS.get(op) or UNARY_OPERATIONS[op]
    return respond(lambda: fn(*request.matrices()))


def handle(op: str, payload: Any) -> MatrixResponse:
    """
    Validate a parsed JSON payload for ``op`` and run it.

    Args:
        op: 'add', 'subtract', 'multiply' or 'rref'
        payload: Parsed JSON value (normally a dict)

    Raises:
        ValidationError: If op is not a known operation
    """
    model = request_model(op)
    try:
        request = model.model_validate(payload)
    except pydantic.ValidationError as e:
        return MatrixResponse.failure(describe_error(e.errors()[0]))
    return execute(op, request)


def handle_body(op: str, body: bytes | str) -> MatrixResponse:
    """Parse a raw JSON body and run ``op`` on it."""
    model = request_model(op)
    try:
        request = model.model_validate_json(body)
    except pydantic.ValidationError as e:
        return MatrixResponse.failure(describe_error(e.errors()[0]))
    return execute(op, request)
