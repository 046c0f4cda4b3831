"""
PyMatrix HTTP API.

Exposes the kernel over JSON:

    POST /api/matrix/add        {"A": [[...]], "B": [[...]]}
    POST /api/matrix/subtract   {"A": [[...]], "B": [[...]]}
    POST /api/matrix/multiply   {"A": [[...]], "B": [[...]]}
    POST /api/matrix/rref       {"A": [[...]]}
    GET  /api/health

Every response body is {"result": ..., "error": ...}. Kernel and request
errors are returned with status 400.

Usage:
    uvicorn pymatrix.server:app --port 8080
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pymatrix import __version__
from pymatrix.boundary.wire import (
    MatrixResponse,
    OneMatrixRequest,
    TwoMatrixRequest,
    describe_error,
    execute,
)

app = FastAPI(title="PyMatrix", description="Dense matrix kernel", version=__version__)


@app.exception_handler(RequestValidationError)
async def request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the {result, error} shape with status 400."""
    response = MatrixResponse.failure(describe_error(exc.errors()[0]))
    return JSONResponse(status_code=400, content=response.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (404, 405) in the {result, error} shape."""
    response = MatrixResponse.failure(f"request: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(),
        headers=getattr(exc, 'headers', None),
    )


def _finish(result: MatrixResponse, response: Response) -> MatrixResponse:
    if not result.ok:
        response.status_code = 400
    return result


# ============================================================================
# API Endpoints
# ============================================================================

# Sync handlers: FastAPI runs them in its threadpool

@app.post("/api/matrix/add")
def matrix_add(body: TwoMatrixRequest, response: Response) -> MatrixResponse:
    return _finish(execute('add', body), response)


@app.post("/api/matrix/subtract")
def matrix_subtract(body: TwoMatrixRequest, response: Response) -> MatrixResponse:
    return _finish(execute('subtract', body), response)


@app.post("/api/matrix/multiply")
def matrix_multiply(body: TwoMatrixRequest, response: Response) -> MatrixResponse:
    return _finish(execute('multiply', body), response)


@app.post("/api/matrix/rref")
def matrix_rref(body: OneMatrixRequest, response: Response) -> MatrixResponse:
    return _finish(execute('rref', body), response)


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
