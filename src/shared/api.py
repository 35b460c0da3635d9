"""HTTP mapping of the shared error taxonomy."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shared.errors import DomainError, ErrorKind, error_kind

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_BUSINESS_STATE: 400,
    ErrorKind.CONSTRAINT_VIOLATION: 400,
    ErrorKind.TRANSIENT: 503,
    ErrorKind.UNEXPECTED: 500,
}


def error_response(exc: Exception) -> JSONResponse:
    kind = error_kind(exc)
    return JSONResponse(
        status_code=_STATUS_BY_KIND[kind],
        content={"error": kind.value, "message": str(exc)},
    )


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    return error_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    """Install protean's handlers, then the kind-based mapping on top of them."""
    register_exception_handlers(app)

    app.add_exception_handler(DomainError, _handle_error)
    app.add_exception_handler(ConnectionError, _handle_error)
    app.add_exception_handler(TimeoutError, _handle_error)
