"""Map exceptions to enveloped JSON error responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vidtalk.domain.error import (
    DomainError,
    InvalidParentError,
    InvalidTargetError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from vidtalk.interface.api.schemas import failure
from vidtalk.interface.error import AuthenticationRequiredError

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Most specific class wins: Starlette resolves handlers along the MRO
_STATUS_BY_ERROR: dict[type[Exception], int] = {
    AuthenticationRequiredError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidParentError: status.HTTP_400_BAD_REQUEST,
    InvalidTargetError: status.HTTP_400_BAD_REQUEST,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=failure(message).model_dump(),
    )


async def known_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        code for cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, cls)
    )
    logfire.info(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(status_code, str(exc))


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return error_response(422, "; ".join(messages) or "Invalid request")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error mapping on an application."""
    for error_type in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, known_error_handler)
    # PersistenceError and any other domain failure surface as 500
    app.add_exception_handler(PersistenceError, internal_error_handler)
    app.add_exception_handler(DomainError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
