"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from board.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ErrorCode:
    """Error codes returned in the ``code`` field of error bodies."""

    UNAUTHENTICATED = "unauthenticated"
    INVALID_ARGUMENT = "invalid-argument"
    FAILED_PRECONDITION = "failed-precondition"
    NOT_FOUND = "not-found"
    INTERNAL = "internal"


# Checked in order; subclasses must come before their bases
DOMAIN_ERROR_MAP: list[tuple[type[DomainError], str, int]] = [
    (NotAuthenticatedError, ErrorCode.UNAUTHENTICATED, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, ErrorCode.INVALID_ARGUMENT, status.HTTP_400_BAD_REQUEST),
    (
        BusinessRuleViolationError,
        ErrorCode.FAILED_PRECONDITION,
        status.HTTP_400_BAD_REQUEST,
    ),
    (NotFoundError, ErrorCode.NOT_FOUND, status.HTTP_404_NOT_FOUND),
]


def error_response(code: str, detail: str, status_code: int) -> JSONResponse:
    """Build the JSON error body."""
    return JSONResponse(
        status_code=status_code, content={"code": code, "detail": detail}
    )


def classify(error: Exception) -> tuple[str, int]:
    """Return the (code, HTTP status) pair for an exception."""
    for error_type, code, status_code in DOMAIN_ERROR_MAP:
        if isinstance(error, error_type):
            return code, status_code
    return ErrorCode.INTERNAL, status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code, status_code = classify(exc)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Unmapped domain error", path=request.url.path, error=str(exc)
        )
        return error_response(code, "internal error", status_code)

    logfire.warn(
        "Request rejected", path=request.url.path, code=code, error=str(exc)
    )
    return error_response(code, str(exc), status_code)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn("Invalid request payload", path=request.url.path)
    return error_response(
        ErrorCode.INVALID_ARGUMENT,
        "; ".join(e.get("msg", "invalid") for e in exc.errors()),
        status.HTTP_400_BAD_REQUEST,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unexpected error", path=request.url.path)
    return error_response(
        ErrorCode.INTERNAL, "internal error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
