"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from devforum.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)

# Most specific first; the first matching class wins
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors raised by use cases and services."""
    code = status_for(exc)
    logfire.warn(
        "Domain error",
        error=str(exc),
        exception_type=exc.__class__.__name__,
        status_code=code,
        path=request.url.path,
    )
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "type": exc.__class__.__name__},
        headers=headers,
    )


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Handle pydantic validation failures raised past request parsing.

    Route bodies are validated by FastAPI (422); this covers values such as
    tags and usernames validated while building use case requests.
    """
    logfire.warn(
        "Invalid input",
        error_count=exc.error_count(),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": [
                {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                for e in exc.errors()
            ],
            "type": "InvalidInputError",
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
