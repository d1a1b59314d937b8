"""Exception handlers rendering errors as JSON.

Every error body has a ``message``; validation failures add an ``errors``
list of ``{field, message}`` entries.
"""

from typing import Any

from dishka.exceptions import NoFactoryError
import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from stackit.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Checked in order, first match wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def _field_name(loc: tuple[Any, ...]) -> str:
    # Drop the request part ("body", "query", ...) FastAPI puts first
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "cookie")]
    return ".".join(parts) or "request"


def _validation_body(errors: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "message": "Validation failed",
        "errors": [
            {"field": _field_name(tuple(e.get("loc", ()))), "message": e["msg"]}
            for e in errors
        ],
    }


async def _rollback_request_session(request: Request) -> None:
    """Discard the request's pending writes.

    A handled error never reaches the request container, whose session
    would otherwise commit on close. Containers without a database session
    (in-memory persistence) have nothing to roll back.
    """
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    try:
        session = await container.get(AsyncSession)
    except NoFactoryError:
        return
    await session.rollback()


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status."""
    await _rollback_request_session(request)

    status_code = next(
        (code for error, code in STATUS_BY_ERROR if isinstance(exc, error)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    logfire.info(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
        reason=exc.message,
    )

    body: dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationError):
        body["errors"] = [
            {"field": e.field, "message": e.message} for e in exc.errors
        ]
    return JSONResponse(status_code=status_code, content=body)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request payloads as validation failures."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_validation_body(list(exc.errors())),
    )


async def pydantic_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Render model validation failures raised inside use cases."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_validation_body(list(exc.errors())),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
