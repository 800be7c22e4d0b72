"""Mapping from domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from atelier.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    StorageFailureError,
    ValidationError,
)

STORAGE_FAILURE_MESSAGE = "Something went wrong. Please try again."


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def _not_authorized(request: Request, exc: NotAuthorizedError) -> JSONResponse:
    logfire.warn("Forbidden", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)}
    )


async def _bad_request(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def _conflict(request: Request, exc: BusinessRuleViolationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def _storage_failure(
    request: Request, exc: StorageFailureError
) -> JSONResponse:
    # Callers cannot tell which step failed, so the message stays generic
    logfire.error(
        "Storage failure", path=request.url.path, operation=exc.operation
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": STORAGE_FAILURE_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for the domain error taxonomy.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(NotAuthorizedError, _not_authorized)
    app.add_exception_handler(ValidationError, _bad_request)
    app.add_exception_handler(ValueError, _bad_request)
    app.add_exception_handler(BusinessRuleViolationError, _conflict)
    app.add_exception_handler(StorageFailureError, _storage_failure)
