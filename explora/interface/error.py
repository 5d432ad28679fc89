"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from explora.domain.error import DomainError, LocationValidationError, NotFoundError


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _location_validation_handler(
    request: Request, exc: LocationValidationError
) -> JSONResponse:
    logfire.warn(
        "Location rejected", path=request.url.path, location=exc.location_name
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "errors": exc.errors},
    )


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Domain error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logfire.warn("Validation error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Unexpected error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers, most specific error first.

    - NotFoundError: 404
    - LocationValidationError: 400 with the full error list
    - other DomainError and ValueError: 400
    - anything else: 500
    """
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(LocationValidationError, _location_validation_handler)
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(ValueError, _value_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
