"""
Domain exception → HTTP mapping.

Routers catch DOMAIN_ERRORS around handler calls and re-raise
`to_http_exception(e)`; the app-level handlers registered here shape every
error body as {"error": ...}.
"""

import logging
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from marketchat.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidStateError,
)
from marketchat.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)

DOMAIN_ERRORS = (
    EntityNotFoundError,
    ConflictError,
    InvalidStateError,
    DomainValidationError,
)

_STATUS_BY_FAMILY = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, MetricsErrorType.NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT, MetricsErrorType.CONFLICT),
    (InvalidStateError, status.HTTP_409_CONFLICT, MetricsErrorType.INVALID_STATE),
    (DomainValidationError, status.HTTP_400_BAD_REQUEST, MetricsErrorType.INVALID_INPUT),
)


def to_http_exception(exc: Exception) -> HTTPException:
    for family, status_code, error_type in _STATUS_BY_FAMILY:
        if isinstance(exc, family):
            increment_error(error_type)
            logger.info(f"{type(exc).__name__} -> {status_code}: {exc}")
            return HTTPException(status_code=status_code, detail=str(exc))
    raise TypeError(f"Not a domain error: {type(exc).__name__}")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        increment_error(MetricsErrorType.INVALID_INPUT)
        logger.info(f"Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation error", "details": jsonable_encoder(jsonable_errors(errors))},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def jsonable_errors(errors) -> list[dict]:
    """Pydantic error dicts may carry the raw exception under "ctx"."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in errors
    ]
