"""Exception handlers that shape error responses."""

from __future__ import annotations

import logging

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.error import ErrorResponse, FieldError

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(
            FieldError(
                field=".".join(loc) if loc else "body",
                message=error.get("msg", "Invalid value"),
                code=error.get("type", "value_error"),
            )
        )
    return errors


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed requests with 400 and name the offending fields."""
    body = ErrorResponse(detail="Request validation failed", errors=_field_errors(exc))
    logger.warning(
        "Rejected %s %s: %s",
        request.method,
        request.url.path,
        ", ".join(error.field for error in body.errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Log unexpected failures and return a generic 500."""
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    headers = {}
    request_id = correlation_id.get()
    if request_id:
        headers["X-Request-ID"] = request_id
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
