"""Global exception handlers.

Every error leaving the API is rendered as an ErrorResponse:
- HTTPException (raised by routes and dependencies) keeps its status code
- RequestValidationError becomes 400 with field-level errors
- anything else becomes 500; details are logged, not returned
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorResponse, FieldError

logger = logging.getLogger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    errors: list[FieldError] | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    http_status = HTTPStatus(status_code)
    body = ErrorResponse(
        error_code=http_status.name,
        message=message,
        status_code=status_code,
        status_message=http_status.phrase,
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _error_response(request, exc.status_code, detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert RequestValidationError to a 400 response with field errors."""
    assert isinstance(exc, RequestValidationError)

    field_errors = []
    for error in exc.errors():
        # ["body", "loginName"] -> "loginName"
        parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(FieldError(
            field=".".join(parts) if parts else "unknown",
            message=error.get("msg", "Validation failed"),
        ))

    logger.info("Invalid request", extra={
        "path": request.url.path,
        "fields": [e.field for e in field_errors],
    })

    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed",
        errors=field_errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", exc_info=exc, extra={
        "path": request.url.path,
        "method": request.method,
    })
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette's HTTPException also covers routing 404/405
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
