"""
Exception handlers for the FastAPI application.

Every error leaves the API in the same envelope:
``{statusCode, timestamp, path, method, error, message, details?}``.
Domain errors carry their ``kind`` in ``error``; other errors use the HTTP
reason phrase.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions import OrderAppError

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    message: Any,
    details: Optional[Any] = None,
    headers: Optional[dict] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    if error is None:
        try:
            error = HTTPStatus(status_code).phrase
        except ValueError:
            error = "Error"

    content = {
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        "method": request.method,
        "error": error,
        "message": message,
    }
    if details is not None:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def order_app_error_handler(request: Request, exc: OrderAppError) -> JSONResponse:
    logger.info(f"{exc.kind} on {request.method} {request.url.path}: {exc.message}")
    return error_response(
        request,
        exc.status_code,
        exc.message,
        details=exc.details,
        error=exc.kind,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        request,
        exc.status_code,
        exc.detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        details=errors,
        error="InvalidRequest",
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        error="InternalError",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderAppError, order_app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
