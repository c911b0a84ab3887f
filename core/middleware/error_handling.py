"""
Error handling for the pipeline API.

Maps domain exceptions, request validation failures and store errors onto a
single JSON envelope::

    {"error": {"code": ..., "message": ..., "path": ..., "method": ...}}

Messages are sanitized so credentials and identifiers never leak into
responses or logs.
"""

import logging
import re
import traceback
from typing import Any, Callable, Optional
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError, IntegrityError, OperationalError

from core.exceptions import PipelineError

logger = logging.getLogger(__name__)

# Patterns for sensitive data that should never be echoed back
SENSITIVE_PATTERNS = [
    re.compile(r'password["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'token["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'api[_-]?key["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'secret["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'authorization["\s:]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),  # SSN
    re.compile(r'\b\d{16}\b'),  # Credit card
]


def sanitize_error_message(message: Any) -> str:
    """Remove sensitive information from an error message."""
    sanitized = str(message)
    for pattern in SENSITIVE_PATTERNS:
        sanitized = pattern.sub('[REDACTED]', sanitized)
    return sanitized


def get_safe_error_details(exc: Exception, include_details: bool = False) -> dict[str, Any]:
    """
    Extract safe error details without exposing sensitive information.

    Args:
        exc: The exception to extract details from
        include_details: Whether to include the traceback (development only)
    """
    details = {
        "type": type(exc).__name__,
        "message": sanitize_error_message(str(exc)),
    }
    if include_details:
        details["traceback"] = traceback.format_exc()
    return details


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic validation errors into field/message/type triples."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": sanitize_error_message(error["msg"]),
            "type": error["type"],
        })
    return errors


def error_body(
    code: str,
    message: str,
    path: str,
    method: str,
    details: Optional[Any] = None,
) -> dict[str, Any]:
    body = {
        "error": {
            "code": code,
            "message": message,
            "path": path,
            "method": method,
        }
    }
    if details is not None:
        body["error"]["details"] = details
    return body


def classify_exception(
    exc: Exception,
    path: str,
    method: str,
    debug: bool = False,
) -> tuple[int, str, str, Optional[Any]]:
    """
    Map an exception to (status_code, error_code, message, details).

    Domain errors carry their own status and code. Store errors are split
    into conflicts (409), unreachable store (503) and everything else (500).
    """
    if isinstance(exc, PipelineError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{type(exc).__name__}: {method} {path} - {sanitize_error_message(exc.message)}")
        return exc.status_code, exc.error_code, sanitize_error_message(exc.message), exc.detail

    if isinstance(exc, StarletteHTTPException):
        message = sanitize_error_message(exc.detail)
        logger.warning(f"HTTP exception: {method} {path} - Status: {exc.status_code}, Message: {message}")
        return exc.status_code, "HTTP_EXCEPTION", message, None

    if isinstance(exc, RequestValidationError):
        details = format_validation_errors(exc)
        logger.warning(f"Validation error: {method} {path} - Errors: {details}")
        return status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed", details

    if isinstance(exc, IntegrityError):
        logger.error(f"Database integrity error: {method} {path}", exc_info=not debug)
        details = get_safe_error_details(exc, include_details=True) if debug else None
        return status.HTTP_409_CONFLICT, "INTEGRITY_ERROR", "Database integrity constraint violated", details

    if isinstance(exc, OperationalError):
        logger.error(f"Database operational error: {method} {path}", exc_info=True)
        return (
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "STORE_UNAVAILABLE",
            "Database service temporarily unavailable",
            None,
        )

    if isinstance(exc, SQLAlchemyError):
        logger.error(f"SQLAlchemy error: {method} {path}", exc_info=not debug)
        details = get_safe_error_details(exc, include_details=True) if debug else None
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "DATABASE_ERROR", "A database error occurred", details

    if isinstance(exc, TimeoutError):
        logger.error(f"Timeout error: {method} {path}")
        return status.HTTP_504_GATEWAY_TIMEOUT, "TIMEOUT", "The request timed out", None

    logger.error(
        f"Unhandled exception: {method} {path} - "
        f"{type(exc).__name__}: {sanitize_error_message(str(exc))}",
        exc_info=True,
    )
    details = get_safe_error_details(exc, include_details=True) if debug else None
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", "An unexpected error occurred", details


class ErrorHandlingMiddleware:
    """
    Last-resort ASGI error boundary.

    Catches anything that escapes the routers and exception handlers and
    renders it with the same envelope the handlers use.
    """

    def __init__(self, app: Callable, debug: bool = False):
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = self._handle_exception(exc, scope)
            await response(scope, receive, send)

    def _handle_exception(self, exc: Exception, scope: dict) -> Response:
        path = scope.get("path", "unknown")
        method = scope.get("method", "unknown")
        status_code, code, message, details = classify_exception(exc, path, method, self.debug)

        body = error_body(code, message, path, method, details)

        headers = dict(scope.get("headers") or [])
        request_id = headers.get(b"x-request-id")
        if request_id:
            body["error"]["request_id"] = request_id.decode()

        return JSONResponse(status_code=status_code, content=body)


def setup_error_handlers(app, debug: bool = False):
    """
    Register exception handlers on a FastAPI application.

    Args:
        app: FastAPI application instance
        debug: Include tracebacks for unexpected errors
    """

    async def _render(request: Request, exc: Exception) -> JSONResponse:
        path = str(request.url.path)
        status_code, code, message, details = classify_exception(exc, path, request.method, debug)
        return JSONResponse(
            status_code=status_code,
            content=error_body(code, message, path, request.method, details),
        )

    app.add_exception_handler(PipelineError, _render)
    app.add_exception_handler(StarletteHTTPException, _render)
    app.add_exception_handler(RequestValidationError, _render)
    app.add_exception_handler(SQLAlchemyError, _render)
    app.add_exception_handler(Exception, _render)
