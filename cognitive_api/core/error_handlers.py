from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.errors import AppError, RemoteServiceError

logger = get_logger(__name__)


@contextmanager
def failure_message(message: str) -> Iterator[None]:
    """Handler boundary for remote work.

    Remote and polling failures keep their diagnostic in `error` and take the
    endpoint's summary as `message`. Anything unexpected raised by a gateway is
    reported the same way. Client errors pass through untouched.
    """
    try:
        yield
    except RemoteServiceError as exc:
        exc.details["error"] = exc.details.get("error") or exc.message
        exc.message = message
        raise
    except AppError:
        raise
    except Exception as exc:
        raise RemoteServiceError(message, error=str(exc) or type(exc).__name__) from exc


async def handle_app_error(request: Request, exc: AppError):
    """Handler for application-specific errors."""
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        "request_failed",
        extra={
            "error_code": exc.error_code,
            "path": request.url.path,
            "http_status": exc.http_status,
            "error": exc.details.get("error") or exc.message,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400), not 422."""
    first_error = exc.errors()[0] if exc.errors() else {}
    loc = first_error.get("loc", [])
    field = ".".join(str(part) for part in loc if part != "body")
    msg = first_error.get("msg", "Validation failed")
    detail = f"{field}: {msg}" if field else msg

    logger.warning("request_validation_failed", extra={"path": request.url.path, "detail": detail})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "error": detail, "code": "VALIDATION_ERROR"},
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    """Handler for standard HTTP exceptions (404, 405, etc.)."""
    logger.warning(
        "http_exception",
        extra={"path": request.url.path, "status_code": exc.status_code, "detail": exc.detail},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "code": f"HTTP_{exc.status_code}"},
        headers=getattr(exc, "headers", None),
    )


async def handle_unknown_error(request: Request, exc: Exception):
    """Handler for unexpected 500 errors."""
    logger.exception(
        "unexpected_error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "code": "INTERNAL_SERVER_ERROR"},
    )


def register_error_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(Exception, handle_unknown_error)
