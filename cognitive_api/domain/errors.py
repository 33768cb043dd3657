"""Exception hierarchy for the API.

Every error carries the HTTP status and application code it maps to, so the
exception handlers in `cognitive_api.core.error_handlers` can render a uniform
`{message, error, code}` body without knowing the concrete type.
"""

from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message returned to the caller
        error_code: Application-specific error code
        http_status: HTTP status code to return
        details: Additional context (dict)
    """

    error_code: str = "INTERNAL_ERROR"
    http_status: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        http_status: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if http_status is not None:
            self.http_status = http_status
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message, "code": self.error_code}
        if self.details.get("error"):
            body["error"] = self.details["error"]
        return body


class ValidationError(AppError):
    """Missing or too-short input (400). Raised before any remote call."""

    error_code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class UnsupportedMediaError(AppError):
    """Uploaded file has a content type the endpoint does not accept (400)."""

    error_code = "UNSUPPORTED_MEDIA_TYPE"
    http_status = 400

    def __init__(self, content_type: Optional[str], expected: str):
        super().__init__(
            f"Unsupported file type: {content_type or 'unknown'} (expected {expected})",
            details={"content_type": content_type, "expected": expected},
        )


class PayloadTooLargeError(AppError):
    """Uploaded file exceeds the size limit (413)."""

    error_code = "PAYLOAD_TOO_LARGE"
    http_status = 413

    def __init__(self, max_bytes: int):
        super().__init__(
            f"File too large (max: {max_bytes} bytes)",
            details={"max_bytes": max_bytes},
        )


class FeatureDisabledError(AppError):
    """Endpoint exists but its feature flag is off (501)."""

    error_code = "FEATURE_DISABLED"
    http_status = 501


class RemoteServiceError(AppError):
    """The cloud call failed or returned a non-success answer (500).

    `service` names the remote (language, translator, vision, speech); the
    remote's own diagnostic is kept in `details["error"]` so it reaches the
    response body.
    """

    error_code = "REMOTE_SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str, *, service: Optional[str] = None, error: Optional[str] = None):
        super().__init__(message, details={"service": service, "error": error or message})
        self.service = service


class OperationTimeoutError(RemoteServiceError):
    """Polling budget exhausted before the operation reached a terminal status."""

    error_code = "OPERATION_TIMEOUT"

    def __init__(self, operation_id: str, attempts: int, elapsed_seconds: float):
        super().__init__(
            f"Operation {operation_id} did not complete after {attempts} status checks "
            f"({elapsed_seconds:.1f}s)",
        )
        self.operation_id = operation_id
        self.attempts = attempts


class OperationFailedError(RemoteServiceError):
    """The remote service reported the operation as failed."""

    error_code = "OPERATION_FAILED"

    def __init__(self, operation_id: str, diagnostic: Optional[str] = None):
        super().__init__(diagnostic or f"Operation {operation_id} failed")
        self.operation_id = operation_id
        self.diagnostic = diagnostic


class MalformedResultError(RemoteServiceError):
    """Success status but the payload is empty or unusable."""

    error_code = "MALFORMED_RESULT"


class HandleNotFoundError(RemoteServiceError):
    """The remote service no longer recognises the operation handle."""

    error_code = "HANDLE_NOT_FOUND"

    def __init__(self, operation_id: str):
        super().__init__(f"Operation {operation_id} not found")
        self.operation_id = operation_id
