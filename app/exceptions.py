# =============================================================================
# app/exceptions.py - Error Envelope and Exception Handlers
# =============================================================================
# Centralized error handling for the API.
#
# Every non-2xx JSON body produced by this service has the same shape:
#
#   {"status": 403, "message": "forbidden"}
#
# plus optional extension fields ("code", "details") when an error carries
# them. Errors are classified into exactly two variants before rendering:
#
#   ExplicitRejection - raised on purpose (ApiError, HTTPException, validation)
#   InternalFailure   - anything else; caller sees a generic 500
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Receive, Scope, Send

logger = logging.getLogger(__name__)

INTERNAL_ERROR_STATUS = 500
INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_STATUS = 404
NOT_FOUND_MESSAGE = "The requested resource was not found"
VALIDATION_ERROR_MESSAGE = "Invalid request parameters"


# =============================================================================
# Envelope Builder
# =============================================================================

def build_error_body(status: int, message: str, **extras: Any) -> dict[str, Any]:
    """
    Build the canonical error body.

    Extension fields are only included when they carry a value, so
    build_error_body(403, "forbidden") is exactly {"status": 403, "message": "forbidden"}.
    """
    body: dict[str, Any] = {"status": status, "message": message}
    for key, value in extras.items():
        if value is not None:
            body[key] = value
    return body


# =============================================================================
# Application Exceptions
# =============================================================================

class ApiError(Exception):
    """
    Base exception for intentional rejections.

    Raise it (or a subclass) anywhere in a handler, dependency or gate; the
    global handler turns it into an envelope with this status and message.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.code = code
        self.details = details
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return build_error_body(
            self.status_code, self.message, code=self.code, details=self.details
        )


class BadRequestError(ApiError):
    """Raised when request data is malformed or violates a rule."""
    status_code = 400


class UnauthorizedError(ApiError):
    """Raised when credentials are missing or invalid."""
    status_code = 401


class ForbiddenError(ApiError):
    """Raised when credentials are valid but not sufficient."""
    status_code = 403


class ResourceNotFoundError(ApiError):
    """Raised by handlers when a named resource does not exist."""
    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} not found: {identifier}",
            details={"resource": resource.lower(), "id": identifier},
        )


class ConflictError(ApiError):
    status_code = 409


class GoneError(ApiError):
    """Raised when a resource expired or used up its view limit."""
    status_code = 410


class PayloadTooLargeError(ApiError):
    status_code = 413

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            details={"size_mb": round(size_mb, 2), "max_mb": max_mb},
        )


# =============================================================================
# Classification
# =============================================================================

@dataclass(frozen=True)
class ExplicitRejection:
    """An error the application raised on purpose; rendered verbatim."""
    status: int
    message: str
    code: str | None = None
    details: Any = None
    headers: dict[str, str] | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InternalFailure:
    """An unexpected error; its detail is logged, never returned."""
    detail: str


def classify_error(exc: BaseException) -> ExplicitRejection | InternalFailure:
    """Sort an exception into one of the two error variants."""
    if isinstance(exc, ApiError):
        return ExplicitRejection(
            status=exc.status_code,
            message=exc.message or INTERNAL_ERROR_MESSAGE,
            code=exc.code,
            details=exc.details,
            headers=exc.headers,
        )

    if isinstance(exc, RequestValidationError):
        return ExplicitRejection(
            status=400,
            message=VALIDATION_ERROR_MESSAGE,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    if isinstance(exc, StarletteHTTPException):
        return ExplicitRejection(
            status=exc.status_code,
            message=str(exc.detail) if exc.detail else INTERNAL_ERROR_MESSAGE,
            headers=exc.headers,
        )

    return InternalFailure(detail=f"{type(exc).__name__}: {exc}")


# =============================================================================
# Exception Handlers
# =============================================================================

async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """
    Single interception point for every error raised while dispatching.

    Registered for ApiError, HTTPException and RequestValidationError, and
    called directly by the error boundary and credential gate middleware.
    Never re-raises.
    """
    outcome = classify_error(exc)

    if isinstance(outcome, ExplicitRejection):
        logger.warning(
            f"[rejected] {request.method} {request.url.path} -> "
            f"{outcome.status} {outcome.message}"
        )
        return JSONResponse(
            status_code=outcome.status,
            content=build_error_body(
                outcome.status,
                outcome.message,
                code=outcome.code,
                details=outcome.details,
            ),
            headers=outcome.headers,
        )

    logger.error(
        f"[error] {request.method} {request.url.path}: {outcome.detail}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=INTERNAL_ERROR_STATUS,
        content=build_error_body(INTERNAL_ERROR_STATUS, INTERNAL_ERROR_MESSAGE),
    )


async def handle_not_found(scope: Scope, receive: Receive, send: Send) -> None:
    """
    Fallback for requests that match no route.

    Installed as the router's default endpoint, so it only fires when
    routing fails; a handler raising a 404 goes through handle_error instead.
    """
    if scope["type"] == "websocket":
        await send({"type": "websocket.close", "code": 1000})
        return

    response = JSONResponse(
        status_code=NOT_FOUND_STATUS,
        content=build_error_body(NOT_FOUND_STATUS, NOT_FOUND_MESSAGE),
    )
    await response(scope, receive, send)


def register_error_handlers(app) -> None:
    """Install handle_error for every error type the framework can surface."""
    app.add_exception_handler(ApiError, handle_error)
    app.add_exception_handler(StarletteHTTPException, handle_error)
    app.add_exception_handler(RequestValidationError, handle_error)
    # Backstop for failures in the outer middleware; the error boundary
    # handles everything raised by gates and routes.
    app.add_exception_handler(Exception, handle_error)
    app.router.default = handle_not_found
