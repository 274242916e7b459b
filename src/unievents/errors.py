"""Domain errors and their HTTP rendering.

Learn: Services raise AppError subclasses that carry their own status
code and client-facing message. Routes never build error responses by
hand; the handlers registered here turn every AppError into
{"success": false, "message": ...}. Anything else is logged and
collapsed to a generic 500 so internal detail never reaches the client.
"""

from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

SERVER_ERROR_MESSAGE = "Server error"


class AppError(Exception):
    """Base class for errors surfaced verbatim to the caller."""

    status_code: int = 500
    default_message: str = SERVER_ERROR_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class MissingCredentials(AppError):
    status_code = 400
    default_message = "Email and password are required"


class InvalidCredentials(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(AppError):
    """Missing, malformed or expired bearer token."""

    status_code = 401
    default_message = "Authentication required"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    status_code = 409
    default_message = "Conflict"


class RegistrationClosed(AppError):
    """The event no longer accepts sign-ups (full, past deadline, finished)."""

    status_code = 400
    default_message = "Registration is closed"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
        headers=exc.headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": SERVER_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    # Unhandled exceptions are rendered by middleware.errors.UnhandledErrorMiddleware.
    app.add_exception_handler(AppError, app_error_handler)
