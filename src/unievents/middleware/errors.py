"""Last-resort error middleware.

Learn: Starlette runs exception handlers registered for plain Exception
in its outermost ServerErrorMiddleware, outside every user middleware,
so a 500 produced there never gets a request id or security headers.
This middleware is registered innermost instead: it turns an unhandled
exception into the generic 500 envelope before the response travels
back out through RequestIdMiddleware and SecurityHeadersMiddleware.
AppError subclasses never reach it; FastAPI's own exception middleware
renders those first.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from unievents.errors import unhandled_error_handler


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Render uncaught exceptions as {"success": false, "message": "Server error"}."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_error_handler(request, exc)
