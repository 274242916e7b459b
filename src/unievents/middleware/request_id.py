"""Request ID middleware — one correlation id per request.

Learn: Services log with dotted event names (auth.login_succeeded,
event.updated, registration.created) and only the fields they know
about; none of them see the HTTP request. This middleware binds the
request id, method and path into structlog's contextvars, so every one
of those lines can be traced back to the route that caused it without
the services having to pass request data around.

A caller-supplied X-Request-ID is reused so traces can span services,
but only if it looks like an id: short printable token characters. A
missing, oversized or otherwise odd value (which would end up verbatim
in logs and response headers) is replaced with a fresh UUID.
"""

import re
import uuid
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_ACCEPTABLE_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def resolve_request_id(incoming: Optional[str]) -> str:
    if incoming and _ACCEPTABLE_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        response: Response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
