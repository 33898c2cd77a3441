"""
Notes API — Request ID Middleware
==================================

What:  Attaches a short correlation id to every request and response.
Why:   Lets a client quote the X-Request-ID of a failed call and lets us
       find every log line that belongs to it.
How:   Reuses the client's X-Request-ID if sent, otherwise generates one;
       stores it in a ContextVar for loggers and on request.state for
       handlers; echoes it in the response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    # 8 hex chars are enough to correlate log lines
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns (or propagates) X-Request-ID for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
