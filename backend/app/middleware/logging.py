"""
Notes API — Request Logging Middleware
=======================================

What:  One access log line per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration, request id, client IP and, when the auth gate
       accepted the request, a fingerprint of the caller's identity.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID, identity fingerprint
    ❌ Don't log: request bodies (note contents), the Authorization header,
                 the identity itself (it is the credential minus its scheme)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.auth import identity_fingerprint
from app.middleware.request_id import request_id_var

logger = logging.getLogger("notes.access")

# Polled every few seconds by Docker/LBs; logging them drowns real traffic
SILENT_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request after the response is produced.

    Level by status class: 5xx → ERROR, 4xx → WARNING, everything else → INFO.
    A 401 therefore shows up as a warning with user=-.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SILENT_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        identity = getattr(request.state, "user", None)
        user = identity_fingerprint(identity) if identity is not None else "-"
        rid = request_id_var.get("")

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] user=%s from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            user,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
                "user": user,
            },
        )

        return response
