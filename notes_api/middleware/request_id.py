"""
Notes API — Request ID Middleware
===================================

What:  Assigns a short ID to each incoming request and echoes it in the response.
Why:   Every log line written while serving a request can be correlated with it,
       and clients can quote the ID from the X-Request-ID header when reporting
       a failure.
How:   Reuses a client-supplied X-Request-ID or generates one, stores it in a
       ContextVar for loggers and exception handlers, and sets the response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to the request context and the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough for correlation and keeps log lines readable
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
