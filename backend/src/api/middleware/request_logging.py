"""
Request Logging Middleware

Binds a request id and the request path to the structlog context for the
duration of each request, and logs one line per completed request.

The id is taken from the REQUEST_ID_HEADER header (X-Request-ID by default) when the caller sends one,
otherwise a new UUID is generated. It is echoed back on the response.

Usage:
======
    from src.api.middleware import RequestLoggingMiddleware

    app.add_middleware(RequestLoggingMiddleware)
"""

import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.config.settings import settings
from src.shared.core.logging import clear_log_context, log_context, logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Per-request log context and access log."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(settings.REQUEST_ID_HEADER) or str(uuid4())
        started = time.perf_counter()

        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
            response.headers[settings.REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
