"""Access logging middleware — one log line per request with status and duration."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("user_api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs `METHOD /path?query -> status (N ms)` for every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%sms)",
            request.method,
            path,
            response.status_code,
            duration_ms,
        )
        return response
