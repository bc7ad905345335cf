"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        """Log uri, method, status, duration and bytes written."""
        start_time = time.time()

        # Process request
        response = await call_next(request)
        body_iterator = response.body_iterator

        async def logged_body():
            size = 0
            async for chunk in body_iterator:
                size += len(chunk)
                yield chunk

            # Calculate duration once the body has been sent
            duration_ms = (time.time() - start_time) * 1000

            # Log response
            self.logger.info(
                f"uri={request.url.path} method={request.method} "
                f"status={response.status_code} duration={duration_ms:.2f}ms size={size}"
            )

        response.body_iterator = logged_body()
        return response
