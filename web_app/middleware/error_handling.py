"""Exception handlers mapping request failures to plain 400 responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("url_shortener.web")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Collapse client errors (unknown route, wrong method, ...) to 400."""
    if exc.status_code >= 500:
        logger.error(f"Server error in {request.url.path}: {exc.detail}")
        return Response(status_code=exc.status_code)
    logger.debug(f"Bad request {request.method} {request.url.path}: {exc.status_code} {exc.detail}")
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.debug(f"Validation error in {request.url.path}: {exc.errors()}")
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers on the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
