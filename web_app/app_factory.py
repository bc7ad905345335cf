"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.gzip import GZipMiddleware

from .api import api_router
from .web import web_router
from .middleware.error_handling import register_error_handlers
from .middleware.logging import LoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close storage on shutdown."""
    yield
    storage = app.state.storage
    if storage is not None:
        storage.close()


def create_app(storage, config) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        storage: URL storage instance shared by all handlers
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Maps long URLs to short random aliases",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Store instances in app state for access in routes
    app.state.storage = storage
    app.state.config = config

    register_error_handlers(app)

    # Last added runs outermost: logging sees the compressed response
    app.add_middleware(GZipMiddleware, minimum_size=config.gzip_minimum_size)
    app.add_middleware(LoggingMiddleware)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
