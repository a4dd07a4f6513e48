"""FastAPI application entry point for the BFS Visualizer.

This module creates and configures the FastAPI application with all
necessary middleware, routers, and lifecycle hooks.
"""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from bfs_visualizer import __version__
from bfs_visualizer.api.router import api_router
from bfs_visualizer.api.session import VisualizerSession, set_session
from bfs_visualizer.config import get_settings
from bfs_visualizer.core.exceptions import BFSVisualizerError
from bfs_visualizer.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Performance threshold for slow request warnings (seconds)
_SLOW_REQUEST_THRESHOLD = 0.5


class PerformanceLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log request performance metrics.

    Logs duration for every request and warns when requests exceed threshold.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time

        log_data = {
            "method": request.method,
            "path": request.url.path,
            "duration_ms": round(duration * 1000, 2),
            "status_code": response.status_code,
        }

        if duration > _SLOW_REQUEST_THRESHOLD:
            logger.warning("Slow request detected", **log_data)
        else:
            logger.debug("Request completed", **log_data)

        response.headers["X-Response-Time"] = f"{duration * 1000:.2f}ms"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Sets up logging and builds the graph session on startup. A broken
    graph definition aborts startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control returns to the application.
    """
    setup_logging()
    settings = get_settings()

    logger.info(
        "Starting BFS Visualizer",
        version=__version__,
        environment=settings.app.env,
        debug=settings.app.debug,
    )

    session = VisualizerSession.from_settings(settings.graph)
    set_session(session)
    logger.info(
        "Graph session ready",
        node_count=session.graph.node_count,
        edge_count=session.graph.edge_count,
    )

    yield

    logger.info("Shutting down BFS Visualizer")
    set_session(None)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="BFS Visualizer API",
        description="Interactive breadth-first search shortest path visualization",
        version=__version__,
        docs_url="/docs" if settings.app.debug else None,
        redoc_url="/redoc" if settings.app.debug else None,
        openapi_url="/openapi.json" if settings.app.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.app.env == "development" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(PerformanceLoggingMiddleware)

    app.add_exception_handler(BFSVisualizerError, bfs_visualizer_exception_handler)

    app.include_router(api_router)

    return app


async def bfs_visualizer_exception_handler(
    request: Request,
    exc: BFSVisualizerError,
) -> JSONResponse:
    """Handle BFSVisualizerError exceptions.

    Converts BFSVisualizerError instances to consistent JSON responses.

    Args:
        request: The incoming request.
        exc: The BFSVisualizerError exception.

    Returns:
        JSONResponse: Formatted error response.
    """
    logger.error(
        "Request failed",
        error=exc.__class__.__name__,
        message=exc.message,
        details=exc.details,
        path=request.url.path,
    )

    return JSONResponse(
        status_code=_get_status_code(exc),
        content=exc.to_dict(),
    )


def _get_status_code(exc: BFSVisualizerError) -> int:
    """Map exception types to HTTP status codes.

    Args:
        exc: The exception instance.

    Returns:
        int: Appropriate HTTP status code.
    """
    from bfs_visualizer.core.exceptions import (
        ConfigurationError,
        DuplicateNodeError,
        UnknownNodeError,
    )

    status_map: dict[type, int] = {
        UnknownNodeError: status.HTTP_404_NOT_FOUND,
        DuplicateNodeError: status.HTTP_409_CONFLICT,
        ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    for exc_type, status_code in status_map.items():
        if isinstance(exc, exc_type):
            return status_code

    return status.HTTP_500_INTERNAL_SERVER_ERROR


# Create the application instance
app = create_app()


def main() -> None:
    """Run the application using uvicorn.

    This is the entry point for the CLI command.
    """
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "bfs_visualizer.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        workers=settings.api.workers if not settings.api.reload else 1,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    main()
