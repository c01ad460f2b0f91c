"""
FastAPI Application Factory.
Creates the HTTP gateway: JSON routes onto the todo servicer plus health checks.

The DI container is owned by the caller (todo_service.server), so the same
dispatcher and database pool serve both gRPC and HTTP.
"""

import asyncio
from contextlib import asynccontextmanager
from logging import getLogger
from uuid import uuid4

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from todo_service import __version__
from todo_service.config.logging_config import correlation_id_var
from todo_service.config.settings import Config
from todo_service.presentation.api import health_router, todos_router

logger = getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-Id"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract or generate the correlation ID for each request."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid4())

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("HTTP gateway started.")
    yield
    logger.info("HTTP gateway stopped.")


def create_fastapi_app(container: AsyncContainer, config: type[Config] = Config) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container providing TodoGrpcService and DatabaseSessionManager
        config: Settings class

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Todo API",
        description="JSON gateway and health checks for the Todo gRPC service",
        version=__version__,
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    # Malformed bodies or path params - same shape as a 400 envelope
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"Request validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={
                "status": {
                    "success": False,
                    "code": 400,
                    "message": "Validation error occurred",
                    "errors": [str(error.get("msg", "")) for error in errors],
                }
            },
        )

    async def timeout_exception_handler(request: Request, exc: Exception):
        logger.warning(f"Timed out on {request.url.path}")
        return JSONResponse(status_code=504, content={"error": "Deadline exceeded."})

    # Distinct classes before Python 3.11
    for timeout_error in {TimeoutError, asyncio.TimeoutError}:
        app.add_exception_handler(timeout_error, timeout_exception_handler)

    # Global exception handler - full detail in the log, generic message to the client
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.url.path}")
        error = "An unexpected error occurred."
        if config.EXPOSE_ERROR_DETAILS:
            error = f"{error} {type(exc).__name__}: {exc}"
        return JSONResponse(status_code=500, content={"error": error})

    app.include_router(health_router)
    app.include_router(todos_router)

    return app
