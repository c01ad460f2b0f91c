"""
Service entry point.

Starts the gRPC server (todo.v1.TodoService) and, when HTTP_ENABLED, the
uvicorn-hosted HTTP gateway. Both share one DI container.

Usage:
    todo-service
    python run.py
"""

import asyncio
from logging import getLogger
from typing import Optional

import grpc
import uvicorn

from todo_service.config.logging_config import setup_logging
from todo_service.config.settings import Config, get_config
from todo_service.presentation.grpc import (
    CorrelationIdInterceptor,
    ExceptionInterceptor,
    TodoGrpcService,
    todo_pb2_grpc,
)
from todo_service.setup.ioc import create_container

logger = getLogger(__name__)


def create_grpc_server(
    servicer: TodoGrpcService, config: type[Config] = Config
) -> tuple[grpc.aio.Server, int]:
    """
    Build a gRPC server with the todo service registered.

    Returns:
        (server, port) - port is the bound one, which differs from
        GRPC_PORT when GRPC_PORT is 0
    """
    server = grpc.aio.server(
        interceptors=[
            CorrelationIdInterceptor(),
            ExceptionInterceptor(config.EXPOSE_ERROR_DETAILS),
        ]
    )
    todo_pb2_grpc.add_TodoServiceServicer_to_server(servicer, server)
    port = server.add_insecure_port(f"{config.GRPC_HOST}:{config.GRPC_PORT}")
    return server, port


def create_http_server(container, config: type[Config] = Config) -> uvicorn.Server:
    from todo_service.fastapi_app import create_fastapi_app

    app = create_fastapi_app(container, config)
    return uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.HTTP_HOST,
            port=config.HTTP_PORT,
            log_level=config.LOG_LEVEL.lower(),
        )
    )


async def serve(config: Optional[type[Config]] = None) -> None:
    """Run until the gRPC server terminates or the HTTP gateway exits."""
    config = config or get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)
    config.validate()

    container = create_container(config)
    try:
        servicer = await container.get(TodoGrpcService)
        server, port = create_grpc_server(servicer, config)
        await server.start()
        logger.info(f"gRPC server listening on {config.GRPC_HOST}:{port}")

        tasks = [asyncio.create_task(server.wait_for_termination())]
        if config.HTTP_ENABLED:
            http_server = create_http_server(container, config)
            tasks.append(asyncio.create_task(http_server.serve()))
            logger.info(
                f"HTTP gateway listening on http://{config.HTTP_HOST}:{config.HTTP_PORT}"
            )

        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            logger.info("Shutting down...")
            await server.stop(config.GRPC_GRACE_SECONDS)
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        await container.close()
        logger.info("Shutdown complete.")


def main() -> None:
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted.")


if __name__ == "__main__":
    main()
