"""
gRPC server interceptors.

CorrelationIdInterceptor - reads or creates "x-correlation-id", exposes it to
                           logging for the whole call and returns it as
                           trailing metadata
ExceptionInterceptor     - turns exceptions that escaped the servicer into
                           gRPC status codes without leaking internals

Register CorrelationIdInterceptor first so errors are logged with the id.
"""

import asyncio
from logging import getLogger
from typing import Awaitable, Callable
from uuid import uuid4

import grpc

from todo_service.application.common.exceptions import AppValidationError
from todo_service.config.logging_config import correlation_id_var
from todo_service.domain.exceptions import DomainValidationError

logger = getLogger(__name__)

CORRELATION_ID_METADATA_KEY = "x-correlation-id"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."

UnaryBehavior = Callable[[object, grpc.aio.ServicerContext], Awaitable[object]]


def _wrap_unary(
    handler: grpc.RpcMethodHandler, behavior: UnaryBehavior
) -> grpc.RpcMethodHandler:
    return grpc.unary_unary_rpc_method_handler(
        behavior,
        request_deserializer=handler.request_deserializer,
        response_serializer=handler.response_serializer,
    )


class CorrelationIdInterceptor(grpc.aio.ServerInterceptor):
    async def intercept_service(self, continuation, handler_call_details):
        handler = await continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        metadata = dict(handler_call_details.invocation_metadata or ())
        correlation_id = metadata.get(CORRELATION_ID_METADATA_KEY) or str(uuid4())
        behavior = handler.unary_unary

        async def with_correlation_id(request, context):
            token = correlation_id_var.set(correlation_id)
            context.set_trailing_metadata(((CORRELATION_ID_METADATA_KEY, correlation_id),))
            try:
                return await behavior(request, context)
            finally:
                correlation_id_var.reset(token)

        return _wrap_unary(handler, with_correlation_id)


class ExceptionInterceptor(grpc.aio.ServerInterceptor):
    def __init__(self, expose_error_details: bool = False):
        self._expose_error_details = expose_error_details

    def _internal_details(self, error: Exception) -> str:
        if self._expose_error_details:
            return f"{INTERNAL_ERROR_MESSAGE} {type(error).__name__}: {error}"
        return INTERNAL_ERROR_MESSAGE

    async def intercept_service(self, continuation, handler_call_details):
        handler = await continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method
        behavior = handler.unary_unary

        async def with_error_mapping(request, context):
            try:
                return await behavior(request, context)
            except grpc.aio.AbortError:
                raise
            except AppValidationError as e:
                logger.warning(f"Validation error in {method}: {e.errors}")
                await context.abort(
                    grpc.StatusCode.INVALID_ARGUMENT,
                    f"Validation failed: {', '.join(e.errors)}",
                )
            except DomainValidationError as e:
                logger.warning(f"Domain error in {method}: {e.errors}")
                await context.abort(
                    grpc.StatusCode.INVALID_ARGUMENT,
                    f"Domain validation failed: {', '.join(e.errors)}",
                )
            except asyncio.TimeoutError:
                logger.warning(f"Deadline exceeded in {method}")
                await context.abort(
                    grpc.StatusCode.DEADLINE_EXCEEDED, "Deadline exceeded."
                )
            except Exception as e:
                logger.exception(f"Unhandled exception in {method}")
                await context.abort(grpc.StatusCode.INTERNAL, self._internal_details(e))

        return _wrap_unary(handler, with_error_mapping)
