"""
gRPC transport layer.

This package hosts:
- protos/: the todo.v1 protocol buffer contract
- generated/: message and service bindings compiled from protos/ by grpcio-tools
- todo_grpc_service.py: the servicer, mapping messages to commands/queries
- interceptors.py: correlation ids and exception-to-status mapping
"""

from todo_service.presentation.grpc.generated import (
    SERVICE_NAME,
    todo_pb2,
    todo_pb2_grpc,
)
from todo_service.presentation.grpc.interceptors import (
    CorrelationIdInterceptor,
    ExceptionInterceptor,
)
from todo_service.presentation.grpc.todo_grpc_service import TodoGrpcService

__all__ = [
    "SERVICE_NAME",
    "CorrelationIdInterceptor",
    "ExceptionInterceptor",
    "TodoGrpcService",
    "todo_pb2",
    "todo_pb2_grpc",
]
