"""
Python bindings for protos/todo.proto.

grpcio-tools compiles the contract when this package is first imported:
- todo_pb2: message classes, as a protoc-generated todo_pb2.py
- todo_pb2_grpc: TodoServiceServicer, TodoServiceStub and
  add_TodoServiceServicer_to_server, as a generated todo_pb2_grpc.py

The path is resolved against sys.path, like any import.
"""

import grpc

PROTO_PATH = "todo_service/presentation/grpc/protos/todo.proto"

todo_pb2, todo_pb2_grpc = grpc.protos_and_services(PROTO_PATH)

SERVICE_NAME = todo_pb2.DESCRIPTOR.services_by_name["TodoService"].full_name

__all__ = ["PROTO_PATH", "SERVICE_NAME", "todo_pb2", "todo_pb2_grpc"]
