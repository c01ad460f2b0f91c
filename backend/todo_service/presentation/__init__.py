"""
Presentation Layer - Service boundary.

This layer contains:
- grpc/: todo.v1 proto contract and bindings, gRPC servicer, interceptors
- api/:  FastAPI routes (JSON gateway onto the same servicer, health checks)
"""
