"""Todo service: CRUD over gRPC with a validated CQRS request pipeline."""

__version__ = "1.0.0"
