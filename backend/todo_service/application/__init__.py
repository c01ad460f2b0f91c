"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/    → Write operations (CQRS)
- queries/     → Read operations (CQRS)
- validators/  → Per-request validation rules
- dto/         → Data Transfer Objects
- common/      → Shared interfaces, dispatcher, application errors

Rules:
- Depends on Domain layer only
- No gRPC/HTTP/framework code here
- Coordinates entities and repositories
"""
