"""
DOMAIN LAYER - The Heart of the Service

This layer contains:
- Entities: Business objects with identity (Todo)
- Ports: Interfaces that infrastructure implements (read/write repositories)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no gRPC, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no network, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
