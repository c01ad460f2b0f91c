"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: SQLAlchemy engine/session management and repositories
"""

from todo_service.infrastructure.persistence import (
    DatabaseError,
    DatabaseSessionManager,
    SqlAlchemyTodoReadRepository,
    SqlAlchemyTodoWriteRepository,
)

__all__ = [
    "DatabaseError",
    "DatabaseSessionManager",
    "SqlAlchemyTodoReadRepository",
    "SqlAlchemyTodoWriteRepository",
]
