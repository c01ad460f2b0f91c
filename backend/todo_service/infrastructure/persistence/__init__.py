"""
Persistence Layer - Database implementations.

Contains the SQLAlchemy session manager and the repository implementations
for the domain ports.
"""

from todo_service.infrastructure.persistence.database import DatabaseSessionManager
from todo_service.infrastructure.persistence.errors import DatabaseError
from todo_service.infrastructure.persistence.models import Base, TodoRecord
from todo_service.infrastructure.persistence.sqlalchemy_todo_read_repository import (
    SqlAlchemyTodoReadRepository,
)
from todo_service.infrastructure.persistence.sqlalchemy_todo_write_repository import (
    SqlAlchemyTodoWriteRepository,
)

__all__ = [
    "Base",
    "DatabaseError",
    "DatabaseSessionManager",
    "SqlAlchemyTodoReadRepository",
    "SqlAlchemyTodoWriteRepository",
    "TodoRecord",
]
