"""
REPOSITORY PORTS - Data persistence interfaces

Reads and writes are split into two narrow ports so that query handlers
never receive a write capability.

Infrastructure layer provides implementations.
"""

from todo_service.domain.ports.repositories.todo_read_repository import (
    TodoReadRepository,
)
from todo_service.domain.ports.repositories.todo_write_repository import (
    TodoWriteRepository,
)

__all__ = [
    "TodoReadRepository",
    "TodoWriteRepository",
]
