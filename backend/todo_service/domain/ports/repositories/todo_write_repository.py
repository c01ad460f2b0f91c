"""
Todo Write Repository Port - Interface for persisting todos.
Implementation: todo_service/infrastructure/persistence/sqlalchemy_todo_write_repository.py
"""

from abc import ABC, abstractmethod

from todo_service.domain.entities.todo import Todo


class TodoWriteRepository(ABC):
    @abstractmethod
    async def add(self, todo: Todo) -> int:
        """Persist a new todo and return the id assigned by storage."""

    @abstractmethod
    async def update(self, todo: Todo) -> bool:
        """Write the todo's current name. Returns False if the row is gone."""

    @abstractmethod
    async def delete(self, todo_id: int) -> bool:
        """Delete by id. Returns True if a row was removed."""
