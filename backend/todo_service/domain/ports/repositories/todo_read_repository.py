"""
Todo Read Repository Port - Interface for reading todos.
Implementation: todo_service/infrastructure/persistence/sqlalchemy_todo_read_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from todo_service.domain.entities.todo import Todo


class TodoReadRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Todo]: ...

    @abstractmethod
    async def get_by_id(self, todo_id: int) -> Optional[Todo]: ...
