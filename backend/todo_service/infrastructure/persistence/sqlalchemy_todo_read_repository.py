"""
SQLAlchemy Todo Read Repository Implementation.

Guidelines:
- Implements TodoReadRepository port from domain layer
- Opens one session per call via DatabaseSessionManager
- Maps between ORM records and domain entities

Mapping:
- ORM record fields: id (column "Id"), todo_name (column "ToDoName")
- Domain entity: Todo(id, todo_name)
"""

from typing import Optional

from sqlalchemy import select

from todo_service.domain.entities.todo import Todo
from todo_service.domain.ports.repositories import TodoReadRepository
from todo_service.infrastructure.persistence.database import DatabaseSessionManager
from todo_service.infrastructure.persistence.models import TodoRecord


class SqlAlchemyTodoReadRepository(TodoReadRepository):
    _db: DatabaseSessionManager

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    def _to_entity(self, record: TodoRecord) -> Todo:
        """Map ORM record to domain entity."""
        return Todo(id=record.id, todo_name=record.todo_name)

    async def get_all(self) -> list[Todo]:
        """Get every todo, ordered by id."""
        async with self._db.session() as session:
            result = await session.execute(select(TodoRecord).order_by(TodoRecord.id))
            return [self._to_entity(record) for record in result.scalars()]

    async def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get todo by ID."""
        async with self._db.session() as session:
            record = await session.get(TodoRecord, todo_id)
            return self._to_entity(record) if record else None
