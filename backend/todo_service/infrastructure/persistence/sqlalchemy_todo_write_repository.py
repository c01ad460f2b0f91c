"""
SQLAlchemy Todo Write Repository Implementation.

Guidelines:
- Implements TodoWriteRepository port from domain layer
- Each method is one session and one commit
- update/delete look the row up first and report False when it is gone
"""

from todo_service.domain.entities.todo import Todo
from todo_service.domain.ports.repositories import TodoWriteRepository
from todo_service.infrastructure.persistence.database import DatabaseSessionManager
from todo_service.infrastructure.persistence.models import TodoRecord


class SqlAlchemyTodoWriteRepository(TodoWriteRepository):
    _db: DatabaseSessionManager

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def add(self, todo: Todo) -> int:
        """Insert todo. Returns the id assigned by the database."""
        async with self._db.session() as session:
            record = TodoRecord(todo_name=todo.todo_name)
            session.add(record)
            await session.commit()
            return record.id

    async def update(self, todo: Todo) -> bool:
        """Write the todo's name. Returns False if the row no longer exists."""
        async with self._db.session() as session:
            record = await session.get(TodoRecord, todo.id)
            if record is None:
                return False

            record.todo_name = todo.todo_name
            await session.commit()
            return True

    async def delete(self, todo_id: int) -> bool:
        """Delete todo by ID. Returns True if deleted."""
        async with self._db.session() as session:
            record = await session.get(TodoRecord, todo_id)
            if record is None:
                return False

            await session.delete(record)
            await session.commit()
            return True
