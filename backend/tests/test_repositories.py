"""
Integration tests for the SQLAlchemy repositories (in-memory SQLite).

Run with: pytest tests/test_repositories.py -v
"""

import pytest
from sqlalchemy import text

from todo_service.domain.entities import Todo
from todo_service.infrastructure.persistence import (
    DatabaseError,
    SqlAlchemyTodoReadRepository,
    SqlAlchemyTodoWriteRepository,
)


@pytest.fixture()
def read_repository(db):
    return SqlAlchemyTodoReadRepository(db)


@pytest.fixture()
def write_repository(db):
    return SqlAlchemyTodoWriteRepository(db)


class TestRoundTrip:
    async def test_add_then_get_by_id(self, read_repository, write_repository):
        todo_id = await write_repository.add(Todo.create("  Task  "))

        todo = await read_repository.get_by_id(todo_id)

        assert todo_id > 0
        assert todo == Todo(id=todo_id, todo_name="Task")

    async def test_get_all_empty(self, read_repository):
        assert await read_repository.get_all() == []

    async def test_get_all_ordered_by_id(self, read_repository, write_repository):
        first = await write_repository.add(Todo.create("First"))
        second = await write_repository.add(Todo.create("Second"))

        todos = await read_repository.get_all()

        assert [todo.id for todo in todos] == [first, second]

    async def test_get_by_id_missing(self, read_repository):
        assert await read_repository.get_by_id(999) is None


class TestUpdate:
    async def test_update_existing(self, read_repository, write_repository):
        todo_id = await write_repository.add(Todo.create("Old"))

        updated = await write_repository.update(Todo(id=todo_id, todo_name="New"))

        assert updated is True
        assert (await read_repository.get_by_id(todo_id)).todo_name == "New"

    async def test_update_missing(self, write_repository):
        assert await write_repository.update(Todo(id=999, todo_name="New")) is False


class TestDelete:
    async def test_delete_existing(self, read_repository, write_repository):
        todo_id = await write_repository.add(Todo.create("Task"))

        assert await write_repository.delete(todo_id) is True
        assert await read_repository.get_by_id(todo_id) is None

    async def test_delete_missing(self, write_repository):
        assert await write_repository.delete(999) is False


class TestDatabaseSessionManager:
    async def test_storage_errors_become_database_error(self, db):
        with pytest.raises(DatabaseError) as exc_info:
            async with db.session() as session:
                await session.execute(text("SELECT * FROM missing_table"))

        assert exc_info.value.operation == "execute"

    async def test_health_check(self, db):
        assert await db.health_check() is True

    async def test_table_and_column_names(self, db):
        async with db.session() as session:
            await session.execute(text('INSERT INTO "ToDos" ("ToDoName") VALUES (\'Raw\')'))
            await session.commit()
            result = await session.execute(text('SELECT "Id", "ToDoName" FROM "ToDos"'))
            rows = result.all()

        assert rows == [(1, "Raw")]
