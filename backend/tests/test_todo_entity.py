"""
Unit tests for the Todo entity.

Run with: pytest tests/test_todo_entity.py -v
"""

import pytest

from todo_service.domain.entities import TODO_NAME_MAX_LENGTH, Todo
from todo_service.domain.exceptions import DomainValidationError


class TestCreate:
    def test_create_trims_name(self):
        todo = Todo.create("  Buy milk  ")

        assert todo.todo_name == "Buy milk"
        assert todo.id is None

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_rejects_blank_name(self, name):
        with pytest.raises(DomainValidationError) as exc_info:
            Todo.create(name)

        assert exc_info.value.errors == ["TodoName is required."]
        assert exc_info.value.message == "TodoName is required."

    def test_create_rejects_long_name(self):
        with pytest.raises(DomainValidationError) as exc_info:
            Todo.create("x" * (TODO_NAME_MAX_LENGTH + 1))

        assert exc_info.value.errors == ["TodoName must not exceed 100 characters."]

    def test_name_at_limit_is_accepted(self):
        assert Todo.create("x" * TODO_NAME_MAX_LENGTH).todo_name == "x" * TODO_NAME_MAX_LENGTH


class TestUpdate:
    def test_update_renames_and_keeps_id(self):
        todo = Todo(id=7, todo_name="Old")

        result = todo.update("  New  ")

        assert result is todo
        assert todo.id == 7
        assert todo.todo_name == "New"

    def test_failed_update_leaves_entity_unchanged(self):
        todo = Todo(id=7, todo_name="Old")

        with pytest.raises(DomainValidationError):
            todo.update("   ")

        assert todo.todo_name == "Old"


class TestDomainValidationError:
    def test_several_errors_use_summary_message(self):
        error = DomainValidationError(["a", "b"])

        assert error.errors == ["a", "b"]
        assert str(error) == "One or more domain validation errors occurred."
