"""
Unit tests for the command validators.

Run with: pytest tests/test_validators.py -v
"""

import pytest

from todo_service.application.commands.todos import (
    CreateTodoCommand,
    DeleteTodoCommand,
    UpdateTodoCommand,
)
from todo_service.application.dto import CreateTodoDto, UpdateTodoDto
from todo_service.application.validators import (
    CreateTodoCommandValidator,
    DeleteTodoCommandValidator,
    UpdateTodoCommandValidator,
    UpdateTodoIdValidator,
)


class TestCreateTodoCommandValidator:
    def test_valid_name_passes(self):
        command = CreateTodoCommand(dto=CreateTodoDto(todo_name="Task"))

        assert CreateTodoCommandValidator().validate(command) == []

    def test_missing_dto(self):
        command = CreateTodoCommand(dto=None)

        assert CreateTodoCommandValidator().validate(command) == ["CreateTodoDto is required."]

    @pytest.mark.parametrize("name", ["", "  \t "])
    def test_blank_name(self, name):
        command = CreateTodoCommand(dto=CreateTodoDto(todo_name=name))

        assert CreateTodoCommandValidator().validate(command) == ["TodoName is required."]

    def test_long_name(self):
        command = CreateTodoCommand(dto=CreateTodoDto(todo_name="x" * 101))

        assert CreateTodoCommandValidator().validate(command) == [
            "TodoName must not exceed 100 characters."
        ]


class TestUpdateValidators:
    def test_id_must_be_positive(self):
        command = UpdateTodoCommand(dto=UpdateTodoDto(id=0, todo_name="Task"))

        assert UpdateTodoIdValidator().validate(command) == ["Invalid Todo Id."]
        assert UpdateTodoCommandValidator().validate(command) == []

    def test_name_required(self):
        command = UpdateTodoCommand(dto=UpdateTodoDto(id=3, todo_name=" "))

        assert UpdateTodoIdValidator().validate(command) == []
        assert UpdateTodoCommandValidator().validate(command) == ["TodoName is required."]

    def test_missing_dto_reported_once(self):
        command = UpdateTodoCommand(dto=None)

        assert UpdateTodoIdValidator().validate(command) == []
        assert UpdateTodoCommandValidator().validate(command) == ["UpdateTodoDto is required."]


class TestDeleteTodoCommandValidator:
    @pytest.mark.parametrize("todo_id", [0, -1, None])
    def test_invalid_id(self, todo_id):
        assert DeleteTodoCommandValidator().validate(DeleteTodoCommand(id=todo_id)) == [
            "Invalid Todo Id."
        ]

    def test_valid_id(self):
        assert DeleteTodoCommandValidator().validate(DeleteTodoCommand(id=1)) == []
