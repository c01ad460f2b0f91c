"""Validators for the todo commands."""

from typing import Optional

from todo_service.application.commands.todos import (
    CreateTodoCommand,
    DeleteTodoCommand,
    UpdateTodoCommand,
)
from todo_service.application.common.error_messages import (
    CREATE_DTO_REQUIRED,
    INVALID_TODO_ID,
    TODO_NAME_REQUIRED,
    TODO_NAME_TOO_LONG,
    UPDATE_DTO_REQUIRED,
)
from todo_service.application.common.interfaces import Validator
from todo_service.domain.entities.todo import TODO_NAME_MAX_LENGTH


def _todo_name_rules(todo_name: Optional[str]) -> list[str]:
    if not todo_name or not todo_name.strip():
        return [TODO_NAME_REQUIRED]
    if len(todo_name.strip()) > TODO_NAME_MAX_LENGTH:
        return [TODO_NAME_TOO_LONG]
    return []


class CreateTodoCommandValidator(Validator[CreateTodoCommand]):
    def validate(self, request: CreateTodoCommand) -> list[str]:
        if request.dto is None:
            return [CREATE_DTO_REQUIRED]
        return _todo_name_rules(request.dto.todo_name)


class UpdateTodoIdValidator(Validator[UpdateTodoCommand]):
    def validate(self, request: UpdateTodoCommand) -> list[str]:
        # A missing DTO is reported by UpdateTodoCommandValidator
        if request.dto is not None and request.dto.id <= 0:
            return [INVALID_TODO_ID]
        return []


class UpdateTodoCommandValidator(Validator[UpdateTodoCommand]):
    def validate(self, request: UpdateTodoCommand) -> list[str]:
        if request.dto is None:
            return [UPDATE_DTO_REQUIRED]
        return _todo_name_rules(request.dto.todo_name)


class DeleteTodoCommandValidator(Validator[DeleteTodoCommand]):
    def validate(self, request: DeleteTodoCommand) -> list[str]:
        if request.id is None or request.id <= 0:
            return [INVALID_TODO_ID]
        return []
