"""Centralized validation messages for the application layer."""

from todo_service.domain.entities.todo import TODO_NAME_REQUIRED, TODO_NAME_TOO_LONG

INVALID_TODO_ID = "Invalid Todo Id."
CREATE_DTO_REQUIRED = "CreateTodoDto is required."
UPDATE_DTO_REQUIRED = "UpdateTodoDto is required."

__all__ = [
    "CREATE_DTO_REQUIRED",
    "INVALID_TODO_ID",
    "TODO_NAME_REQUIRED",
    "TODO_NAME_TOO_LONG",
    "UPDATE_DTO_REQUIRED",
]
