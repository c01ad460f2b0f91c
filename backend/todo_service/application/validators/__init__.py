"""
VALIDATORS - Request-shape rules run by the dispatcher before any handler.

Each validator covers one request type and returns its failure messages in
rule order. Several validators may be registered for one type.
"""

from todo_service.application.validators.todo_validators import (
    CreateTodoCommandValidator,
    DeleteTodoCommandValidator,
    UpdateTodoCommandValidator,
    UpdateTodoIdValidator,
)

__all__ = [
    "CreateTodoCommandValidator",
    "DeleteTodoCommandValidator",
    "UpdateTodoCommandValidator",
    "UpdateTodoIdValidator",
]
