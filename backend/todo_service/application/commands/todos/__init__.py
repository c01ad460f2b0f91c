"""Todo commands."""

from .create_todo import CreateTodoCommand, CreateTodoHandler
from .delete_todo import DeleteTodoCommand, DeleteTodoHandler
from .update_todo import UpdateTodoCommand, UpdateTodoHandler

__all__ = [
    "CreateTodoCommand",
    "CreateTodoHandler",
    "DeleteTodoCommand",
    "DeleteTodoHandler",
    "UpdateTodoCommand",
    "UpdateTodoHandler",
]
