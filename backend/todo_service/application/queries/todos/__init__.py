"""Todo queries."""

from todo_service.application.queries.todos.get_all_todos import (
    GetAllTodosHandler,
    GetAllTodosQuery,
)
from todo_service.application.queries.todos.get_todo_by_id import (
    GetTodoByIdHandler,
    GetTodoByIdQuery,
)

__all__ = [
    "GetAllTodosQuery",
    "GetAllTodosHandler",
    "GetTodoByIdQuery",
    "GetTodoByIdHandler",
]
