"""
DTOs - Data Transfer Objects

DTOs move validated input between the boundary and the handlers:
- todo.py → CreateTodoDto, UpdateTodoDto, TodoDto

Note: These are different from domain entities.
DTOs are for input/output, entities are for business logic.
"""

from todo_service.application.dto.todo import CreateTodoDto, TodoDto, UpdateTodoDto

__all__ = [
    "CreateTodoDto",
    "UpdateTodoDto",
    "TodoDto",
]
