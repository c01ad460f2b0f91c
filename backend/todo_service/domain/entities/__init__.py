"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (assigned by storage)
- Has behavior (methods)
- Can never be observed in an invalid state
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from todo_service.domain.entities.todo import TODO_NAME_MAX_LENGTH, Todo

__all__ = [
    "Todo",
    "TODO_NAME_MAX_LENGTH",
]
