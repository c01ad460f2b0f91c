"""
Todo Entity - A single named task.

Validation here overlaps with the request validators in the application
layer. The entity re-checks its own invariant so that no call path can
produce a Todo with a blank name.
"""

from dataclasses import dataclass
from typing import Optional

from todo_service.domain.exceptions import DomainValidationError

TODO_NAME_MAX_LENGTH = 100

TODO_NAME_REQUIRED = "TodoName is required."
TODO_NAME_TOO_LONG = f"TodoName must not exceed {TODO_NAME_MAX_LENGTH} characters."


def _validate_todo_name(todo_name: Optional[str]) -> list[str]:
    errors = []
    if todo_name is None or not todo_name.strip():
        errors.append(TODO_NAME_REQUIRED)
    elif len(todo_name.strip()) > TODO_NAME_MAX_LENGTH:
        errors.append(TODO_NAME_TOO_LONG)
    return errors


@dataclass
class Todo:
    todo_name: str
    id: Optional[int] = None  # None until storage assigns one

    def __post_init__(self):
        errors = _validate_todo_name(self.todo_name)
        if errors:
            raise DomainValidationError(errors)
        self.todo_name = self.todo_name.strip()

    @classmethod
    def create(cls, todo_name: str) -> "Todo":
        """Build a new, not yet persisted Todo with a trimmed name."""
        return cls(todo_name=todo_name)

    def update(self, todo_name: str) -> "Todo":
        """Rename in place; the entity keeps its identity."""
        errors = _validate_todo_name(todo_name)
        if errors:
            raise DomainValidationError(errors)

        self.todo_name = todo_name.strip()
        return self
