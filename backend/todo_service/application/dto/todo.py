"""Todo DTOs for commands and query results."""

from pydantic import BaseModel, ConfigDict

from todo_service.domain.entities.todo import Todo


class CreateTodoDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    todo_name: str = ""


class UpdateTodoDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = 0
    todo_name: str = ""


class TodoDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    todo_name: str

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoDto":
        return cls(id=todo.id, todo_name=todo.todo_name)
