"""Get Todo By Id Query. A missing todo is a normal result (None)."""

from dataclasses import dataclass
from typing import Optional

from todo_service.application.common.interfaces import Query, QueryHandler
from todo_service.application.dto.todo import TodoDto
from todo_service.domain.ports.repositories import TodoReadRepository


@dataclass(frozen=True)
class GetTodoByIdQuery(Query[Optional[TodoDto]]):
    id: int


class GetTodoByIdHandler(QueryHandler[Optional[TodoDto]]):
    def __init__(self, read_repository: TodoReadRepository):
        self._read_repository = read_repository

    async def execute(self, query: GetTodoByIdQuery) -> Optional[TodoDto]:
        todo = await self._read_repository.get_by_id(query.id)
        return TodoDto.from_entity(todo) if todo is not None else None
