"""Get All Todos Query."""

from dataclasses import dataclass

from todo_service.application.common.interfaces import Query, QueryHandler
from todo_service.application.dto.todo import TodoDto
from todo_service.domain.ports.repositories import TodoReadRepository


@dataclass(frozen=True)
class GetAllTodosQuery(Query[list[TodoDto]]):
    pass


class GetAllTodosHandler(QueryHandler[list[TodoDto]]):
    def __init__(self, read_repository: TodoReadRepository):
        self._read_repository = read_repository

    async def execute(self, query: GetAllTodosQuery) -> list[TodoDto]:
        todos = await self._read_repository.get_all()
        return [TodoDto.from_entity(todo) for todo in todos]
