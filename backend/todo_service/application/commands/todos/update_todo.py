"""Update Todo Command."""

from dataclasses import dataclass

from todo_service.application.common.interfaces import Command, CommandHandler
from todo_service.application.dto.todo import UpdateTodoDto
from todo_service.domain.ports.repositories import (
    TodoReadRepository,
    TodoWriteRepository,
)


@dataclass(frozen=True)
class UpdateTodoCommand(Command[bool]):
    dto: UpdateTodoDto


class UpdateTodoHandler(CommandHandler[bool]):
    def __init__(
        self,
        read_repository: TodoReadRepository,
        write_repository: TodoWriteRepository,
    ):
        self._read_repository = read_repository
        self._write_repository = write_repository

    async def execute(self, command: UpdateTodoCommand) -> bool:
        dto = command.dto

        existing = await self._read_repository.get_by_id(dto.id)
        if existing is None:
            return False

        existing.update(dto.todo_name)
        return await self._write_repository.update(existing)
