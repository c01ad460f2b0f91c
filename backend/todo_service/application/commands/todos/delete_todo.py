"""Delete Todo Command."""

from dataclasses import dataclass

from todo_service.application.common.interfaces import Command, CommandHandler
from todo_service.domain.ports.repositories import (
    TodoReadRepository,
    TodoWriteRepository,
)


@dataclass(frozen=True)
class DeleteTodoCommand(Command[bool]):
    id: int


class DeleteTodoHandler(CommandHandler[bool]):
    def __init__(
        self,
        read_repository: TodoReadRepository,
        write_repository: TodoWriteRepository,
    ):
        self._read_repository = read_repository
        self._write_repository = write_repository

    async def execute(self, command: DeleteTodoCommand) -> bool:
        todo = await self._read_repository.get_by_id(command.id)
        if todo is None:
            return False

        return await self._write_repository.delete(command.id)
