"""
Create Todo Command.

Guidelines:
- Command: @dataclass(frozen=True) holding the CreateTodoDto
- Handler: receives the write repository via __init__ (DI)
- Handler.execute(): builds the entity (which validates and trims the name),
  persists it and returns the id assigned by storage
"""

from dataclasses import dataclass

from todo_service.application.common.interfaces import Command, CommandHandler
from todo_service.application.dto.todo import CreateTodoDto
from todo_service.domain.entities.todo import Todo
from todo_service.domain.ports.repositories import TodoWriteRepository


@dataclass(frozen=True)
class CreateTodoCommand(Command[int]):
    dto: CreateTodoDto


class CreateTodoHandler(CommandHandler[int]):
    _write_repository: TodoWriteRepository

    def __init__(self, write_repository: TodoWriteRepository):
        self._write_repository = write_repository

    async def execute(self, command: CreateTodoCommand) -> int:
        todo = Todo.create(command.dto.todo_name)
        return await self._write_repository.add(todo)
