"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteTodoCommand(Command[bool]):
        id: int

    class DeleteTodoHandler(CommandHandler[bool]):
        def __init__(self, read_repository: TodoReadRepository, ...):
            self._read_repository = read_repository

        async def execute(self, command: DeleteTodoCommand) -> bool:
            ...

    class DeleteTodoCommandValidator(Validator[DeleteTodoCommand]):
        def validate(self, request: DeleteTodoCommand) -> list[str]:
            return [] if request.id > 0 else ["Invalid Todo Id."]
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Union

T = TypeVar("T")
TRequest = TypeVar("TRequest")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...

class Validator(ABC, Generic[TRequest]):
    """Rule set for one request shape. Returns failure messages in rule order."""

    @abstractmethod
    def validate(self, request: TRequest) -> list[str]:
        ...


Request = Union[Command, Query]
RequestHandler = Union[CommandHandler, QueryHandler]
