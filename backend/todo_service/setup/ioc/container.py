"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (database, repositories, handlers, dispatcher, servicer)
- Maps abstract ports to concrete implementations
- Everything is APP-scoped: repositories open a session per operation, so
  the dispatcher and its routing tables are built once at startup

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  Container → DatabaseSessionManager → SqlAlchemyTodo*Repository → handlers
                                                                      ↓
            TodoGrpcService ← Dispatcher ← PipelineConfig (handlers + validators)
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from todo_service.application.commands.todos import (
    CreateTodoCommand,
    CreateTodoHandler,
    DeleteTodoCommand,
    DeleteTodoHandler,
    UpdateTodoCommand,
    UpdateTodoHandler,
)
from todo_service.application.common.dispatcher import Dispatcher, PipelineConfig
from todo_service.application.queries.todos import (
    GetAllTodosHandler,
    GetAllTodosQuery,
    GetTodoByIdHandler,
    GetTodoByIdQuery,
)
from todo_service.application.validators import (
    CreateTodoCommandValidator,
    DeleteTodoCommandValidator,
    UpdateTodoCommandValidator,
    UpdateTodoIdValidator,
)
from todo_service.config.settings import Config
from todo_service.domain.ports.repositories import (
    TodoReadRepository,
    TodoWriteRepository,
)
from todo_service.infrastructure.persistence import (
    DatabaseSessionManager,
    SqlAlchemyTodoReadRepository,
    SqlAlchemyTodoWriteRepository,
)
from todo_service.presentation.grpc.todo_grpc_service import TodoGrpcService

# Every request type the transports can send; a missing handler fails startup
REQUEST_TYPES = (
    GetTodoByIdQuery,
    GetAllTodosQuery,
    CreateTodoCommand,
    UpdateTodoCommand,
    DeleteTodoCommand,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_database(self) -> AsyncIterable[DatabaseSessionManager]:
        """
        Provide the session manager (singleton, app-scoped).

        - Schema is created before the first request
        - The engine is disposed when the container closes
        """
        db = DatabaseSessionManager(
            self._config.DATABASE_URL,
            echo=self._config.DB_ECHO,
            pool_size=self._config.DB_POOL_SIZE,
            max_overflow=self._config.DB_MAX_OVERFLOW,
        )
        await db.create_schema()
        yield db
        await db.dispose()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_todo_read_repository(self, db: DatabaseSessionManager) -> TodoReadRepository:
        """
        - Return type is ABSTRACT (TodoReadRepository)
        - Implementation is CONCRETE (SqlAlchemyTodoReadRepository)
        """
        return SqlAlchemyTodoReadRepository(db)

    @provide(scope=Scope.APP)
    def get_todo_write_repository(self, db: DatabaseSessionManager) -> TodoWriteRepository:
        return SqlAlchemyTodoWriteRepository(db)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.APP)
    def get_get_todo_by_id_handler(
        self, read_repository: TodoReadRepository
    ) -> GetTodoByIdHandler:
        return GetTodoByIdHandler(read_repository)

    @provide(scope=Scope.APP)
    def get_get_all_todos_handler(
        self, read_repository: TodoReadRepository
    ) -> GetAllTodosHandler:
        return GetAllTodosHandler(read_repository)

    @provide(scope=Scope.APP)
    def get_create_todo_handler(
        self, write_repository: TodoWriteRepository
    ) -> CreateTodoHandler:
        return CreateTodoHandler(write_repository)

    @provide(scope=Scope.APP)
    def get_update_todo_handler(
        self,
        read_repository: TodoReadRepository,
        write_repository: TodoWriteRepository,
    ) -> UpdateTodoHandler:
        return UpdateTodoHandler(read_repository, write_repository)

    @provide(scope=Scope.APP)
    def get_delete_todo_handler(
        self,
        read_repository: TodoReadRepository,
        write_repository: TodoWriteRepository,
    ) -> DeleteTodoHandler:
        return DeleteTodoHandler(read_repository, write_repository)

    # ==================== DISPATCH ====================

    @provide(scope=Scope.APP)
    def get_pipeline_config(
        self,
        get_by_id: GetTodoByIdHandler,
        get_all: GetAllTodosHandler,
        create: CreateTodoHandler,
        update: UpdateTodoHandler,
        delete: DeleteTodoHandler,
    ) -> PipelineConfig:
        """
        Routing tables for the dispatcher.

        Validators run in the listed order; Update checks the id before the name.
        """
        return PipelineConfig(
            handlers={
                GetTodoByIdQuery: get_by_id,
                GetAllTodosQuery: get_all,
                CreateTodoCommand: create,
                UpdateTodoCommand: update,
                DeleteTodoCommand: delete,
            },
            validators={
                CreateTodoCommand: (CreateTodoCommandValidator(),),
                UpdateTodoCommand: (UpdateTodoIdValidator(), UpdateTodoCommandValidator()),
                DeleteTodoCommand: (DeleteTodoCommandValidator(),),
            },
        )

    @provide(scope=Scope.APP)
    def get_dispatcher(self, pipeline: PipelineConfig) -> Dispatcher:
        return Dispatcher(pipeline, required=REQUEST_TYPES)

    # ==================== TRANSPORT ====================

    @provide(scope=Scope.APP)
    def get_todo_grpc_service(self, dispatcher: Dispatcher) -> TodoGrpcService:
        return TodoGrpcService(dispatcher)


def create_container(config: type[Config] = Config) -> AsyncContainer:
    """
    Create and configure the Dishka container.

    Returns:
        AsyncContainer: Configured DI container

    Usage:
        container = create_container(config)
        servicer = await container.get(TodoGrpcService)
        ...
        await container.close()
    """
    return make_async_container(AppProvider(config))
