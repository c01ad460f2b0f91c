import pytest

from todo_service.config.settings import TestingConfig
from todo_service.infrastructure.persistence import DatabaseSessionManager
from todo_service.presentation.grpc import TodoGrpcService
from todo_service.setup.ioc import create_container


@pytest.fixture()
def config():
    return TestingConfig


@pytest.fixture()
async def db():
    """Fresh in-memory database with the schema created."""
    manager = DatabaseSessionManager(TestingConfig.DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture()
async def container(config):
    """Fully wired DI container backed by an in-memory database."""
    container = create_container(config)
    yield container
    await container.close()


@pytest.fixture()
async def servicer(container):
    return await container.get(TodoGrpcService)
