"""
API Routers - FastAPI endpoint definitions.
"""

from todo_service.presentation.api.health import router as health_router
from todo_service.presentation.api.todos import router as todos_router

__all__ = [
    "health_router",
    "todos_router",
]
