"""Shared application building blocks: CQRS interfaces, dispatcher, errors."""

from todo_service.application.common.dispatcher import Dispatcher, PipelineConfig
from todo_service.application.common.exceptions import (
    AppValidationError,
    ConfigurationError,
    HandlerNotRegisteredError,
)
from todo_service.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
    Validator,
)

__all__ = [
    "AppValidationError",
    "Command",
    "CommandHandler",
    "ConfigurationError",
    "Dispatcher",
    "HandlerNotRegisteredError",
    "PipelineConfig",
    "Query",
    "QueryHandler",
    "Validator",
]
