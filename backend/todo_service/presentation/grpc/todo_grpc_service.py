"""
Todo gRPC Servicer - boundary adapter for todo.v1.TodoService.

Guidelines:
- Thin layer: protobuf message → command/query → dispatcher → status envelope
- Validation and domain errors become a 400 envelope with the validator messages
- Not found is a normal envelope (404 / 422), never an exception
- Anything else propagates to ExceptionInterceptor (INTERNAL, generic message)
- The caller's deadline is forwarded to the dispatcher

Flow:
  gRPC Request → Servicer → Command/Query → Dispatcher → Handler → Repository
                                       ↓
  gRPC Response ← Servicer ← StatusData envelope ←
"""

from logging import getLogger
from typing import Optional, Union

import grpc

from todo_service.application.commands.todos import (
    CreateTodoCommand,
    DeleteTodoCommand,
    UpdateTodoCommand,
)
from todo_service.application.common.dispatcher import Dispatcher
from todo_service.application.common.exceptions import AppValidationError
from todo_service.application.dto.todo import CreateTodoDto, TodoDto, UpdateTodoDto
from todo_service.application.queries.todos import GetAllTodosQuery, GetTodoByIdQuery
from todo_service.domain.exceptions import DomainValidationError
from todo_service.presentation.grpc.generated import todo_pb2, todo_pb2_grpc

logger = getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Validation error occurred"


def _status(code: int, message: str) -> todo_pb2.StatusData:
    return todo_pb2.StatusData(success=200 <= code < 300, code=code, message=message)


def _failure_status(
    error: Union[AppValidationError, DomainValidationError], method: str
) -> todo_pb2.StatusData:
    logger.warning(f"Validation error in {method}: {error.errors}")
    return todo_pb2.StatusData(
        success=False,
        code=400,
        message=VALIDATION_ERROR_MESSAGE,
        errors=error.errors,
    )


def _to_todo_data(todo: TodoDto) -> todo_pb2.TodoData:
    return todo_pb2.TodoData(id=todo.id, todo_name=todo.todo_name)


def _time_remaining(context: Optional[grpc.aio.ServicerContext]) -> Optional[float]:
    if context is None:
        return None
    return context.time_remaining()


class TodoGrpcService(todo_pb2_grpc.TodoServiceServicer):
    """Servicer for todo.v1.TodoService. Register with add_TodoServiceServicer_to_server."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def GetById(
        self,
        request: todo_pb2.GetTodoByIdRequest,
        context: Optional[grpc.aio.ServicerContext] = None,
    ) -> todo_pb2.TodoResponse:
        logger.info(f"Attempting to Get TodoById: {request.id}")

        todo = await self._dispatcher.send(
            GetTodoByIdQuery(id=request.id), timeout=_time_remaining(context)
        )
        if todo is None:
            return todo_pb2.TodoResponse(status=_status(404, "No record found"))

        return todo_pb2.TodoResponse(
            status=_status(200, "Record found."), data=_to_todo_data(todo)
        )

    async def GetAll(
        self,
        request,
        context: Optional[grpc.aio.ServicerContext] = None,
    ) -> todo_pb2.TodoListResponse:
        logger.info("Attempting to Get All Todos")

        todos = await self._dispatcher.send(
            GetAllTodosQuery(), timeout=_time_remaining(context)
        )
        if not todos:
            return todo_pb2.TodoListResponse(status=_status(200, "No records found."))

        return todo_pb2.TodoListResponse(
            status=_status(200, "Record(s) found."),
            data=[_to_todo_data(todo) for todo in todos],
        )

    async def Create(
        self,
        request: todo_pb2.CreateTodoRequest,
        context: Optional[grpc.aio.ServicerContext] = None,
    ) -> todo_pb2.CreateTodoResponse:
        logger.info("Attempting to Create a Todo")

        command = CreateTodoCommand(dto=CreateTodoDto(todo_name=request.todo_name))
        try:
            todo_id = await self._dispatcher.send(
                command, timeout=_time_remaining(context)
            )
        except (AppValidationError, DomainValidationError) as e:
            return todo_pb2.CreateTodoResponse(status=_failure_status(e, "Create"))

        if not todo_id:
            return todo_pb2.CreateTodoResponse(status=_status(422, "Unable to create."))

        return todo_pb2.CreateTodoResponse(
            status=_status(201, "Record created successfully."), id=todo_id
        )

    async def Update(
        self,
        request: todo_pb2.UpdateTodoRequest,
        context: Optional[grpc.aio.ServicerContext] = None,
    ) -> todo_pb2.UpdateTodoResponse:
        logger.info(f"Attempting to update a Todo: {request.id}")

        command = UpdateTodoCommand(
            dto=UpdateTodoDto(id=request.id, todo_name=request.todo_name)
        )
        try:
            updated = await self._dispatcher.send(
                command, timeout=_time_remaining(context)
            )
        except (AppValidationError, DomainValidationError) as e:
            return todo_pb2.UpdateTodoResponse(status=_failure_status(e, "Update"))

        if not updated:
            return todo_pb2.UpdateTodoResponse(status=_status(422, "Unable to update."))

        return todo_pb2.UpdateTodoResponse(
            status=_status(200, "Record updated successfully.")
        )

    async def Delete(
        self,
        request: todo_pb2.DeleteTodoRequest,
        context: Optional[grpc.aio.ServicerContext] = None,
    ) -> todo_pb2.DeleteTodoResponse:
        logger.info(f"Attempting to delete a Todo: {request.id}")

        try:
            deleted = await self._dispatcher.send(
                DeleteTodoCommand(id=request.id), timeout=_time_remaining(context)
            )
        except (AppValidationError, DomainValidationError) as e:
            return todo_pb2.DeleteTodoResponse(status=_failure_status(e, "Delete"))

        if not deleted:
            return todo_pb2.DeleteTodoResponse(status=_status(422, "Unable to delete."))

        return todo_pb2.DeleteTodoResponse(
            status=_status(200, "Record deleted successfully.")
        )
