"""
JSON bodies for the /v1/todos gateway.

Field names follow the proto3 JSON mapping of protos/todo.proto
(lowerCamelCase on the wire, snake_case in Python). Responses are built from
the servicer's protobuf messages with from_proto.
"""

from typing import Annotated, Optional

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from todo_service.presentation.grpc.generated import todo_pb2

# Range of the proto int32 id fields
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

TodoId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


class Message(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ==================== REQUESTS ====================


class CreateTodoBody(Message):
    todo_name: str = ""


class UpdateTodoBody(Message):
    todo_name: str = ""


# ==================== RESPONSES ====================


class StatusData(Message):
    success: bool = False
    code: int = 0
    message: str = ""
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_proto(cls, status: todo_pb2.StatusData) -> "StatusData":
        return cls(
            success=status.success,
            code=status.code,
            message=status.message,
            errors=list(status.errors),
        )


class TodoData(Message):
    id: int = 0
    todo_name: str = ""

    @classmethod
    def from_proto(cls, todo: todo_pb2.TodoData) -> "TodoData":
        return cls(id=todo.id, todo_name=todo.todo_name)


class TodoResponse(Message):
    status: StatusData
    data: Optional[TodoData] = None

    @classmethod
    def from_proto(cls, response: todo_pb2.TodoResponse) -> "TodoResponse":
        return cls(
            status=StatusData.from_proto(response.status),
            data=TodoData.from_proto(response.data) if response.HasField("data") else None,
        )


class TodoListResponse(Message):
    status: StatusData
    data: list[TodoData] = Field(default_factory=list)

    @classmethod
    def from_proto(cls, response: todo_pb2.TodoListResponse) -> "TodoListResponse":
        return cls(
            status=StatusData.from_proto(response.status),
            data=[TodoData.from_proto(todo) for todo in response.data],
        )


class CreateTodoResponse(Message):
    status: StatusData
    id: int = 0

    @classmethod
    def from_proto(cls, response: todo_pb2.CreateTodoResponse) -> "CreateTodoResponse":
        return cls(status=StatusData.from_proto(response.status), id=response.id)


class StatusResponse(Message):
    """Update and Delete responses carry only the envelope."""

    status: StatusData

    @classmethod
    def from_proto(cls, response) -> "StatusResponse":
        return cls(status=StatusData.from_proto(response.status))
