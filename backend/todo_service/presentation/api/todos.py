"""
Todos API Router - JSON gateway onto the gRPC servicer.

Guidelines:
- Same five operations and the same envelopes as todo.v1.TodoService
- Receives the servicer via Dependency Injection (Dishka)
- Envelope outcomes (400/404/422) are returned with HTTP 200, as a
  transcoded gRPC call would; only transport failures use HTTP errors
- Ids are bounded to the proto int32 range; anything else is a 400

Flow:
  HTTP Request → Router → protobuf request → TodoGrpcService → Dispatcher
                                                  ↓
  HTTP Response ← Router ← JSON body ← protobuf envelope ←
"""

from fastapi import APIRouter
from google.protobuf import empty_pb2
from dishka.integrations.fastapi import FromDishka, inject

from todo_service.presentation.api.schemas import (
    CreateTodoBody,
    CreateTodoResponse,
    StatusResponse,
    TodoId,
    TodoListResponse,
    TodoResponse,
    UpdateTodoBody,
)
from todo_service.presentation.grpc.generated import todo_pb2
from todo_service.presentation.grpc.todo_grpc_service import TodoGrpcService

router = APIRouter(prefix="/v1/todos", tags=["todos"])


@router.get("", response_model=TodoListResponse)
@inject
async def get_all_todos(service: FromDishka[TodoGrpcService]):
    """List all todos."""
    response = await service.GetAll(empty_pb2.Empty())
    return TodoListResponse.from_proto(response)


@router.get("/{todo_id}", response_model=TodoResponse)
@inject
async def get_todo(todo_id: TodoId, service: FromDishka[TodoGrpcService]):
    """Get todo by ID."""
    response = await service.GetById(todo_pb2.GetTodoByIdRequest(id=todo_id))
    return TodoResponse.from_proto(response)


@router.post("", response_model=CreateTodoResponse)
@inject
async def create_todo(body: CreateTodoBody, service: FromDishka[TodoGrpcService]):
    """Create a todo."""
    response = await service.Create(todo_pb2.CreateTodoRequest(todo_name=body.todo_name))
    return CreateTodoResponse.from_proto(response)


@router.put("/{todo_id}", response_model=StatusResponse)
@inject
async def update_todo(
    todo_id: TodoId, body: UpdateTodoBody, service: FromDishka[TodoGrpcService]
):
    """Rename a todo."""
    response = await service.Update(
        todo_pb2.UpdateTodoRequest(id=todo_id, todo_name=body.todo_name)
    )
    return StatusResponse.from_proto(response)


@router.delete("/{todo_id}", response_model=StatusResponse)
@inject
async def delete_todo(todo_id: TodoId, service: FromDishka[TodoGrpcService]):
    """Delete todo by ID."""
    response = await service.Delete(todo_pb2.DeleteTodoRequest(id=todo_id))
    return StatusResponse.from_proto(response)
