"""API routes for todo management."""

from typing import List

from fastapi import APIRouter, Depends

from .dependencies import get_raw_body, get_todo_service
from ..models.todo import MessageResponse, Todo, TodoCreate
from ..services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[Todo])
def get_todos(
    service: TodoService = Depends(get_todo_service),
) -> List[Todo]:
    """Get all todo items."""
    return service.list_todos()


@router.post("/todos", response_model=Todo)
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a new todo item."""
    return service.create_todo(todo_data)


@router.put("/todos/{todo_id}", response_model=MessageResponse)
def update_todo(
    todo_id: str,
    payload: bytes = Depends(get_raw_body),
    service: TodoService = Depends(get_todo_service),
) -> MessageResponse:
    """Update the text of an existing todo item."""
    service.update_todo(todo_id, payload)
    return MessageResponse(message="Todo updated successfully.")


@router.delete("/todos/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> MessageResponse:
    """Delete a todo item."""
    service.delete_todo(todo_id)
    return MessageResponse(message="Todo deleted successfully.")


@router.patch("/todos/{todo_id}/complete", response_model=MessageResponse)
def complete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> MessageResponse:
    """Mark a todo item as completed."""
    service.mark_todo_completed(todo_id)
    return MessageResponse(message="Todo marked as completed successfully.")
