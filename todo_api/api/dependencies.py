"""API dependencies for todo management."""

from fastapi import Depends, Request

from ..repositories.todo_repository import TodoRepository
from ..services.todo_service import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency returning the repository the app was built with."""
    return request.app.state.todo_repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)


async def get_raw_body(request: Request) -> bytes:
    """Dependency returning the undecoded request body."""
    return await request.body()
