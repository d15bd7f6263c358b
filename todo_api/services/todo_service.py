"""Todo service - business logic layer."""

from __future__ import annotations

import logging
import uuid
from typing import List, Union

from pydantic import ValidationError

from ..errors import BadRequestError, NotFoundError, PersistenceError
from ..models.todo import Todo, TodoCreate, TodoUpdate
from ..repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Could not add a new todo, please try again."


def _decode_update(payload: bytes) -> TodoUpdate:
    try:
        return TodoUpdate.model_validate_json(payload)
    except ValidationError as exc:
        raise BadRequestError(f"Invalid request payload: {exc.errors()}") from exc


class TodoService:
    """Stateless service for todo business logic.

    Targeted mutations check that the id exists first so a missing todo
    surfaces as ``NotFoundError`` instead of a silent no-op. The check and
    the write are separate store calls and are not atomic.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def list_todos(self) -> List[Todo]:
        """Get all todo items."""
        return self.repository.list_all()

    def create_todo(self, todo_data: TodoCreate) -> Todo:
        """Create a new todo item with a fresh id."""
        todo_id = str(uuid.uuid4())
        try:
            todo = self.repository.create(todo_id, todo_data.todo)
        except PersistenceError as exc:
            raise PersistenceError(str(exc), public_message=CREATE_FAILED_MESSAGE) from exc
        logger.info("Created todo %s", todo_id)
        return todo

    def update_todo(self, todo_id: str, todo_data: Union[TodoUpdate, bytes]) -> None:
        """Replace the text of an existing todo item.

        A raw JSON payload is decoded only after the id is known to exist, so
        an unknown id reports ``NotFoundError`` whatever the body holds.
        """
        self._ensure_exists(todo_id)
        if not isinstance(todo_data, TodoUpdate):
            todo_data = _decode_update(todo_data)
        self.repository.update_text(todo_id, todo_data.todo)
        logger.info("Updated todo %s", todo_id)

    def delete_todo(self, todo_id: str) -> None:
        """Delete a todo item."""
        self._ensure_exists(todo_id)
        self.repository.delete(todo_id)
        logger.info("Deleted todo %s", todo_id)

    def mark_todo_completed(self, todo_id: str) -> None:
        """Mark a todo item as completed. Repeated calls succeed."""
        self._ensure_exists(todo_id)
        self.repository.mark_completed(todo_id)
        logger.info("Marked todo %s as completed", todo_id)

    def _ensure_exists(self, todo_id: str) -> None:
        if not self.repository.exists(todo_id):
            raise NotFoundError(f"Todo {todo_id} does not exist")
