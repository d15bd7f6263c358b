"""Todo data models using Pydantic."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TodoBase(BaseModel):
    """Request body shared by create and update."""

    todo: str = ""


class TodoCreate(TodoBase):
    """Model for creating new todos."""


class TodoUpdate(TodoBase):
    """Model for replacing the text of an existing todo."""


class Todo(BaseModel):
    """Stored todo item."""

    id: str
    todo: str
    is_completed: bool = False

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
