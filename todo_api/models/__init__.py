"""Pydantic models for the todo API."""

from .todo import MessageResponse, Todo, TodoCreate, TodoUpdate

__all__ = ["MessageResponse", "Todo", "TodoCreate", "TodoUpdate"]
