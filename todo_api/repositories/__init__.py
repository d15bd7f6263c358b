from .todo_repository import TodoRepository

__all__ = ["TodoRepository"]
