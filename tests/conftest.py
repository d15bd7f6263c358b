"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import TodoRepository  # noqa: E402
from todo_api.services.todo_service import TodoService  # noqa: E402
from todo_api.settings import Settings  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database file."""
    return Settings(db_path=tmp_path / "todos.db")


@pytest.fixture
def repository(settings: Settings) -> TodoRepository:
    """Repository with the schema already created."""
    repository = TodoRepository(settings.db_path, timeout=settings.db_timeout)
    repository.init_schema()
    return repository


@pytest.fixture
def todo_service(repository: TodoRepository) -> TodoService:
    """Create todo service for testing."""
    return TodoService(repository)


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Provide a TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
