"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import router as api_router
from .errors import GENERIC_ERROR_MESSAGE, BadRequestError, PersistenceError, TodoServiceError
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .repositories.todo_repository import TodoRepository
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _error_response(request: Request, exc: TodoServiceError) -> JSONResponse:
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.public_message},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own repository instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    repository = TodoRepository(settings.db_path, timeout=settings.db_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Todo API (port=%s, database=%s)", settings.port, settings.db_path)
        try:
            repository.init_schema()
        except PersistenceError:
            logger.exception("Failed to initialize database")
            raise
        yield
        logger.info("Shutting down Todo API...")

    app = FastAPI(
        title="Todo API",
        description="A simple todo management API with CRUD operations",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = repository

    @app.exception_handler(TodoServiceError)
    async def todo_error_handler(request: Request, exc: TodoServiceError):
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(request, BadRequestError(f"Invalid request payload: {exc.errors()}"))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s failed unexpectedly", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_ERROR_MESSAGE},
        )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": "Todo API",
            "endpoints": "/api/todos",
        }

    @app.get("/health")
    def health():
        """Report whether the database answers queries."""
        try:
            repository.ping()
        except PersistenceError:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "degraded", "database": "unavailable"},
            )
        return {"status": "ok", "database": "ok"}

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Server is listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
