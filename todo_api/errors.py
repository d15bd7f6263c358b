"""Error kinds raised by the todo service and mapped to HTTP responses."""

from __future__ import annotations

from typing import Optional

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again"


class TodoServiceError(Exception):
    """Base error carrying an HTTP status and a client-safe message.

    The exception text is internal detail for the logs; only
    ``public_message`` is ever sent to the client.
    """

    status_code = 500
    public_message = GENERIC_ERROR_MESSAGE

    def __init__(self, detail: str = "", *, public_message: Optional[str] = None) -> None:
        super().__init__(detail or self.public_message)
        if public_message is not None:
            self.public_message = public_message


class BadRequestError(TodoServiceError):
    """Request body could not be decoded into the expected shape."""

    status_code = 400
    public_message = f"{GENERIC_ERROR_MESSAGE}."


class NotFoundError(TodoServiceError):
    """Operation targets a todo id that does not exist."""

    status_code = 404
    public_message = "Todo not found"


class PersistenceError(TodoServiceError):
    """The store failed to read or write."""

    status_code = 500
