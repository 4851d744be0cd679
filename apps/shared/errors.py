"""
Content errors and secure error handling

Typed errors raised by the content repositories, plus the FastAPI exception
handlers that turn them into consistent JSON payloads without leaking
sensitive information.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ContentError(Exception):
    """Base class for errors raised by the content repositories."""

    status_code = status.HTTP_400_BAD_REQUEST
    category = "client_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ContentError):
    """Update or delete referenced an id that does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    category = "not_found"

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(ContentError):
    """A write collided with a unique constraint (e.g. a blog post slug)."""

    status_code = status.HTTP_409_CONFLICT
    category = "conflict"


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "Project update")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Generate unique error ID for correlation
    error_id = str(uuid.uuid4())[:8]

    # Log full error server-side
    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def error_response(
    message: str,
    category: str,
    status_code: int,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content={
            "error": message,
            "category": category,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map content, HTTP and database errors onto the shared error payload."""

    @app.exception_handler(ContentError)
    async def content_exception_handler(request: Request, exc: ContentError):
        return error_response(
            message=exc.message,
            category=exc.category,
            status_code=exc.status_code,
        )

    # Starlette's class also covers routing 404/405, not just FastAPI's HTTPException
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        message = (
            detail.get("message") if isinstance(detail, dict) else str(detail)
        ) or "Request failed."
        category = detail.get("category") if isinstance(detail, dict) else None

        if not category:
            if exc.status_code == status.HTTP_404_NOT_FOUND:
                category = "not_found"
            elif exc.status_code >= 500:
                category = "server_error"
            else:
                category = "client_error"

        return error_response(
            message=message,
            category=category,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        sanitized, _ = log_and_sanitize_error(
            exc,
            f"Database operation on {request.url.path}",
            "A database error occurred while processing the request.",
        )
        return error_response(
            message=sanitized,
            category="database",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s", request.url.path, exc_info=exc)
        return error_response(
            message="An unexpected server error occurred. Please try again later.",
            category="server_error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
