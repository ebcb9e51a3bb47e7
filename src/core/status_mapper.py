"""Map orchestration outcomes to HTTP status codes and JSON envelopes.

Every error body has the shape ``{"error": str}`` with an optional
``"message"``. Storage and runtime faults are logged here and answered with
a generic 500 body so driver messages never reach the client.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import (
    AuthError,
    ConflictError,
    ForumError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)
from core.outcomes import Empty, Listing

logger = logging.getLogger(__name__)

# Kept as literal 401 for compatibility with existing clients
STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidIdentifierError: status.HTTP_401_UNAUTHORIZED,
    AuthError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}

SERVER_FAULT_BODY = {
    "error": "Internal Server Error",
    "message": "An unexpected error occurred.",
}


def error_body(error: str, message: Optional[str] = None) -> Dict[str, str]:
    """Build the JSON error envelope."""
    body = {"error": error}
    if message is not None:
        body["message"] = message
    return body


def status_for(exc: ForumError) -> int:
    """Return the HTTP status for a Forum error, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def resolve_listing(outcome: Listing) -> List[Any]:
    """Return the rows of a listing, or raise NotFoundError when it is empty.

    Args:
        outcome: Result of a manager's list operation.

    Returns:
        The listed rows.

    Raises:
        NotFoundError: If the listing matched no rows.
    """
    if isinstance(outcome, Empty):
        raise NotFoundError(outcome.message)
    return outcome.items


def deleted_body(entity: str) -> Dict[str, str]:
    """Confirmation body for a successful delete, e.g. "Thread successfully deleted"."""
    return {"message": f"{entity} successfully deleted"}


async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    """Answer a Forum error with its mapped status and error envelope."""
    return JSONResponse(
        status_code=status_for(exc),
        content=error_body(exc.error, exc.message),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Bodies that are not JSON objects never reach the managers
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request body", "The request body must be a JSON object."),
    )


async def server_fault_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and answer with the generic 500 body.

    Args:
        request: The request that failed.
        exc: Storage or runtime error; its text is never sent to the client.

    Returns:
        JSONResponse with SERVER_FAULT_BODY.
    """
    logger.exception(
        "Unhandled error during %s %s", request.method, request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=SERVER_FAULT_BODY,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the outcome-to-response handlers on a FastAPI application."""
    app.add_exception_handler(ForumError, forum_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, server_fault_handler)
    app.add_exception_handler(Exception, server_fault_handler)
