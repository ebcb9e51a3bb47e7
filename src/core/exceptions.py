"""Custom exception classes for the Forum API.

This module defines the application-specific error taxonomy. Each error
carries a short ``error`` string and an optional longer ``message``; the
status mapper turns them into HTTP responses.
"""

from typing import Optional


class ForumError(Exception):
    """Base exception for all Forum API errors."""

    def __init__(self, error: str, message: Optional[str] = None):
        """Initialize the exception.

        Args:
            error: Short, client-facing description of the failure.
            message: Optional longer explanation.
        """
        self.error = error
        self.message = message
        super().__init__(error if message is None else f"{error}: {message}")


class ValidationError(ForumError):
    """Raised when request data is missing or malformed."""

    pass


class InvalidIdentifierError(ForumError):
    """Raised when a path identifier is not a positive 32-bit integer."""

    def __init__(self, name: str, error: Optional[str] = None):
        """Initialize the exception.

        Args:
            name: Name of the offending path parameter, e.g. "thread_id".
            error: Custom error text. When given, no message is attached.
        """
        self.name = name
        if error is not None:
            super().__init__(error)
            return
        super().__init__(
            f"Invalid {name}",
            f"The {name} must be a positive integer.",
        )


class NotFoundError(ForumError):
    """Raised when an entity or a collection does not exist."""

    pass


class ConflictError(ForumError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class AuthError(ForumError):
    """Raised when credentials do not match a stored user."""

    pass
