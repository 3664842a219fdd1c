"""Error kinds raised by snippet services and mapped to HTTP responses in app.main."""

from __future__ import annotations

from typing import Optional


class SnippetError(Exception):
    """Base class for snippet domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SnippetError):
    """A required field is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(SnippetError):
    """The referenced snippet does not exist."""

    def __init__(self, message: str = "Snippet not found") -> None:
        super().__init__(message)


class AuthorizationError(SnippetError):
    """The snippet exists but belongs to another user."""

    def __init__(self, message: str = "Not authorized to access this snippet") -> None:
        super().__init__(message)


class PersistenceError(SnippetError):
    """The store failed while handling a request."""

    def __init__(
        self, message: str = "Server error", cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.cause = cause
