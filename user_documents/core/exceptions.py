"""
Exception hierarchy for the user and document service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class UserDocumentsException(Exception):
    """Base exception for all user and document service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UserNotFoundError(UserDocumentsException):
    """Raised when a lookup that must find a user finds none."""

    def __init__(self, email: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize user not found error.

        Args:
            email: Email that matched no user
            details: Additional context
        """
        details = details or {}
        details["email"] = email
        super().__init__(f"User not found: {email}", details)
