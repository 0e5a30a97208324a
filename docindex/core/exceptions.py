"""
Exception hierarchy for the document index application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocIndexException(Exception):
    """Base exception for all document index errors."""

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


class InvalidArgumentError(DocIndexException):
    """Raised when a required field is missing, empty or out of range."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnauthorizedError(DocIndexException):
    """Raised when the primary credential is missing or incorrect."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ForbiddenError(DocIndexException):
    """Raised when a destructive operation carries a wrong confirmation token."""

    def __init__(self, message: str = "Invalid confirmation token") -> None:
        super().__init__(message)


class UpstreamError(DocIndexException):
    """Raised when an embedding or vector index call fails or times out."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message
            operation: Operation that failed (embed, upsert, query, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class EmbeddingError(UpstreamError):
    """Raised when embedding generation fails."""

    pass


class VectorStoreError(UpstreamError):
    """Raised when vector store operations fail."""

    pass
