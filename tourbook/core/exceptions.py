"""
Exception hierarchy for the Tourbook application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TourbookException(Exception):
    """Base exception for all Tourbook application errors."""

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


class ValidationError(TourbookException):
    """Raised when input fails a business rule pydantic cannot express."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(TourbookException):
    """Raised when a row cannot be found by id or slug."""

    def __init__(
        self,
        resource: str,
        identifier: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Human name of the missing resource ("Experience", "FAQ")
            identifier: The id or slug that was looked up
            details: Additional context
        """
        details = details or {}
        details["resource"] = resource
        details["identifier"] = str(identifier)
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", details)


class SlugConflictError(TourbookException):
    """Raised when a slug is already taken in its table."""

    def __init__(self, resource: str, slug: str) -> None:
        self.resource = resource
        self.slug = slug
        super().__init__(
            f"{resource} slug already in use: {slug}",
            {"resource": resource, "slug": slug},
        )


class SlugMovedError(TourbookException):
    """
    Raised when a slug lookup misses but a stored redirect knows the new slug.

    Routers turn this into an HTTP redirect rather than an error body.
    """

    def __init__(self, content_type: str, old_slug: str, new_slug: str, permanent: bool = True) -> None:
        self.content_type = content_type
        self.old_slug = old_slug
        self.new_slug = new_slug
        self.permanent = permanent
        super().__init__(
            f"{content_type} moved: {old_slug} -> {new_slug}",
            {"content_type": content_type, "old_slug": old_slug, "new_slug": new_slug},
        )
