"""Domain exceptions.

Errors raised by the admin model factories and their collaborators.
The HTTP layer translates them into the standard error envelope.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Argument Errors
# ============================================================================


class MissingArgumentError(DomainError, ValueError):
    """Raised when a required argument is None.

    Factories raise this before calling any collaborator.
    """

    error_code = "MISSING_ARGUMENT"

    def __init__(self, argument: str) -> None:
        """Initialize missing argument error.

        Args:
            argument: Name of the missing argument.
        """
        super().__init__(
            f"Argument '{argument}' is required",
            details={"argument": argument},
        )
        self.argument = argument


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for missing entity errors."""

    error_code = "NOT_FOUND"


class CategoryNotFoundError(NotFoundError):
    """Raised when a category does not exist or is deleted."""

    error_code = "CATEGORY_NOT_FOUND"

    def __init__(self, category_id: int) -> None:
        """Initialize category not found error.

        Args:
            category_id: ID of the requested category.
        """
        super().__init__(
            f"Category {category_id} not found",
            details={"category_id": category_id},
        )
