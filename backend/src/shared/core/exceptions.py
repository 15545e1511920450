"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    LinkbioException (base)
       │
       ├── NotFoundError (404)            ← Resource not found
       │      ├── UserNotFoundError
       │      ├── LinkNotFoundError
       │      └── ProfileNotFoundError
       ├── ValidationError (400)          ← Invalid input data
       │      └── InvalidArgumentError    ← Ids outside the claimed owner
       ├── ConflictError (409)            ← Resource already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503)  ← Database unreachable

Usage:
======
    from src.shared.core.exceptions import NotFoundError, ConflictError

    # Raise with automatic status code
    raise LinkNotFoundError(link_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Link with id 'abc' not found"}}

    # Raise with additional details
    raise DuplicateResourceError("Username already taken", details={"field": "username"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Link with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class LinkbioException(Exception):
    """
    Base exception for all Linkbio application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(LinkbioException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=str(user_id))


class LinkNotFoundError(NotFoundError):
    """Link not found error."""

    def __init__(self, link_id: str) -> None:
        super().__init__(resource="Link", resource_id=str(link_id))


class ProfileNotFoundError(NotFoundError):
    """No active profile for a username."""

    def __init__(self, username: str) -> None:
        super().__init__(resource="Profile", details={"username": username})


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(LinkbioException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidArgumentError(ValidationError):
    """
    Input is well-formed but refers to things it may not touch.

    Raised when a reorder batch names links that don't exist or
    belong to another owner.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details, error_code="INVALID_ARGUMENT")


class ConflictError(LinkbioException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(LinkbioException):
    """
    Service temporarily unavailable error (503).

    Raised when the database cannot be reached.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )
