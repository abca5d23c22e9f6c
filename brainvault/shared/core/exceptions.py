"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    VaultException (base, 500)
       │
       ├── AuthenticationError (configurable, 404 by default)  ← Missing/invalid token
       ├── AuthorizationError (403)
       │      └── IncorrectPasswordError                       ← Signin password mismatch
       ├── NotFoundError (404)
       │      └── UserNotFoundError                            ← Signin for unknown user
       ├── InvalidShareLinkError (411)                         ← Unknown hash or vanished owner
       ├── ValidationError (400)                               ← Invalid input data
       ├── ConflictError (403)
       │      └── DuplicateResourceError                       ← Username already taken
       ├── ProviderError (500)                                 ← Embedding provider failure
       └── InternalError (500)                                 ← Content create / search failure

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "User does not exist",
            "details": {}
        }
    }

Usage:
======
    from brainvault.shared.core.exceptions import ValidationError, UserNotFoundError

    raise ValidationError("Query cannot be empty", details={"field": "q"})
    raise UserNotFoundError(username)
"""

from typing import Any, Optional


class VaultException(Exception):
    """
    Base exception for all BrainVault application errors.

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
# AUTHENTICATION & AUTHORIZATION ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(VaultException):
    """
    Token missing, malformed, forged or carrying an unusable payload.

    The status code comes from ``AUTH_FAILURE_STATUS_CODE`` at the raise site;
    the service has always answered 404 here, so that remains the default.
    """

    def __init__(
        self,
        message: str = "Incorrect Credentials",
        status_code: int = 404,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(VaultException):
    """Authorization failed error (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: str = "AUTHORIZATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code=error_code,
            details=details,
        )


class IncorrectPasswordError(AuthorizationError):
    """Signin with a known username but the wrong password."""

    def __init__(self) -> None:
        super().__init__(
            message="Incorrect password",
            error_code="INCORRECT_PASSWORD",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404, 411)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(VaultException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("User", username)
        # Message: "User 'alice' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
            if resource_id:
                message = f"{resource} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, username: Optional[str] = None) -> None:
        super().__init__(
            resource="User",
            resource_id=username,
            message="User does not exist",
        )


class InvalidShareLinkError(VaultException):
    """Share hash is unknown, or its owner no longer exists (411)."""

    def __init__(self, message: str = "Incorrect hash") -> None:
        super().__init__(
            message=message,
            status_code=411,
            error_code="INVALID_SHARE_LINK",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(VaultException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(VaultException):
    """
    Resource conflict error.

    Answered with 403, which is what clients of the signup route expect for a
    taken username.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Trying to create a resource whose unique key already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# PROVIDER & INTERNAL ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class ProviderError(VaultException):
    """
    Embedding provider call failed, timed out, or returned no vector.

    Only surfaces to a client when raised inside a request (search); the
    background embedding pipeline logs it instead.
    """

    def __init__(
        self,
        message: str = "Failed to generate embedding",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="PROVIDER_ERROR",
            details=details,
        )


class InternalError(VaultException):
    """Catch-all 500 used where the cause is deliberately not distinguished."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR",
            details=details,
        )
