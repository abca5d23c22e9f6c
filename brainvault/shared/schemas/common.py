"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- Standard responses: MessageResponse, ErrorResponse, HealthResponse
- Validation: FieldError and format_validation_errors(), the structured error
  list carried by every 400 response

Usage:
======
    from brainvault.shared.schemas.common import MessageResponse, format_validation_errors

    return MessageResponse(message="User signed up")
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    """One failed validation rule."""

    field: str = Field(description="Dotted path of the offending input, e.g. 'password'")
    message: str = Field(description="Human-readable reason")
    type: str = Field(description="Machine-readable rule identifier")


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """
    Convert pydantic/FastAPI error dicts into the public error list.

    Location prefixes added by FastAPI (``body``, ``query``) are dropped so the
    field path matches the request shape.
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        formatted.append(
            FieldError(
                field=".".join(loc) or "__root__",
                message=str(error.get("msg", "Invalid value")),
                type=str(error.get("type", "value_error")),
            )
        )
    return formatted


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": [{"field": "username", ...}]}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "brainvault"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    database: bool
