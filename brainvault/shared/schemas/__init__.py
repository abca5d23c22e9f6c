"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error responses, structured validation errors, health
- user: Signup/signin
- content: Content CRUD and search
- share: Share toggling and the public vault view

Usage:
======
    from brainvault.shared.schemas.user import SignupRequest, TokenResponse
    from brainvault.shared.schemas.common import ErrorResponse
"""

from brainvault.shared.schemas.common import (
    FieldError,
    format_validation_errors,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    ReadinessResponse,
)
from brainvault.shared.schemas.user import (
    SignupRequest,
    SigninRequest,
    TokenResponse,
)
from brainvault.shared.schemas.content import (
    CreateContentRequest,
    CreateContentResponse,
    DeleteContentRequest,
    ContentOwnerResponse,
    ContentItemResponse,
    ContentListResponse,
    SearchResultItem,
    SearchResponse,
    build_content_response,
)
from brainvault.shared.schemas.share import (
    ShareRequest,
    ShareHashResponse,
    SharedVaultResponse,
)

__all__ = [
    # Common
    "FieldError",
    "format_validation_errors",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ReadinessResponse",
    # User
    "SignupRequest",
    "SigninRequest",
    "TokenResponse",
    # Content
    "CreateContentRequest",
    "CreateContentResponse",
    "DeleteContentRequest",
    "ContentOwnerResponse",
    "ContentItemResponse",
    "ContentListResponse",
    "SearchResultItem",
    "SearchResponse",
    "build_content_response",
    # Share
    "ShareRequest",
    "ShareHashResponse",
    "SharedVaultResponse",
]
