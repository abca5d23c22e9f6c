"""
Authentication Dependencies

FastAPI dependencies for user authentication.

The token travels as the raw value of the ``Authorization`` header, with no
"Bearer " scheme prefix. Clients written against this API send exactly what
``POST /signin`` returned.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Read and verify the JWT from the header
           │
           ▼
    get_current_user()        ← Extract the user id from the payload

Any failure answers ``AUTH_FAILURE_STATUS_CODE`` (404 by default) with
"Incorrect Credentials".

Type Aliases:
=============
    CurrentUser - Authenticated user id (UUID)

Usage:
======
    from brainvault.api.dependencies.auth import CurrentUser

    @router.get("/content")
    async def list_content(current_user: CurrentUser):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from brainvault.config.settings import Settings
from brainvault.shared.core.exceptions import AuthenticationError
from brainvault.shared.core.logging import get_logger, log_context
from brainvault.shared.utils.security import SecurityUtils

logger = get_logger("auth")

# Raw token scheme: the whole header value is the token
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_settings_from_app(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_settings_from_app)]


def _auth_failure(settings: Settings, reason: str) -> AuthenticationError:
    logger.info("Authentication failed", reason=reason)
    return AuthenticationError(status_code=settings.AUTH_FAILURE_STATUS_CODE)


async def get_current_user_token(
    settings: AppSettings,
    token: Annotated[Optional[str], Depends(token_header)] = None,
) -> dict:
    """
    Read and verify the JWT from the Authorization header.

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    if not token:
        raise _auth_failure(settings, "missing token")

    try:
        return SecurityUtils.decode_access_token(
            token,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise _auth_failure(settings, str(e)) from e


async def get_current_user(
    settings: AppSettings,
    payload: Annotated[dict, Depends(get_current_user_token)],
) -> UUID:
    """
    Get the authenticated user's id from the token payload.

    Raises:
        AuthenticationError: If the payload carries no usable ``id``
    """
    raw_id = payload.get("id")
    if raw_id is None:
        raise _auth_failure(settings, "token payload has no id")

    try:
        user_id = UUID(str(raw_id))
    except ValueError as e:
        raise _auth_failure(settings, "token id is not a UUID") from e

    log_context(user_id=str(user_id))
    return user_id


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user id (most common dependency)
CurrentUser = Annotated[UUID, Depends(get_current_user)]
