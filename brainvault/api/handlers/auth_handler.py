"""
Authentication Handler

Handles signup and signin endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service exceptions
(duplicate username, unknown user, wrong password) carry their own status
codes and are rendered by the global exception handlers.
"""

from fastapi import APIRouter, Depends

from brainvault.shared.schemas.common import MessageResponse
from brainvault.shared.schemas.user import SigninRequest, SignupRequest, TokenResponse
from brainvault.shared.services.auth_service import AuthService
from brainvault.api.dependencies import DbSession
from brainvault.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post("/signup", response_model=MessageResponse)
async def signup(
    user_data: SignupRequest,
    db: DbSession,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        400: Username or password fails the format rules
        403: Username already taken
    """
    await auth_service.signup(
        username=user_data.username,
        password=user_data.password,
    )
    await db.commit()
    return MessageResponse(message="User signed up")


@router.post("/signin", response_model=TokenResponse)
async def signin(
    credentials: SigninRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate a user and return a token.

    The token is sent back verbatim in the Authorization header.

    Raises:
        404: No such user
        403: Wrong password
    """
    token = await auth_service.signin(
        username=credentials.username,
        password=credentials.password,
    )
    return TokenResponse(token=token)
