"""
Authentication Service

Business logic for signup and signin.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)

Usage:
======
    from brainvault.shared.services.auth_service import AuthService

    service = AuthService(db)
    await service.signup("alice", "Abcdef1!")
    token = await service.signin("alice", "Abcdef1!")
"""

from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.config.settings import Settings, settings as default_settings
from brainvault.shared.core.exceptions import (
    DuplicateResourceError,
    IncorrectPasswordError,
    UserNotFoundError,
)
from brainvault.shared.core.logging import get_logger
from brainvault.shared.models.user import User
from brainvault.shared.repositories.user_repository import UserRepository
from brainvault.shared.utils.security import SecurityUtils

logger = get_logger("auth_service")


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with username/password
    - User authentication (signin) and token issuing

    Attributes:
        session: Database session
        repo: UserRepository instance
        settings: Token signing configuration
    """

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None) -> None:
        self.session = session
        self.repo = UserRepository(session)
        self.settings = settings or default_settings

    async def signup(self, username: str, password: str) -> User:
        """
        Register a new user.

        Args:
            username: Already validated username
            password: Plain text password (will be hashed)

        Returns:
            The created user

        Raises:
            DuplicateResourceError: If the username is taken
        """
        if await self.repo.username_exists(username):
            raise DuplicateResourceError("User already exists")

        password_hash = SecurityUtils.hash_password(
            password, rounds=self.settings.PASSWORD_HASH_ROUNDS
        )

        try:
            user = await self.repo.create(
                username=username,
                password_hash=password_hash,
            )
        except IntegrityError as e:
            # Concurrent signup won the unique constraint race
            raise DuplicateResourceError("User already exists") from e

        logger.info("User signed up", user_id=str(user.id))
        return user

    async def signin(self, username: str, password: str) -> str:
        """
        Authenticate a user and issue a token.

        Returns:
            Signed access token carrying the user id

        Raises:
            UserNotFoundError: No user with this username
            IncorrectPasswordError: Password does not match
        """
        user = await self.repo.get_by_username(username)
        if not user:
            raise UserNotFoundError(username)

        if not SecurityUtils.verify_password(password, user.password_hash):
            raise IncorrectPasswordError()

        return self.issue_token(user)

    def issue_token(self, user: User) -> str:
        """Sign ``{"id": user.id}``; expiry only if configured."""
        expires_delta: Optional[timedelta] = None
        if self.settings.ACCESS_TOKEN_EXPIRE_MINUTES:
            expires_delta = timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        return SecurityUtils.create_access_token(
            data={"id": str(user.id)},
            secret_key=self.settings.SECRET_KEY,
            expires_delta=expires_delta,
            algorithm=self.settings.JWT_ALGORITHM,
        )
