"""
User Repository

Credential store: database operations specific to the User model.

Common Operations:
==================
- get_by_username()   → Find user by login name
- username_exists()   → Check if a username is already registered
- get()               → Find user by id (inherited)
- create()            → Insert a user (inherited)

Usage Example:
==============
    repo = UserRepository(db)
    user = await repo.get_by_username("alice")
    if not user:
        raise UserNotFoundError("alice")
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.shared.repositories.base import BaseRepository
from brainvault.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username (exact, case-sensitive match).

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Used to validate uniqueness when signing up."""
        user = await self.get_by_username(username)
        return user is not None
