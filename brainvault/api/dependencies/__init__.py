"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Settings: AppSettings
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user_id: UUID = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user_id: CurrentUser):

Usage:
======
    from brainvault.api.dependencies import DbSession, CurrentUser

    @router.get("/content")
    async def list_content(db: DbSession, user_id: CurrentUser):
        repo = ContentRepository(db)
        return await repo.list_by_owner(user_id)
"""

from brainvault.api.dependencies.database import (
    get_database,
    get_db,
    DbSession,
)
from brainvault.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    AppSettings,
    CurrentUser,
)

__all__ = [
    # Database
    "get_database",
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "AppSettings",
    "CurrentUser",
]
