"""
Database Dependency

FastAPI dependency for database sessions.

This module provides the get_db dependency that yields async database sessions
to route handlers. Sessions come from the ``Database`` handle the application
factory stored on ``app.state.database``.

The exit half of a yield dependency runs after the response has been sent,
so handlers that write call ``await db.commit()`` before returning. The
commit in ``Database.get_session`` then only closes out an already clean
session, and the rollback still covers handlers that raise.

Usage:
======
    from brainvault.api.dependencies.database import DbSession

    @router.get("/content")
    async def list_content(db: DbSession):
        repo = ContentRepository(db)
        return await repo.list_by_owner(user_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.shared.db.session import Database


def get_database(request: Request) -> Database:
    """The process-wide database handle."""
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields an async database session for the duration of the request.
    Writes must be committed by the handler; see the module docstring.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in database.get_session():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
