"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- The embedding client and vector index are process-wide, read from app.state

Usage:
======
    from brainvault.api.dependencies.services import get_auth_service

    @router.post("/signup")
    async def signup(
        data: SignupRequest,
        auth_service: AuthService = Depends(get_auth_service)
    ):
        await auth_service.signup(data.username, data.password)
"""

from fastapi import Depends, Request

from brainvault.api.dependencies.auth import AppSettings
from brainvault.api.dependencies.database import DbSession, get_database
from brainvault.shared.db.session import Database
from brainvault.shared.services.auth_service import AuthService
from brainvault.shared.services.content_service import ContentService
from brainvault.shared.services.embedding_service import EmbeddingService
from brainvault.shared.services.search_service import SearchService
from brainvault.shared.services.share_service import ShareService
from brainvault.worker.pipelines.embedding_pipeline import EmbeddingPipeline


def get_embedding_service(request: Request) -> EmbeddingService:
    """
    EmbeddingService over the application's shared clients.
    """
    return EmbeddingService(
        embedding_client=request.app.state.embedding_client,
        vector_db=request.app.state.vector_db,
    )


async def get_auth_service(db: DbSession, settings: AppSettings) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db, settings)


async def get_content_service(
    db: DbSession,
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> ContentService:
    """
    Dependency to get ContentService instance.
    """
    return ContentService(db, embedding_service)


async def get_search_service(
    db: DbSession,
    settings: AppSettings,
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> SearchService:
    """
    Dependency to get SearchService instance.
    """
    return SearchService(db, embedding_service, settings)


async def get_share_service(db: DbSession, settings: AppSettings) -> ShareService:
    """
    Dependency to get ShareService instance.
    """
    return ShareService(db, settings)


def get_embedding_pipeline(
    database: Database = Depends(get_database),
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> EmbeddingPipeline:
    """
    Pipeline run as a background task after content is saved.

    Bound to the Database handle, not the request session, since it runs
    after the request session is closed.
    """
    return EmbeddingPipeline(database, embedding_service)
