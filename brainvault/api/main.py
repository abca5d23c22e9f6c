"""
BrainVault API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           BRAINVAULT API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Request Logging (request_id, method, path)           │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌────────┐ ┌────────┐ ┌─────────┐ ┌────────┐ ┌────────┐   │          │
│   │  │ Health │ │  Auth  │ │ Content │ │ Search │ │ Share  │   │          │
│   │  └────────┘ └────────┘ └─────────┘ └────────┘ └────────┘   │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Process-wide state (app.state)                  │          │
│   │  ┌──────────┐ ┌──────────────┐ ┌───────────────────┐        │          │
│   │  │ Database │ │ Vector index │ │ Embedding client  │        │          │
│   │  └──────────┘ └──────────────┘ └───────────────────┘        │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database readiness checked (a failure is logged, not fatal)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Embedding client, vector index and database closed

Usage:
======
    # Run with uvicorn
    uvicorn brainvault.api.main:app --host 0.0.0.0 --port 5000 --reload
    python -m brainvault.api.main   # HOST / PORT from settings

    # Or programmatically, with injected collaborators
    from brainvault.api.main import create_application
    app = create_application(database=Database("sqlite+aiosqlite:///./dev.db"))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brainvault.config.settings import Settings, settings as default_settings
from brainvault.shared.adapters.embedding_client import EmbeddingClient
from brainvault.shared.adapters.vector_db import VectorDBAdapter
from brainvault.shared.core.logging import logger
from brainvault.shared.db.session import Database
from brainvault.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from brainvault.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Check database readiness

    Shutdown:
    - Close the embedding client and the vector index client
    - Dispose of the database connection pool
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    settings: Settings = app.state.settings
    logger.info(
        "Starting BrainVault API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await app.state.database.connect()

    logger.info("BrainVault API started")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down BrainVault API")

    await app.state.embedding_client.close()
    await app.state.vector_db.close()
    await app.state.database.close()

    logger.info("BrainVault API shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    vector_db: Optional[VectorDBAdapter] = None,
    embedding_client: Optional[EmbeddingClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (defaults to the environment)
        database: Database handle (defaults to one built from settings)
        vector_db: Vector index adapter (defaults to one built from settings)
        embedding_client: Embedding provider client (defaults to settings)

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Stores the process-wide collaborators on app.state
    3. Adds middleware (CORS, request logging)
    4. Sets up exception handlers
    5. Registers all routes
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        description="Personal knowledge vault with semantic search",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        # Use lifespan for startup/shutdown
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.vector_db = vector_db or VectorDBAdapter(
        url=settings.QDRANT_URL,
        api_key=settings.QDRANT_API_KEY,
        collection_name=settings.QDRANT_COLLECTION,
        vector_size=settings.EMBEDDING_DIMENSIONS,
    )
    app.state.embedding_client = embedding_client or EmbeddingClient(
        api_key=settings.EMBEDDING_API_KEY,
        base_url=settings.EMBEDDING_BASE_URL,
        model=settings.EMBEDDING_MODEL,
        timeout=settings.EMBEDDING_TIMEOUT_SECONDS,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # CORS Middleware - added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app, api_prefix=settings.API_PREFIX)

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "brainvault.api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.is_development,
    )
