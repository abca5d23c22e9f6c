"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live        → Health check endpoints (unversioned)
    {API_PREFIX}/signup, /signin  → Authentication
    {API_PREFIX}/content          → Content (create, list, delete)
    {API_PREFIX}/search           → Semantic search
    {API_PREFIX}/brain            → Share toggle and public vault view

Usage:
======
    from brainvault.api.routes import register_routes

    app = FastAPI()
    register_routes(app, api_prefix="/api/v1")
"""

from fastapi import FastAPI

from brainvault.shared.schemas.common import ErrorResponse
from brainvault.api.handlers import (
    auth_handler,
    content_handler,
    health_handler,
    search_handler,
    share_handler,
)


# Documented on every versioned route; all errors share the same envelope
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}


def register_routes(app: FastAPI, api_prefix: str = "/api/v1") -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
        api_prefix: Version prefix for every non-health route
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix=api_prefix,
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    # Content endpoints
    app.include_router(
        content_handler.router,
        prefix=f"{api_prefix}/content",
        tags=["Content"],
        responses=ERROR_RESPONSES,
    )

    # Search endpoint
    app.include_router(
        search_handler.router,
        prefix=f"{api_prefix}/search",
        tags=["Search"],
        responses=ERROR_RESPONSES,
    )

    # Share endpoints
    app.include_router(
        share_handler.router,
        prefix=f"{api_prefix}/brain",
        tags=["Share"],
        responses=ERROR_RESPONSES,
    )
