"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "INVALID_SHARE_LINK",
            "message": "Incorrect hash",
            "details": {}
        }
    }

Exception Handling:
===================
1. VaultException subclasses → Use their status_code and to_dict()
2. Request validation (FastAPI/Pydantic) → 400 with a structured error list
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from brainvault.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from brainvault.shared.core.exceptions import VaultException
from brainvault.shared.core.logging import logger
from brainvault.shared.schemas.common import format_validation_errors


def _validation_response(errors) -> JSONResponse:
    formatted = [error.model_dump() for error in format_validation_errors(errors)]
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": formatted},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(VaultException)
    async def vault_exception_handler(
        request: Request,
        exc: VaultException,
    ) -> JSONResponse:
        """
        Handle BrainVault-specific exceptions.

        All custom exceptions inherit from VaultException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        FastAPI raises these when the body, query or path doesn't match the
        declared schema. The default would be 422; this API answers 400.
        """
        logger.warning(
            "Validation error",
            errors=len(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers.
        """
        logger.warning(
            "Validation error",
            errors=exc.error_count(),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
