"""
Cross-cutting pieces every layer imports.

- logging: structlog setup, ``get_logger``, request-scoped ``log_context``
- exceptions: ``VaultException`` tree; each error knows its HTTP status and
  renders the ``{"error": {code, message, details}}`` envelope

    from brainvault.shared.core import get_logger, InvalidShareLinkError

    raise InvalidShareLinkError()   # 411, "Incorrect hash"
"""

from brainvault.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from brainvault.shared.core.exceptions import (
    VaultException,
    AuthenticationError,
    AuthorizationError,
    IncorrectPasswordError,
    NotFoundError,
    UserNotFoundError,
    InvalidShareLinkError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    ProviderError,
    InternalError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "VaultException",
    "AuthenticationError",
    "AuthorizationError",
    "IncorrectPasswordError",
    "NotFoundError",
    "UserNotFoundError",
    "InvalidShareLinkError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ProviderError",
    "InternalError",
]
