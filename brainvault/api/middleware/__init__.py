"""
Request-level plumbing installed by ``create_application``.

- error_handler: maps VaultException, validation errors and crashes to the
  JSON error envelope
- request_logging: request id, structlog context, one access line per request
"""

from brainvault.api.middleware.error_handler import setup_exception_handlers
from brainvault.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestLoggingMiddleware",
]
