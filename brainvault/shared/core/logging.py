"""
Logging Configuration

Structured logging for BrainVault using structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Content created    content_id=550e8400-... user_id=...

Other environments (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Content created", ...}

Usage:
======
    from brainvault.shared.core.logging import logger, get_logger, log_context

    logger.info("User signed up", user_id=user_id)

    pipeline_logger = get_logger("embedding_pipeline")
    pipeline_logger.error("Embedding failed", content_id=content_id)

    # Bind request-scoped values for every log line until cleared
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from brainvault.config.settings import settings


# Client libraries that log every HTTP call at INFO (embedding requests, Qdrant)
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3")


def setup_logging() -> None:
    """
    Route stdlib and structlog output through one pipeline.

    Development gets colored console lines; every other ``APP_ENV`` gets one
    JSON object per line. HTTP client libraries are held at WARNING so an
    embedding call does not produce its own access log. Runs on import.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, shows up as ``logger`` in every event

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key/value pairs into every subsequent log call of this context.

    The request logging middleware binds ``request_id``, ``method`` and
    ``path`` here; handlers may add ``user_id`` once authenticated.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all context variables bound with :func:`log_context`."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("brainvault")
