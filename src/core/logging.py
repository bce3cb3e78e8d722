"""Pydantic Logfire setup and the logging helpers used by the engine.

Engine modules log through ``logging.getLogger(__name__)``; once
``configure_logfire`` has run, those records are forwarded to Logfire. Service
functions wrap their work in ``span("<module>.<function>")``.
"""

import logging

import logfire
from fastapi import FastAPI

from src.core.config import settings


logger = logging.getLogger(__name__)


def configure_logfire() -> None:
    """Configure Logfire and route standard logging records through it.

    Nothing is sent unless LOGFIRE_TOKEN is set.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name="housefair",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire="if-token-present",
    )
    logging.basicConfig(handlers=[logfire.LogfireLoggingHandler()], level=logging.INFO)
    logger.info("Logfire configured", extra={"environment": settings.environment})


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``."""
    logfire.instrument_fastapi(app)


def span(name: str) -> logfire.LogfireSpan:
    """Open a Logfire span named after the engine function it wraps."""
    return logfire.span(name)


def log_with_household_context(
    logger: logging.Logger,
    level: str,
    message: str,
    household_id: str | None = None,
    **extra: object,
) -> None:
    """Log ``message`` at ``level`` with the household id and extra fields attached.

    Usage:
        log_with_household_context(logger, "info", "Weekly report built", household_id="h1", week_number=2)
    """
    context = {"household_id": household_id, **extra} if household_id else extra
    getattr(logger, level.lower())(message, extra=context)
