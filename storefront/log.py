"""structlog configuration for storefront processes."""

from __future__ import annotations

import structlog

from .config import Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog with ISO timestamps and JSON or console rendering."""
    settings = settings or Settings()

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            settings.log_level_number
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
