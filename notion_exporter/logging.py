"""Logging utilities for the Notion exporter.

The package only emits events through ``structlog.get_logger``; how they are
rendered is up to the application. Scripts without a logging setup of their
own can call :func:`setup_logging` once to get JSON lines.
"""

from __future__ import annotations

import structlog

LOGGER_NAME = "notion_exporter"


def setup_logging() -> None:
    """Configure structlog to render JSON with level and ISO timestamp.

    This replaces any existing structlog configuration, so it is never called
    on import.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a lazy logger bound to whatever configuration is active."""
    return structlog.get_logger(name)


__all__ = ["LOGGER_NAME", "get_logger", "setup_logging"]
