"""structlog setup shared by the facade, the endpoints and the CLI."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", json_format: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Render JSON lines instead of the colored console output
    """

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("stripe_facade")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger under the `stripe_facade` namespace."""

    if not name.startswith("stripe_facade"):
        name = f"stripe_facade.{name}"
    return structlog.get_logger(name)


def configure_logging_once(level: str = "WARNING", json_format: bool = False) -> None:
    """Configure logging unless the host application already did."""

    if not structlog.is_configured():
        configure_logging(level, json_format)
