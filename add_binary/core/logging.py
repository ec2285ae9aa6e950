"""Structured logging configuration."""

import logging
import sys
from typing import Optional

import structlog


def _configure_structlog(json_output: bool) -> None:
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,  # setup_logging may reconfigure later
    )


def setup_logging(level: str = "INFO", json_output: bool = False) -> structlog.stdlib.BoundLogger:
    """Set up stdlib logging and structlog for the CLI and the HTTP app."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    _configure_structlog(json_output)

    logger = structlog.get_logger("add_binary")
    logger.debug("Logging configured", level=level, json=json_output)
    return logger


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name."""
    return structlog.get_logger(name or "add_binary")


# Route through stdlib logging even when used as a library
_configure_structlog(json_output=False)
