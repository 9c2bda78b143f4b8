"""Structured logging for the checkout demo."""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from checkout.config import Config


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging.

    Records go to stderr so they never interleave with the menu transcript
    on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to Config.LOG_LEVEL.
        json_format: Whether to use JSON format for logs. Defaults to
            Config.LOG_FORMAT == "json".
        force: Replace handlers already on the root logger. Only callers
            that reconfigure logging (the CLI) pass this.
    """
    level = (level or Config.LOG_LEVEL).upper()
    if json_format is None:
        json_format = Config.use_json_logs()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
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
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level),
        stream=sys.stderr,
        force=force,
    )


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


# Initialize logging on import
setup_logging()
