"""Structured logging configuration for endurosim.

Log records go to stderr so the race report on stdout stays untouched.
"""

import logging
import sys
from typing import Any, List, TextIO

import structlog
from structlog.typing import Processor


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    enable_colors: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ('json' or 'console')
        enable_colors: Whether to enable colored output for console format
        stream: Destination for log lines, stderr by default
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=_get_processors(log_format, enable_colors),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.WriteLoggerFactory(file=stream or sys.stderr),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def _get_processors(log_format: str, enable_colors: bool) -> List[Processor]:
    """Get the appropriate processors for the given format."""
    processors: List[Processor] = [
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format.lower() == "json":
        processors.extend([
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=enable_colors))

    return processors


def get_logger(name: str, **context: Any) -> structlog.typing.FilteringBoundLogger:
    """Get a logger with optional bound context.

    Args:
        name: Logger name (usually __name__)
        **context: Additional context to bind to the logger
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
