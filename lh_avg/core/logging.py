"""Structured logging for lh-avg.

Scoring code never logs; the CLI configures logging at startup and emits
structured events through structlog.

Example usage:
    from lh_avg.core.logging import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
    logger.debug("scores_computed", count=3)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Mirrors lh_avg.__version__ without importing the package root
LH_AVG_VERSION = "1.5.0"


def add_common_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the lh-avg version to every event."""
    event_dict.setdefault("lh_avg_version", LH_AVG_VERSION)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_common_fields,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: str | int = logging.WARNING,
    json_output: bool = False,
    stream: Any = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render events as JSON instead of console output
        stream: Output stream for log records. Defaults to stderr so that
                results written to stdout stay machine readable.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).
    """
    return structlog.get_logger(name)


def reset_logging() -> None:
    """Reset logging configuration to defaults.

    This is primarily useful for testing to ensure clean state between tests.
    """
    structlog.reset_defaults()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
