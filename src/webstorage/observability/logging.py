"""Structured logging configuration.

This module sets up structured logging using structlog on top of the
standard library. Library modules log through ``logging.getLogger(__name__)``
so applications that never call setup_logging() keep full control.
"""

import logging
import sys
from typing import Any, Optional

import structlog

from webstorage.config import StorageConfig

_HANDLER_MARKER = "_webstorage_handler"


def add_library_name(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag every event emitted from a webstorage logger.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with a ``library`` field
    """
    name = event_dict.get("logger") or ""
    if name == "webstorage" or name.startswith("webstorage."):
        event_dict["library"] = "webstorage"
    return event_dict


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structured logging with structlog.

    Events from structlog loggers and records from plain ``logging`` loggers
    (which is what the library modules use) go through the same processors
    and renderer on a single stdout handler. Calling this again replaces the
    handler installed by the previous call.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output logs in JSON format; otherwise use console format

    Example:
        >>> setup_logging(log_level="DEBUG", json_logs=False)
        >>> logger = get_logger(__name__)
        >>> logger.info("storage_opened", namespace="app")
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_library_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta] + renderers,
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)

    root = logging.getLogger()
    remove_logging_handlers()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper()))


def remove_logging_handlers() -> None:
    """Detach handlers installed by setup_logging() from the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)


def setup_logging_from_config(config: Optional[StorageConfig] = None) -> None:
    """Configure logging from a StorageConfig.

    Args:
        config: Configuration to apply (defaults to StorageConfig())
    """
    config = config or StorageConfig()
    setup_logging(log_level=config.log_level, json_logs=config.json_logs)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
