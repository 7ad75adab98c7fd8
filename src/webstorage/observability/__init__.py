"""Observability helpers for the storage facade."""

from webstorage.observability.logging import (
    get_logger,
    remove_logging_handlers,
    setup_logging,
    setup_logging_from_config,
)

__all__ = ["setup_logging", "setup_logging_from_config", "remove_logging_handlers", "get_logger"]
