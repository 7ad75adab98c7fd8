"""Storage configuration models and utilities.

This module provides configuration for the process-wide default backing
store and for logging setup.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StorageConfig(BaseModel):
    """Global storage configuration.

    Attributes:
        default_namespace: Namespace used by open_storage() when none is given
        quota_bytes: Byte quota for the default backend (None = unlimited)
        log_level: Logging level passed to setup_logging()
        json_logs: Whether to render logs as JSON

    Example:
        >>> config = StorageConfig(default_namespace="app", quota_bytes=5 * 1024 * 1024)
        >>> config.quota_bytes
        5242880
    """

    default_namespace: Optional[str] = Field(
        default=None, description="Namespace for open_storage() (None=unpartitioned)"
    )
    quota_bytes: Optional[int] = Field(
        default=None, ge=1, description="Default backend quota in bytes (None=unlimited)"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    @field_validator("default_namespace")
    @classmethod
    def normalize_namespace(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty namespace as no namespace."""
        return value or None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate and upper-case the log level.

        Args:
            value: Level name to validate

        Returns:
            The upper-cased level name

        Raises:
            ValueError: If the level is not a standard logging level
        """
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{value}'")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for the stdlib logging module."""
        return getattr(logging, self.log_level)

    class Config:
        """Pydantic config."""

        frozen = True  # Immutable after creation


def get_default_config() -> StorageConfig:
    """Get default storage configuration.

    Returns:
        StorageConfig with an unlimited, unpartitioned default backend
    """
    return StorageConfig()


def load_config_from_env() -> StorageConfig:
    """Load storage configuration from environment variables.

    Automatically loads variables from .env file if present.

    Reads:
    - WEBSTORAGE_DEFAULT_NAMESPACE: Namespace used by open_storage()
    - WEBSTORAGE_QUOTA_BYTES: Quota for the default backend in bytes
    - WEBSTORAGE_LOG_LEVEL: Logging level
    - WEBSTORAGE_JSON_LOGS: Render logs as JSON (true/false)

    Returns:
        StorageConfig loaded from environment

    Example:
        >>> import os
        >>> os.environ["WEBSTORAGE_QUOTA_BYTES"] = "1024"
        >>> load_config_from_env().quota_bytes
        1024
    """
    load_dotenv()

    quota_str = os.getenv("WEBSTORAGE_QUOTA_BYTES", "").strip()
    quota_bytes = int(quota_str) if quota_str else None

    json_logs_str = os.getenv("WEBSTORAGE_JSON_LOGS", "true").lower()
    json_logs = json_logs_str in ("true", "1", "yes")

    return StorageConfig(
        default_namespace=os.getenv("WEBSTORAGE_DEFAULT_NAMESPACE") or None,
        quota_bytes=quota_bytes,
        log_level=os.getenv("WEBSTORAGE_LOG_LEVEL", "INFO"),
        json_logs=json_logs,
    )
