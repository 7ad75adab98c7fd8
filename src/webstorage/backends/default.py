"""Process-wide default backing store.

Usage:
    backend = get_default_backend()
    storage = WebStorage(backend, "settings")
    reset_default_backend()  # drop it, e.g. between tests
"""

import logging
from typing import Optional

from webstorage.backends.base import BackingStore
from webstorage.backends.memory import MemoryBackingStore, QuotaMemoryBackingStore
from webstorage.config import StorageConfig, load_config_from_env

logger = logging.getLogger(__name__)

_default_backend: Optional[BackingStore] = None


def create_backend(config: StorageConfig) -> BackingStore:
    """Build a memory backend honouring the configured quota."""
    if config.quota_bytes is not None:
        return QuotaMemoryBackingStore(config.quota_bytes)
    return MemoryBackingStore()


def get_default_backend() -> BackingStore:
    """Return the process-wide backing store singleton.

    Created on first use from load_config_from_env().
    """
    global _default_backend
    if _default_backend is None:
        config = load_config_from_env()
        _default_backend = create_backend(config)
        logger.debug(
            "Created default backing store %s (quota_bytes=%s)",
            type(_default_backend).__name__,
            config.quota_bytes,
        )
    return _default_backend


def reset_default_backend() -> None:
    """Forget the process-wide backing store; the next call creates a new one."""
    global _default_backend
    _default_backend = None
