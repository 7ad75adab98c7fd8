"""Namespaced, JSON-serializing key-value storage facade.

Wraps a string-keyed, string-valued backing store (browser-style storage or
an in-memory substitute) with namespace partitioning, JSON values,
attribute-style access, and sync/async iteration.
"""

from webstorage.backends import (
    BackingStore,
    MemoryBackingStore,
    QuotaMemoryBackingStore,
    get_default_backend,
    reset_default_backend,
)
from webstorage.config import StorageConfig, get_default_config, load_config_from_env
from webstorage.errors import (
    BackendError,
    CapacityExceededError,
    ContractViolationError,
    DeserializationError,
    SerializationError,
    StorageError,
)
from webstorage.storage import WebStorage, open_storage

__version__ = "0.1.0"

__all__ = [
    "BackingStore",
    "MemoryBackingStore",
    "QuotaMemoryBackingStore",
    "get_default_backend",
    "reset_default_backend",
    "StorageConfig",
    "get_default_config",
    "load_config_from_env",
    "StorageError",
    "CapacityExceededError",
    "BackendError",
    "SerializationError",
    "DeserializationError",
    "ContractViolationError",
    "WebStorage",
    "open_storage",
]
