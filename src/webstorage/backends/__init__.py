"""Backing stores for the storage facade."""

from webstorage.backends.base import BackingStore
from webstorage.backends.default import get_default_backend, reset_default_backend
from webstorage.backends.memory import MemoryBackingStore, QuotaMemoryBackingStore

__all__ = [
    "BackingStore",
    "MemoryBackingStore",
    "QuotaMemoryBackingStore",
    "get_default_backend",
    "reset_default_backend",
]
