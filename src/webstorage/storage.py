"""Namespaced, JSON-serializing facade over a backing store.

WebStorage partitions one backing store into logical views by namespace and
stores every value as JSON text. The explicit API is async so it composes
with suspension-aware code; the backing store itself is always called
synchronously.

Usage:
    storage = WebStorage(MemoryBackingStore(), "settings")
    await storage.set("theme", {"dark": True})
    await storage.get("theme")           # {"dark": True}

    storage.theme                        # same entry through attribute syntax
    storage["theme"] = {"dark": False}
    "theme" in storage                   # True
    del storage.theme

    for value, key in storage: ...
    async for value, key in storage: ...

Names of declared members (get, keys, namespace, ...) always resolve to the
member when used as attributes; such keys stay reachable through get()/set().
"""

import asyncio
import logging
from typing import Any, AsyncIterator, Iterator, Optional

from webstorage import serialization
from webstorage.backends.base import BackingStore
from webstorage.backends.default import get_default_backend
from webstorage.config import load_config_from_env
from webstorage.errors import BackendError, CapacityExceededError, ContractViolationError
from webstorage.namespace import encode_key, iter_logical_keys, normalize_namespace

logger = logging.getLogger(__name__)

_INTERNAL_ATTRS = frozenset({"_backend", "_namespace"})


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class WebStorage:
    """Namespaced key-value view over a BackingStore.

    Several instances may share one backing store. Each only sees and mutates
    keys inside its own namespace; the unpartitioned view (namespace None)
    never sees namespaced keys.

    Attributes:
        _backend: Backing store holding the raw JSON text
        _namespace: Namespace of this view, or None
    """

    def __init__(self, backend: BackingStore, namespace: Optional[str] = None) -> None:
        """Bind a backing store and an optional namespace.

        Args:
            backend: Store that holds the serialized entries
            namespace: Partition tag; None or "" means unpartitioned

        Raises:
            ContractViolationError: If backend is None
        """
        if backend is None:
            raise ContractViolationError("WebStorage requires a backing store")
        # Internal state bypasses __setattr__, which routes unknown names to the store.
        object.__setattr__(self, "_backend", backend)
        object.__setattr__(self, "_namespace", normalize_namespace(namespace))
        logger.debug(
            "Opened storage view namespace=%r over %s", self._namespace, type(backend).__name__
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def backend(self) -> BackingStore:
        return self._backend

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    def has_namespace(self) -> bool:
        """Determine if this view is partitioned by a namespace."""
        return self._namespace is not None

    @property
    def length(self) -> int:
        """Number of keys visible in this view (not the raw store size)."""
        return len(self._storage_keys())

    def __len__(self) -> int:
        return self.length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Read the value stored under key.

        Args:
            key: Logical key to look up
            default: Returned when the key is absent

        Returns:
            The decoded value, or default

        Raises:
            DeserializationError: If the stored text is not valid JSON
        """
        return self._read(key, default)

    async def key_at(self, index: int) -> Optional[str]:
        """Return the logical key at index. Order is store-defined; don't rely on it.

        Raises:
            ContractViolationError: If index is negative
        """
        if index < 0:
            raise ContractViolationError(f"Index must be non-negative, got {index}")
        keys = self._storage_keys()
        return keys[index] if index < len(keys) else None

    async def keys(self) -> list[str]:
        """Return every logical key visible in this view."""
        return self._storage_keys()

    async def has(self, key: str) -> bool:
        return self._contains(key)

    async def set(self, key: str, value: Any) -> bool:
        """Store value under key.

        Args:
            key: Logical key to write
            value: JSON-serialisable value

        Returns:
            True on success, False if the backing store ran out of capacity

        Raises:
            SerializationError: If value is not JSON-serialisable
        """
        text = serialization.dumps(value)
        try:
            self._backend.set(self._key(key), text)
        except CapacityExceededError as exc:
            logger.warning("Rejected write to '%s': %s", self._key(key), exc.message)
            return False
        return True

    async def delete(self, key: str) -> bool:
        """Remove key.

        Returns:
            True on success, False if the backing store failed
        """
        try:
            self._backend.remove(self._key(key))
        except BackendError as exc:
            logger.warning("Failed to delete '%s': %s", self._key(key), exc.message)
            return False
        return True

    async def clear(self) -> None:
        """Remove every key in this view. Keys of other views are untouched."""
        keys = self._storage_keys()
        for key in keys:
            self._backend.remove(self._key(key))
        logger.debug("Cleared %d keys from namespace=%r", len(keys), self._namespace)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Any, str]]:
        """Yield (value, key) pairs for the keys visible when iteration starts."""
        for key in self._storage_keys():
            yield self._read(key, None), key

    async def __aiter__(self) -> AsyncIterator[tuple[Any, str]]:
        """Async variant of __iter__; hands control to the event loop between items."""
        for key in self._storage_keys():
            await asyncio.sleep(0)
            yield self._read(key, None), key

    # ------------------------------------------------------------------
    # Attribute-style access
    # ------------------------------------------------------------------

    def _is_member(self, name: str) -> bool:
        return name in self.__dict__ or hasattr(type(self), name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so declared members never get here.
        if _is_dunder(name) or name in _INTERNAL_ATTRS:
            raise AttributeError(name)
        return self._read(name, None)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _INTERNAL_ATTRS:
            raise AttributeError(f"'{name}' is read-only")
        if self._is_member(name):
            object.__setattr__(self, name, value)
        else:
            self._write(name, value)

    def __delattr__(self, name: str) -> None:
        if not self._is_member(name):
            self._backend.remove(self._key(name))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._is_member(name) or self._contains(name)

    def __getitem__(self, name: str) -> Any:
        if self._is_member(name):
            return getattr(self, name)
        return self._read(name, None)

    def __setitem__(self, name: str, value: Any) -> None:
        self.__setattr__(name, value)

    def __delitem__(self, name: str) -> None:
        self.__delattr__(name)

    def __dir__(self) -> list[str]:
        return self._storage_keys()

    def __repr__(self) -> str:
        return f"WebStorage(namespace={self._namespace!r}, length={self.length})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _key(self, key: str) -> str:
        return encode_key(self._namespace, key)

    def _storage_keys(self) -> list[str]:
        return list(iter_logical_keys(self._backend, self._namespace))

    def _contains(self, key: str) -> bool:
        return self._backend.get(self._key(key)) is not None

    def _read(self, key: str, default: Any) -> Any:
        text = self._backend.get(self._key(key))
        if text is None:
            return default
        return serialization.loads(text, key=key)

    def _write(self, key: str, value: Any) -> None:
        self._backend.set(self._key(key), serialization.dumps(value))


def open_storage(
    namespace: Optional[str] = None, backend: Optional[BackingStore] = None
) -> WebStorage:
    """Open a storage view, defaulting to the process-wide backing store.

    Args:
        namespace: Namespace of the view; falls back to WEBSTORAGE_DEFAULT_NAMESPACE
        backend: Backing store to wrap; falls back to get_default_backend()

    Returns:
        A WebStorage bound to the chosen backend and namespace
    """
    if namespace is None:
        namespace = load_config_from_env().default_namespace
    if backend is None:
        backend = get_default_backend()
    return WebStorage(backend, namespace)
