"""In-memory backing stores.

MemoryBackingStore is a drop-in substitute for browser storage in tests and
non-persistent use. Not durable across process restarts.

Entries are also reachable through attribute syntax:
    store = MemoryBackingStore({"someKey": "some value"})
    store.someKey            # "some value"
    store.otherKey = "x"     # same as store.set("otherKey", "x")
    "otherKey" in store      # True
    del store.otherKey       # same as store.remove("otherKey")

Declared members (methods, properties) always win over stored entries.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from webstorage.backends.base import BackingStore
from webstorage.errors import CapacityExceededError, ContractViolationError


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class MemoryBackingStore(BackingStore):
    """Backing store held in a plain insertion-ordered dict.

    Not designed for concurrent writes from threads; asyncio is
    single-threaded so this is safe for in-process use.
    """

    _INTERNAL_ATTRS = frozenset({"_items", "_key_cache"})

    def __init__(self, items: Optional[Mapping[str, str]] = None) -> None:
        # Internal state bypasses __setattr__, which routes unknown names to the store.
        object.__setattr__(self, "_items", {})
        # Positional index for key_at(), rebuilt lazily after keys are added or removed.
        object.__setattr__(self, "_key_cache", [])
        for key, value in (items or {}).items():
            self.set(key, value)

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Mapping[str, str]:
        """Read-only view of the stored entries in insertion order."""
        return MappingProxyType(self._items)

    def has(self, key: str) -> bool:
        return key in self._items

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        if key not in self._items:
            self._key_cache.clear()
        self._items[key] = value

    def remove(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._key_cache.clear()

    def key_at(self, index: int) -> Optional[str]:
        if index < 0:
            raise ContractViolationError(f"Index must be non-negative, got {index}")
        if len(self._key_cache) != len(self._items):
            self._key_cache[:] = self._items
        return self._key_cache[index] if index < len(self._key_cache) else None

    def clear(self) -> None:
        self._items.clear()
        self._key_cache.clear()

    # ------------------------------------------------------------------
    # Attribute-style access
    # ------------------------------------------------------------------

    def _is_member(self, name: str) -> bool:
        return name in self.__dict__ or hasattr(type(self), name)

    def __getattr__(self, name: str) -> Optional[str]:
        # Only reached when normal lookup fails, so declared members never get here.
        if _is_dunder(name) or name in self._INTERNAL_ATTRS:
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._INTERNAL_ATTRS:
            raise AttributeError(f"'{name}' is read-only")
        if self._is_member(name):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if not self._is_member(name):
            self.remove(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._is_member(name) or self.has(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={len(self._items)})"


class QuotaMemoryBackingStore(MemoryBackingStore):
    """Memory store that emulates a browser storage quota.

    The quota counts UTF-8 bytes of every key plus its value. Lone surrogates
    are counted as their 3-byte surrogatepass encoding. A write that would
    exceed the quota raises CapacityExceededError and leaves the store unchanged.
    """

    _INTERNAL_ATTRS = MemoryBackingStore._INTERNAL_ATTRS | {"_quota_bytes", "_used_bytes"}

    def __init__(self, quota_bytes: int, items: Optional[Mapping[str, str]] = None) -> None:
        if quota_bytes < 1:
            raise ContractViolationError(f"quota_bytes must be positive, got {quota_bytes}")
        object.__setattr__(self, "_quota_bytes", quota_bytes)
        object.__setattr__(self, "_used_bytes", 0)
        super().__init__(items)

    @property
    def quota_bytes(self) -> int:
        return self._quota_bytes

    @property
    def used_bytes(self) -> int:
        """Bytes currently counted against the quota."""
        return self._used_bytes

    def set(self, key: str, value: str) -> None:
        current = self._items.get(key)
        released = _entry_size(key, current) if current is not None else 0
        required = self._used_bytes - released + _entry_size(key, value)
        if required > self._quota_bytes:
            raise CapacityExceededError(
                f"Writing '{key}' needs {required} bytes, quota is {self._quota_bytes}"
            )
        super().set(key, value)
        object.__setattr__(self, "_used_bytes", required)

    def remove(self, key: str) -> None:
        current = self._items.get(key)
        super().remove(key)
        if current is not None:
            object.__setattr__(self, "_used_bytes", self._used_bytes - _entry_size(key, current))

    def clear(self) -> None:
        super().clear()
        object.__setattr__(self, "_used_bytes", 0)


def _entry_size(key: str, value: str) -> int:
    return len(key.encode("utf-8", "surrogatepass")) + len(value.encode("utf-8", "surrogatepass"))
