"""Abstract backing store interface consumed by the storage facade."""

from abc import ABC, abstractmethod
from typing import Optional


class BackingStore(ABC):
    """Ordered, mutable mapping of string keys to string values.

    Mirrors the browser Storage capability: entries are enumerated by
    position and the order is implementation-defined.
    """

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of entries currently stored."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if missing."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Insert or overwrite key.

        Raises:
            CapacityExceededError: If the write does not fit in the store
        """

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing a missing key is a no-op."""

    @abstractmethod
    def key_at(self, index: int) -> Optional[str]:
        """Return the key at position index, or None if out of range."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every entry."""
