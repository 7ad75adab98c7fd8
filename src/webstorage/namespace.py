"""Namespace encoding for physical storage keys.

A namespaced logical key is stored as ``"<namespace>/<key>"``. The
unpartitioned (None) view hides every key that looks namespaced, i.e. any key
with a slash that has non-empty text on both sides, whether or not a facade
ever used that prefix.
"""

import re
from typing import Iterator, Optional

from webstorage.backends.base import BackingStore
from webstorage.errors import ContractViolationError

SEPARATOR = "/"

_NAMESPACED_KEY = re.compile(r".+/.+", re.DOTALL)


def normalize_namespace(namespace: Optional[str]) -> Optional[str]:
    """Return None for a missing or empty namespace."""
    return namespace or None


def encode_key(namespace: Optional[str], key: str) -> str:
    """Map a logical key to the physical key stored in the backing store."""
    if namespace is None:
        return key
    return f"{namespace}{SEPARATOR}{key}"


def belongs_to(physical_key: str, namespace: Optional[str]) -> bool:
    """Determine whether a physical key is visible in a namespace view.

    Args:
        physical_key: Key as stored in the backing store
        namespace: View to test against (None = unpartitioned view)

    Returns:
        True if the key is part of the view
    """
    if namespace is None:
        return _NAMESPACED_KEY.search(physical_key) is None
    return physical_key.startswith(f"{namespace}{SEPARATOR}")


def decode_key(physical_key: str, namespace: Optional[str]) -> str:
    """Map a physical key back to the logical key seen by a view.

    Raises:
        ContractViolationError: If the key does not belong to the view
    """
    if not belongs_to(physical_key, namespace):
        raise ContractViolationError(
            f"Key '{physical_key}' does not belong to namespace {namespace!r}"
        )
    if namespace is None:
        return physical_key
    return physical_key[len(namespace) + len(SEPARATOR) :]


def iter_logical_keys(store: BackingStore, namespace: Optional[str]) -> Iterator[str]:
    """Yield the logical keys visible in a view, in store enumeration order.

    Keys are read lazily by position, so callers that mutate the store while
    consuming this iterator should materialize it first.
    """
    for index in range(store.length):
        physical_key = store.key_at(index)
        if physical_key is not None and belongs_to(physical_key, namespace):
            yield decode_key(physical_key, namespace)
