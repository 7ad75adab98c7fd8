"""Pytest configuration and shared fixtures for the test suite."""

import json
from typing import Iterator

import pytest

from webstorage.backends.default import reset_default_backend
from webstorage.backends.memory import MemoryBackingStore
from webstorage.storage import WebStorage

_ENV_VARS = (
    "WEBSTORAGE_DEFAULT_NAMESPACE",
    "WEBSTORAGE_QUOTA_BYTES",
    "WEBSTORAGE_LOG_LEVEL",
    "WEBSTORAGE_JSON_LOGS",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop WEBSTORAGE_* variables and the default backend around every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_default_backend()
    yield
    reset_default_backend()


@pytest.fixture
def backend() -> MemoryBackingStore:
    """Backing store seeded with plain and namespaced entries.

    Returns:
        MemoryBackingStore holding two unpartitioned and two "namespace" keys
    """
    return MemoryBackingStore(
        {
            "simpleKey": json.dumps("value"),
            "namespace/nsSimpleKey": json.dumps("namespace value"),
            "objectKey": json.dumps({"key": "value"}),
            "namespace/nsObjectKey": json.dumps({"namespaceKey": "namespace value"}),
        }
    )


@pytest.fixture
def storage(backend: MemoryBackingStore) -> WebStorage:
    """Unpartitioned view over the shared backend."""
    return WebStorage(backend)


@pytest.fixture
def ns_storage(backend: MemoryBackingStore) -> WebStorage:
    """View over the "namespace" partition of the shared backend."""
    return WebStorage(backend, "namespace")
