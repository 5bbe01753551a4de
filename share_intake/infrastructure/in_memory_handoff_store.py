"""In-memory implementation of the HandoffStorePort.

Used for development, the CLI and tests. Values keep the shape they
were stored with, so a blob never reads back as a string sequence and
vice versa.
"""

import json
from collections.abc import Mapping
from typing import Any

from ..ports.handoff_store import HandoffStorePort


class InMemoryHandoffStore(HandoffStorePort):
    """Dict-backed handoff store."""

    def __init__(self) -> None:
        """Initialize the in-memory storage."""
        self._storage: dict[str, bytes | list[str]] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "InMemoryHandoffStore":
        """Seed a store from a JSON-like mapping.

        Lists of strings are stored as string sequences, bytes as blobs,
        and any other value is JSON-encoded into a blob.
        """
        store = cls()
        for key, value in mapping.items():
            if isinstance(value, bytes):
                store.put_data(key, value)
            elif isinstance(value, list) and all(isinstance(s, str) for s in value):
                store.put_strings(key, value)
            else:
                store.put_data(key, json.dumps(value).encode())
        return store

    def put_data(self, key: str, value: bytes) -> None:
        """Store a blob under a key."""
        self._storage[key] = bytes(value)

    def put_strings(self, key: str, value: list[str]) -> None:
        """Store a string sequence under a key."""
        self._storage[key] = list(value)

    def remove(self, key: str) -> None:
        """Remove a key if present."""
        self._storage.pop(key, None)

    async def get_data(self, key: str) -> bytes | None:
        """Get a blob by key."""
        value = self._storage.get(key)
        return value if isinstance(value, bytes) else None

    async def get_strings(self, key: str) -> list[str] | None:
        """Get a string sequence by key."""
        value = self._storage.get(key)
        return list(value) if isinstance(value, list) else None

    def clear(self) -> None:
        """Clear all stored values (useful for testing)."""
        self._storage.clear()

    def keys(self) -> list[str]:
        """List stored keys (useful for testing)."""
        return list(self._storage)
