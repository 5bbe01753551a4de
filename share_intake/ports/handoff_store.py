"""Handoff store interface - Port definition for the shared key-value store."""

from abc import ABC, abstractmethod


class HandoffStorePort(ABC):
    """Abstract interface for reading the handoff store.

    The handoff store is written by the producer of share events and read
    here. Two access modes are offered, keyed by the expected value shape.
    Adapters never raise for a missing key; they return None.
    """

    @abstractmethod
    async def get_data(self, key: str) -> bytes | None:
        """Get an encoded blob by key.

        Args:
            key: The key to retrieve

        Returns:
            The stored bytes, or None if the key is absent or does not
            hold a blob
        """
        ...

    @abstractmethod
    async def get_strings(self, key: str) -> list[str] | None:
        """Get a sequence of strings by key.

        Args:
            key: The key to retrieve

        Returns:
            The stored strings in order, or None if the key is absent or
            does not hold a string sequence
        """
        ...
