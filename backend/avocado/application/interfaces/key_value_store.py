"""Abstract key-value store interface (port): the persistence primitive.

Mirrors browser ``localStorage``: string keys map to string values, and
every higher-level collection is one JSON-encoded value.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for raw key-value persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is a no-op."""
        ...
