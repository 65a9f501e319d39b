"""Abstract key/value store: the browser local-storage port."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Flat string-keyed namespace holding JSON text values."""

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the stored text for ``key``, or None when absent."""
        ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""
        ...
