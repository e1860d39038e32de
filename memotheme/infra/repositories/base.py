"""Key-value store interface used by the learning store."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Durable string values keyed by stable identifiers.

    Implementations raise StorageError when the backend fails; they never
    swallow errors or return stale data.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value for key, or None if it was never written."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is not an error."""

    def close(self) -> None:
        """Release backend resources."""
