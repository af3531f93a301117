"""Key-value port - the only persistence seam the stores depend on."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class KeyValueStore(ABC):
    """
    Abstract interface for named byte slots.

    Implementations (InMemoryKeyValueStore, SqliteKeyValueStore,
    QSettingsKeyValueStore) handle storage details. Stores and services
    depend on this abstraction, never on a concrete backing.

    A write must be visible to the next read of the same key.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """
        Read a slot.

        Returns:
            The stored bytes, or None if the slot was never written.

        Raises:
            StorageError: If the backend fails.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """
        Overwrite a slot.

        Raises:
            StorageError: If the backend fails.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a slot; no-op if absent."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List all written slot names. Useful for diagnostics and testing."""
        pass

    def close(self) -> None:
        """Release backend resources. Backings without any keep this no-op."""


class InMemoryKeyValueStore(KeyValueStore):
    """
    Simple in-memory implementation.

    Used for testing and ephemeral sessions. No persistence.
    """

    def __init__(self):
        self._slots: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._slots[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._slots.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._slots.keys())
