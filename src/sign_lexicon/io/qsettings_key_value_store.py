"""Key-value slots on top of the platform preference store (QSettings)."""

from typing import List, Optional

from PySide6.QtCore import QByteArray, QSettings

from sign_lexicon.core import StorageError
from sign_lexicon.io.key_value_store import KeyValueStore


class QSettingsKeyValueStore(KeyValueStore):
    """Stores each slot as a QByteArray value under its key.

    Uses the application's default QSettings scope unless a QSettings
    instance is injected (tests pass an INI-file backed one).
    """

    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self._settings = settings if settings is not None else QSettings()

    def get(self, key: str) -> Optional[bytes]:
        if not self._settings.contains(key):
            return None
        raw = self._settings.value(key)
        if isinstance(raw, QByteArray):
            return bytes(raw.data())
        if isinstance(raw, (bytes, bytearray)):
            return bytes(raw)
        if isinstance(raw, str):
            return raw.encode("utf-8")
        raise StorageError(f"Unexpected value type for slot '{key}': {type(raw).__name__}")

    def set(self, key: str, value: bytes) -> None:
        self._settings.setValue(key, QByteArray(bytes(value)))
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise StorageError(f"Failed to write slot '{key}': {self._settings.status()}")

    def delete(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.sync()

    def keys(self) -> List[str]:
        return list(self._settings.allKeys())
