"""I/O layer - Data access for persistence and file operations."""

from .key_value_store import InMemoryKeyValueStore, KeyValueStore
from .sqlite_key_value_store import SqliteKeyValueStore
from .qsettings_key_value_store import QSettingsKeyValueStore
from . import favorites_codec
from .catalog_loader import CatalogLoader

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqliteKeyValueStore",
    "QSettingsKeyValueStore",
    "favorites_codec",
    "CatalogLoader",
]
