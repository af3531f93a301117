"""SQLite-backed key-value slots."""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from sign_lexicon.core import StorageError
from sign_lexicon.io.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class SqliteKeyValueStore(KeyValueStore):
    """Owns a SQLite connection holding one row per slot.

    Every write is committed immediately so the next read observes it.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        try:
            self.connection = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to open key-value database {self.db_path}: {e}") from e
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create the slot table if it does not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_slots (
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        self.connection.commit()

    def get(self, key: str) -> Optional[bytes]:
        try:
            cur = self.connection.cursor()
            cur.execute("SELECT value FROM kv_slots WHERE key = ?", (key,))
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read slot '{key}': {e}") from e
        return bytes(row["value"]) if row else None

    def set(self, key: str, value: bytes) -> None:
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                INSERT INTO kv_slots (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, sqlite3.Binary(bytes(value))),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write slot '{key}': {e}") from e
        logger.debug("Wrote %d bytes to slot %s", len(value), key)

    def delete(self, key: str) -> None:
        try:
            self.connection.execute("DELETE FROM kv_slots WHERE key = ?", (key,))
            self.connection.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete slot '{key}': {e}") from e

    def keys(self) -> List[str]:
        cur = self.connection.cursor()
        cur.execute("SELECT key FROM kv_slots ORDER BY key ASC")
        return [row["key"] for row in cur.fetchall()]

    def close(self) -> None:
        self.connection.close()
