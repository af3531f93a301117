"""Environment Config - storage location, backend and log level from .env."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

STORAGE_BACKENDS = ("sqlite", "qsettings", "memory")


class EnvironmentConfig:
    """
    Reads runtime configuration from environment variables.

    Variables are loaded from a .env file in the project root first, so a
    developer checkout can override the defaults without touching the shell.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_data_dir(self) -> Path:
        """Directory holding the local database; created if missing."""
        raw = self._get("SIGN_LEXICON_DATA_DIR")
        data_dir = Path(raw).expanduser() if raw else Path.home() / ".sign_lexicon"
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_path(self) -> Path:
        return self.get_data_dir() / "sign_lexicon.db"

    def get_log_level(self) -> str:
        """Logging level name; unknown names fall back to INFO."""
        level = (self._get("SIGN_LEXICON_LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level

    def get_storage_backend(self) -> str:
        backend = (self._get("SIGN_LEXICON_STORAGE") or "sqlite").lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend '{backend}', expected one of {', '.join(STORAGE_BACKENDS)}"
            )
        return backend

    def get_export_filename(self) -> str:
        return self._get("SIGN_LEXICON_EXPORT_FILENAME") or "Merken.json"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
