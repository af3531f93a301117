"""Favorites Transfer Coordinator - export/import on behalf of the settings screen."""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from sign_lexicon.core import DecodeError, ResourceError
from sign_lexicon.services import FavoritesStore

logger = logging.getLogger(__name__)


class FavoritesTransferCoordinator(QObject):
    """Turns favorites import/export into notices for the presentation layer.

    Responsibilities:
    - Write the export file and hand its path to the share affordance
    - Merge a picked file into the favorites store
    - Report failures as non-blocking notices instead of raising
    """

    notice_requested = Signal(str, str)  # title, message
    export_ready = Signal(Path)

    def __init__(self, favorites_store: FavoritesStore, export_filename: str = "Merken.json"):
        super().__init__()

        if favorites_store is None:
            raise ValueError("FavoritesStore must not be None")
        if not export_filename:
            raise ValueError("Export filename must not be empty")

        self.favorites_store = favorites_store
        self.export_filename = export_filename

    def export_favorites(self, directory: Optional[Path] = None) -> Optional[Path]:
        """Write the export artifact.

        Returns:
            Path of the written file, or None if writing failed.
        """
        try:
            path = self.favorites_store.export_to_file(directory, self.export_filename)
        except ResourceError as e:
            logger.warning("Favorites export failed: %s", e)
            self.notice_requested.emit("Export fehlgeschlagen", str(e))
            return None

        self.export_ready.emit(path)
        return path

    @Slot(Path)
    def import_favorites(self, path: Path) -> int:
        """Merge the favorites file at path.

        Returns:
            Number of newly added favorites; 0 when the import failed.
        """
        try:
            added = self.favorites_store.import_from_file(Path(path))
        except (DecodeError, ResourceError) as e:
            logger.warning("Favorites import from %s failed: %s", path, e)
            self.notice_requested.emit("Import fehlgeschlagen", str(e))
            return 0

        self.notice_requested.emit(
            "Import abgeschlossen", f"{added} neue Wörter zur Merkliste hinzugefügt."
        )
        return added
