"""Favorites Store - persisted, observable set of bookmarked entries."""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set, Union

from PySide6.QtCore import QObject, Signal

from sign_lexicon.core import DecodeError, ResourceError, StorageError, VocabularyEntry
from sign_lexicon.io import KeyValueStore, favorites_codec

logger = logging.getLogger(__name__)


class FavoritesStore(QObject):
    """Maintains the user's bookmarked entries.

    Loaded exactly once at construction from a single key-value slot and
    written back in full after every mutation (write-through, no batching).
    Membership follows the entry identity rule (term and category), so
    favorites survive restarts and catalog reloads.

    Storage failures never escape: a corrupt or unreadable slot yields an
    empty store, and a failed write is logged while the in-memory set stays
    authoritative. Import and export failures are raised to the caller.

    Entries read from storage or an import file pass through resolve, so
    they carry the catalog's current explanation and video rather than
    whatever was saved with them.
    """

    FAVORITES_KEY = "favoriteVokabeln"
    DEFAULT_EXPORT_FILENAME = "Merken.json"

    favorites_changed = Signal()

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = FAVORITES_KEY,
        resolve: Optional[Callable[[VocabularyEntry], VocabularyEntry]] = None,
    ) -> None:
        super().__init__()
        if storage is None:
            raise ValueError("KeyValueStore must not be None")
        self._storage = storage
        self._key = key
        self._resolve = resolve or (lambda entry: entry)
        self._favorites: Set[VocabularyEntry] = set()
        self._load()

    def __len__(self) -> int:
        return len(self._favorites)

    def __contains__(self, entry: object) -> bool:
        return entry in self._favorites

    def is_favorite(self, entry: VocabularyEntry) -> bool:
        return entry in self._favorites

    def sorted_favorites(self) -> List[VocabularyEntry]:
        """The display ordering: lexicographic by term."""
        return sorted(self._favorites, key=lambda e: e.sort_key)

    def add(self, entry: VocabularyEntry) -> None:
        """Bookmark an entry; no-op if it is already a favorite."""
        if entry in self._favorites:
            return
        self._favorites.add(entry)
        self._commit()

    def remove(self, entry: VocabularyEntry) -> None:
        """Drop an entry; no-op if it is not a favorite."""
        if entry not in self._favorites:
            return
        self._favorites.discard(entry)
        self._commit()

    def toggle(self, entry: VocabularyEntry) -> bool:
        """Flip membership and return the new state."""
        if entry in self._favorites:
            self.remove(entry)
            return False
        self.add(entry)
        return True

    def remove_at(self, positions: Iterable[int], ordered_view: Sequence[VocabularyEntry]) -> None:
        """Remove the entries shown at the given positions.

        Args:
            positions: Indices into ordered_view (e.g. rows swiped away).
            ordered_view: The exact list that was displayed, normally the
                result of sorted_favorites() at render time. Indices are
                resolved against it, never against a recomputed ordering.

        Raises:
            IndexError: If any position is outside ordered_view. Nothing is
                removed in that case.
        """
        indices = set(positions)
        for index in indices:
            if not 0 <= index < len(ordered_view):
                raise IndexError(
                    f"Position {index} out of range for view of {len(ordered_view)} favorites"
                )
        targets = {ordered_view[index] for index in indices}
        removed = targets & self._favorites
        if not removed:
            return
        self._favorites -= removed
        self._commit()

    def clear(self) -> None:
        """Remove every favorite."""
        if not self._favorites:
            return
        self._favorites.clear()
        self._commit()

    def export_bytes(self) -> bytes:
        """Serialize the current favorites in display order."""
        return favorites_codec.encode(self._favorites)

    def export_to_file(
        self,
        directory: Optional[Path] = None,
        filename: str = DEFAULT_EXPORT_FILENAME,
    ) -> Path:
        """Write the export artifact for the platform share affordance.

        Args:
            directory: Target directory; the system temp dir when None.
            filename: Name of the JSON file.

        Returns:
            Path of the written file.

        Raises:
            ResourceError: If the file cannot be written.
        """
        target_dir = Path(directory) if directory is not None else Path(tempfile.gettempdir())
        out_path = target_dir / filename
        data = self.export_bytes()
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with open(out_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise ResourceError(f"Failed to write favorites export {out_path}: {e}") from e
        logger.info("Exported %d favorites to %s", len(self._favorites), out_path)
        return out_path

    def import_bytes(self, data: Union[bytes, str]) -> int:
        """Merge an exported favorites array into the current set.

        Existing favorites are kept; duplicates collapse by identity.

        Returns:
            Number of entries that were not favorites before.

        Raises:
            DecodeError: If data is malformed. The store is left untouched.
        """
        imported = [self._resolve(e) for e in favorites_codec.decode(data)]
        added = set(imported) - self._favorites
        if added:
            self._favorites |= added
            self._commit()
        logger.info("Imported %d favorites (%d new)", len(imported), len(added))
        return len(added)

    def import_from_file(self, path: Path) -> int:
        """Read an export file and merge it; see import_bytes.

        Raises:
            ResourceError: If the file cannot be read.
            DecodeError: If its content is malformed.
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ResourceError(f"Failed to read favorites file {path}: {e}") from e
        return self.import_bytes(data)

    def _load(self) -> None:
        try:
            raw = self._storage.get(self._key)
        except StorageError as e:
            logger.warning("Could not read favorites slot '%s', starting empty: %s", self._key, e)
            return
        if raw is None:
            return
        try:
            self._favorites = {self._resolve(e) for e in favorites_codec.decode(raw)}
        except DecodeError as e:
            logger.warning("Discarding corrupt favorites slot '%s': %s", self._key, e)
            self._favorites = set()
            return
        logger.debug("Loaded %d favorites", len(self._favorites))

    def _commit(self) -> None:
        self._persist()
        self.favorites_changed.emit()

    def _persist(self) -> None:
        try:
            self._storage.set(self._key, favorites_codec.encode(self._favorites))
        except StorageError:
            logger.error("Failed to persist favorites", exc_info=True)
