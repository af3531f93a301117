"""Catalog Loader - reads the bundled vocabulary catalog."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from sign_lexicon.core import DecodeError, VocabularyEntry
from sign_lexicon.io import favorites_codec

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


class CatalogLoader:
    """Data Factory turning the static catalog file into immutable entries.

    The catalog shares the favorites wire schema, so it is parsed by the
    same codec. A broken catalog is a packaging defect and fails fast.
    """

    def __init__(self, catalog_path: Optional[Path] = None) -> None:
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH

    def load(self) -> Tuple[VocabularyEntry, ...]:
        """
        Load every catalog record.

        Returns:
            Tuple of entries in file order.

        Raises:
            RuntimeError: If the file is missing, malformed, or holds duplicates.
        """
        try:
            with open(self.catalog_path, "rb") as f:
                entries = favorites_codec.decode(f.read())
        except OSError as e:
            raise RuntimeError(f"Cannot read catalog {self.catalog_path}: {e}") from e
        except DecodeError as e:
            raise RuntimeError(f"Catalog {self.catalog_path} is malformed: {e}") from e

        if len(set(entries)) != len(entries):
            raise RuntimeError(f"Catalog {self.catalog_path} contains duplicate entries")

        logger.debug("Loaded %d catalog entries from %s", len(entries), self.catalog_path)
        return tuple(entries)
