"""Composition root for the sign_lexicon core."""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QCoreApplication

from sign_lexicon.coordinators import FavoritesTransferCoordinator
from sign_lexicon.io import (
    CatalogLoader,
    InMemoryKeyValueStore,
    KeyValueStore,
    QSettingsKeyValueStore,
    SqliteKeyValueStore,
)
from sign_lexicon.services import CatalogIndex, EnvironmentConfig, FavoritesStore, SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything the presentation layer is handed; passed explicitly, never global."""

    catalog: CatalogIndex
    favorites: FavoritesStore
    settings: SettingsStore
    transfer: FavoritesTransferCoordinator
    storage: KeyValueStore

    def close(self) -> None:
        self.storage.close()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def create_storage(config: EnvironmentConfig) -> KeyValueStore:
    """Pick the key-value backing named by the configuration."""
    backend = config.get_storage_backend()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "qsettings":
        return QSettingsKeyValueStore()
    store = SqliteKeyValueStore(config.get_database_path())
    store.ensure_schema()
    return store


def build_context(
    config: EnvironmentConfig,
    storage: Optional[KeyValueStore] = None,
    catalog_loader: Optional[CatalogLoader] = None,
) -> AppContext:
    """
    Instantiate and wire all components.
    This is the only place that knows how the stores and services fit together.
    """
    # 1. Read-only catalog, loaded before any storage is opened
    loader = catalog_loader or CatalogLoader()
    catalog = CatalogIndex(loader.load())

    # 2. Infrastructure
    owns_storage = storage is None
    storage = storage if storage is not None else create_storage(config)

    try:
        # 3. User stores (Dependency Injection of the key-value port)
        favorites = FavoritesStore(storage, resolve=catalog.resolve)
        settings = SettingsStore(storage)

        # 4. Coordinators
        transfer = FavoritesTransferCoordinator(
            favorites_store=favorites,
            export_filename=config.get_export_filename(),
        )
    except Exception:
        if owns_storage:
            storage.close()
        raise

    return AppContext(
        catalog=catalog,
        favorites=favorites,
        settings=settings,
        transfer=transfer,
        storage=storage,
    )


def main():
    """Build the context headless and log a summary of what was loaded."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    app.setApplicationName("Gebärden Lexikon")
    app.setOrganizationName("SignLexicon")

    config = EnvironmentConfig()
    configure_logging(config.get_log_level())

    context = build_context(config)
    try:
        for category in context.catalog.list_categories():
            logger.info("%s: %d entries", category, len(context.catalog.filter_by_category(category)))
        logger.info(
            "%d favorites, text scale %.1f, theme %s",
            len(context.favorites),
            context.settings.text_scale,
            context.settings.color_theme.display_name,
        )
    finally:
        context.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
