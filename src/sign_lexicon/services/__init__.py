"""Services layer - catalog queries, user stores and configuration."""

from sign_lexicon.services.catalog_index import (
	FINGERSPELLING_CATEGORY,
	FINGERSPELLING_ORDER,
	NUMBERS_CATEGORY,
	NUMBERS_ORDER,
	CatalogIndex,
	SearchScope,
)
from sign_lexicon.services.favorites_store import FavoritesStore
from sign_lexicon.services.settings_store import SettingsStore
from sign_lexicon.services.environment_config import EnvironmentConfig

__all__ = [
	"CatalogIndex",
	"SearchScope",
	"FINGERSPELLING_CATEGORY",
	"FINGERSPELLING_ORDER",
	"NUMBERS_CATEGORY",
	"NUMBERS_ORDER",
	"FavoritesStore",
	"SettingsStore",
	"EnvironmentConfig",
]
