"""
Integration test: catalog browsing, bookmarking, restart and transfer
through the composition root with a SQLite-backed store.
"""

import sqlite3
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QCoreApplication

from sign_lexicon.core import ColorTheme, VocabularyEntry
from sign_lexicon.io import SqliteKeyValueStore, favorites_codec
from sign_lexicon.main import build_context
from sign_lexicon.services import EnvironmentConfig, SearchScope


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("SIGN_LEXICON_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("SIGN_LEXICON_STORAGE", "sqlite")
    monkeypatch.delenv("SIGN_LEXICON_EXPORT_FILENAME", raising=False)
    return EnvironmentConfig(project_root=tmp_path)


def test_favorites_and_settings_survive_restart(config):
    ensure_qt_app()
    context = build_context(config)
    catalog = context.catalog

    hallo = catalog.search("hallo")[0]
    family = catalog.filter_by_category("Familie")
    context.favorites.add(hallo)
    context.favorites.add(family[0])
    context.settings.text_scale = 20
    context.settings.color_theme = ColorTheme.DARK
    context.close()

    restarted = build_context(config)
    # Fresh catalog records, separately constructed, still match
    assert restarted.favorites.is_favorite(restarted.catalog.search("hallo")[0])
    assert restarted.favorites.is_favorite(restarted.catalog.filter_by_category("Familie")[0])
    assert restarted.settings.text_scale == 20.0
    assert restarted.settings.color_theme is ColorTheme.DARK
    assert isinstance(restarted.storage, SqliteKeyValueStore)
    restarted.close()


def test_export_then_import_into_other_profile(config, tmp_path, monkeypatch):
    ensure_qt_app()
    source = build_context(config)
    for letter in source.catalog.search("", SearchScope.within("Fingeralphabet"))[:3]:
        source.favorites.add(letter)
    export_path = source.transfer.export_favorites(tmp_path / "share")
    source.close()

    monkeypatch.setenv("SIGN_LEXICON_DATA_DIR", str(tmp_path / "other"))
    target = build_context(EnvironmentConfig(project_root=tmp_path))
    target.favorites.add(target.catalog.search("Danke")[0])

    assert target.transfer.import_favorites(export_path) == 3
    assert [e.term for e in target.favorites.sorted_favorites()] == ["A", "B", "C", "Danke"]
    assert all(e.explanation for e in target.favorites.sorted_favorites())
    target.close()


def test_memory_backend_context(tmp_path, monkeypatch):
    ensure_qt_app()
    monkeypatch.setenv("SIGN_LEXICON_STORAGE", "memory")
    context = build_context(EnvironmentConfig(project_root=tmp_path))
    assert len(context.catalog) == 423
    assert len(context.favorites) == 0


def test_saved_favorites_carry_current_catalog_text(config):
    ensure_qt_app()
    context = build_context(config)
    hallo = context.catalog.search("hallo")[0]
    context.close()

    storage = SqliteKeyValueStore(config.get_database_path())
    storage.ensure_schema()
    stale = VocabularyEntry(term=hallo.term, category=hallo.category, explanation="veraltet")
    storage.set("favoriteVokabeln", favorites_codec.encode([stale]))
    storage.close()

    restarted = build_context(config)
    (favorite,) = restarted.favorites.sorted_favorites()
    assert favorite.explanation == hallo.explanation
    assert favorite.video_reference == hallo.video_reference
    restarted.close()


def test_context_close_releases_sqlite_connection(config):
    ensure_qt_app()
    context = build_context(config)
    context.close()
    with pytest.raises(sqlite3.ProgrammingError):
        context.storage.connection.execute("SELECT 1")


def test_failed_catalog_load_opens_no_storage(config, monkeypatch):
    create_storage = MagicMock()
    monkeypatch.setattr("sign_lexicon.main.create_storage", create_storage)
    loader = MagicMock()
    loader.load.side_effect = RuntimeError("catalog missing")

    with pytest.raises(RuntimeError, match="catalog missing"):
        build_context(config, catalog_loader=loader)

    create_storage.assert_not_called()


def test_failed_wiring_closes_opened_storage(config, monkeypatch):
    ensure_qt_app()
    storage = MagicMock()
    storage.get.return_value = None
    monkeypatch.setattr("sign_lexicon.main.create_storage", lambda _config: storage)
    monkeypatch.setattr("sign_lexicon.main.SettingsStore", MagicMock(side_effect=RuntimeError("boom")))

    with pytest.raises(RuntimeError, match="boom"):
        build_context(config)

    storage.close.assert_called_once()
