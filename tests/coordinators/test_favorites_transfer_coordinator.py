#!/usr/bin/env python3
"""
Tests for FavoritesTransferCoordinator - validates notices and share hand-off.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QCoreApplication

from sign_lexicon.coordinators import FavoritesTransferCoordinator
from sign_lexicon.core import ResourceError, VocabularyEntry
from sign_lexicon.io import InMemoryKeyValueStore, favorites_codec
from sign_lexicon.services import FavoritesStore


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


@pytest.fixture
def store():
    ensure_qt_app()
    favorites = FavoritesStore(InMemoryKeyValueStore())
    favorites.add(VocabularyEntry(term="Hallo", category="Allgemein"))
    return favorites


@pytest.fixture
def coordinator(store):
    return FavoritesTransferCoordinator(favorites_store=store)


@pytest.fixture
def notices(coordinator):
    received = []
    coordinator.notice_requested.connect(lambda title, message: received.append((title, message)))
    return received


def test_coordinator_fails_fast_on_none_store():
    ensure_qt_app()
    with pytest.raises(ValueError, match="FavoritesStore must not be None"):
        FavoritesTransferCoordinator(favorites_store=None)


def test_coordinator_fails_fast_on_empty_filename(store):
    with pytest.raises(ValueError, match="Export filename"):
        FavoritesTransferCoordinator(favorites_store=store, export_filename="")


def test_export_emits_ready_path(coordinator, notices, tmp_path):
    ready = []
    coordinator.export_ready.connect(lambda path: ready.append(path))

    path = coordinator.export_favorites(tmp_path)

    assert path == tmp_path / "Merken.json"
    assert ready == [path]
    assert notices == []
    assert favorites_codec.decode(path.read_bytes())[0].term == "Hallo"


def test_export_uses_configured_filename(store, tmp_path):
    coordinator = FavoritesTransferCoordinator(store, export_filename="favoriten.json")
    assert coordinator.export_favorites(tmp_path).name == "favoriten.json"


def test_export_failure_becomes_notice(tmp_path):
    failing_store = MagicMock()
    failing_store.export_to_file.side_effect = ResourceError("storage unavailable")
    coordinator = FavoritesTransferCoordinator(favorites_store=failing_store)
    received = []
    coordinator.notice_requested.connect(lambda title, message: received.append((title, message)))

    assert coordinator.export_favorites(tmp_path) is None
    assert received == [("Export fehlgeschlagen", "storage unavailable")]


def test_import_merges_and_reports_count(coordinator, store, notices, tmp_path):
    path = tmp_path / "Merken.json"
    path.write_bytes(
        favorites_codec.encode(
            [
                VocabularyEntry(term="Hallo", category="Allgemein"),
                VocabularyEntry(term="Danke", category="Allgemein"),
            ]
        )
    )

    assert coordinator.import_favorites(path) == 1
    assert len(store) == 2
    assert notices[0][0] == "Import abgeschlossen"
    assert "1" in notices[0][1]


def test_malformed_import_becomes_notice(coordinator, store, notices, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{broken", encoding="utf-8")

    assert coordinator.import_favorites(path) == 0
    assert len(store) == 1
    assert notices[0][0] == "Import fehlgeschlagen"


def test_deeply_nested_import_becomes_notice(coordinator, store, notices, tmp_path):
    path = tmp_path / "nested.json"
    path.write_bytes(b"[" * 200000 + b"]" * 200000)

    assert coordinator.import_favorites(path) == 0
    assert len(store) == 1
    assert notices[0][0] == "Import fehlgeschlagen"


def test_missing_import_file_becomes_notice(coordinator, notices, tmp_path):
    assert coordinator.import_favorites(tmp_path / "missing.json") == 0
    assert notices[0][0] == "Import fehlgeschlagen"


def test_import_accepts_str_path(coordinator, tmp_path):
    path = tmp_path / "Merken.json"
    path.write_bytes(favorites_codec.encode([VocabularyEntry(term="Tante", category="Familie")]))
    assert coordinator.import_favorites(str(path)) == 1
