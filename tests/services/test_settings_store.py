"""Unit tests for SettingsStore."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QCoreApplication

from sign_lexicon.core import ColorTheme, StorageError
from sign_lexicon.io import InMemoryKeyValueStore
from sign_lexicon.services import SettingsStore


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


@pytest.fixture
def storage():
    return InMemoryKeyValueStore()


@pytest.fixture
def settings(storage):
    ensure_qt_app()
    return SettingsStore(storage)


def test_defaults_without_persisted_values(settings):
    assert settings.text_scale == 16.0
    assert settings.color_theme is ColorTheme.SYSTEM


def test_values_survive_reload(settings, storage):
    settings.text_scale = 22
    settings.color_theme = ColorTheme.DARK

    reloaded = SettingsStore(storage)
    assert reloaded.text_scale == 22.0
    assert reloaded.color_theme is ColorTheme.DARK


def test_each_setter_writes_only_its_slot(settings, storage):
    settings.text_scale = 18.5
    assert storage.keys() == [SettingsStore.TEXT_SCALE_KEY]
    settings.color_theme = ColorTheme.LIGHT
    assert storage.get(SettingsStore.COLOR_THEME_KEY) == b"1"


def test_store_does_not_clamp_text_scale(settings):
    settings.text_scale = 400
    assert settings.text_scale == 400.0


def test_invalid_persisted_values_fall_back(storage):
    ensure_qt_app()
    storage.set(SettingsStore.TEXT_SCALE_KEY, b"huge")
    storage.set(SettingsStore.COLOR_THEME_KEY, b"7")
    settings = SettingsStore(storage)
    assert settings.text_scale == 16.0
    assert settings.color_theme is ColorTheme.SYSTEM


def test_storage_read_failure_falls_back():
    ensure_qt_app()
    failing = MagicMock()
    failing.get.side_effect = StorageError("unavailable")
    settings = SettingsStore(failing)
    assert settings.text_scale == 16.0


def test_setters_emit_change_signals(settings):
    scales, themes = [], []
    settings.text_scale_changed.connect(lambda value: scales.append(value))
    settings.color_theme_changed.connect(lambda value: themes.append(value))

    settings.text_scale = 20
    settings.color_theme = ColorTheme.DARK

    assert scales == [20.0]
    assert themes == [int(ColorTheme.DARK)]


def test_reset_restores_defaults(settings, storage):
    settings.text_scale = 30
    settings.color_theme = ColorTheme.LIGHT
    settings.reset()
    assert SettingsStore(storage).text_scale == 16.0
    assert SettingsStore(storage).color_theme is ColorTheme.SYSTEM


def test_color_theme_display_names():
    assert [t.display_name for t in ColorTheme] == ["System", "Hell", "Dunkel"]
