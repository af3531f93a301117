"""Settings Store - persisted text scale and colour theme."""

import logging
from typing import Callable, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from sign_lexicon.core import ColorTheme, StorageError
from sign_lexicon.io import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SettingsStore(QObject):
    """Two independent preferences, each in its own key-value slot.

    Values are loaded once at construction and fall back to defaults when
    missing or unreadable. A setter writes only its own slot. No range
    checks happen here; the UI bounds the text scale.
    """

    TEXT_SCALE_KEY = "textSize"
    COLOR_THEME_KEY = "colorScheme"
    DEFAULT_TEXT_SCALE = 16.0
    DEFAULT_COLOR_THEME = ColorTheme.SYSTEM

    text_scale_changed = Signal(float)
    color_theme_changed = Signal(int)

    def __init__(self, storage: KeyValueStore) -> None:
        super().__init__()
        if storage is None:
            raise ValueError("KeyValueStore must not be None")
        self._storage = storage
        self._text_scale = self._read(self.TEXT_SCALE_KEY, float, self.DEFAULT_TEXT_SCALE)
        self._color_theme = self._read(
            self.COLOR_THEME_KEY, lambda raw: ColorTheme(int(raw)), self.DEFAULT_COLOR_THEME
        )

    @property
    def text_scale(self) -> float:
        return self._text_scale

    @text_scale.setter
    def text_scale(self, value: float) -> None:
        self._text_scale = float(value)
        self._write(self.TEXT_SCALE_KEY, repr(self._text_scale))
        self.text_scale_changed.emit(self._text_scale)

    @property
    def color_theme(self) -> ColorTheme:
        return self._color_theme

    @color_theme.setter
    def color_theme(self, value: ColorTheme) -> None:
        self._color_theme = ColorTheme(value)
        self._write(self.COLOR_THEME_KEY, str(int(self._color_theme)))
        self.color_theme_changed.emit(int(self._color_theme))

    def reset(self) -> None:
        """Restore both defaults."""
        self.text_scale = self.DEFAULT_TEXT_SCALE
        self.color_theme = self.DEFAULT_COLOR_THEME

    def _read(self, key: str, parse: Callable[[str], T], default: T) -> T:
        try:
            raw: Optional[bytes] = self._storage.get(key)
        except StorageError as e:
            logger.warning("Could not read setting '%s', using default: %s", key, e)
            return default
        if raw is None:
            return default
        try:
            return parse(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            logger.warning("Ignoring invalid value for setting '%s': %s", key, e)
            return default

    def _write(self, key: str, text: str) -> None:
        try:
            self._storage.set(key, text.encode("utf-8"))
        except StorageError:
            logger.error("Failed to persist setting '%s'", key, exc_info=True)
