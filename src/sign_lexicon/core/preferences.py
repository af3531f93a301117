"""Preference and presentation enums consumed by the rendering layer."""

from enum import Enum, IntEnum


class ColorTheme(IntEnum):
    """Colour scheme preference; persisted as its integer value."""

    SYSTEM = 0
    LIGHT = 1
    DARK = 2

    @property
    def display_name(self) -> str:
        return {
            ColorTheme.SYSTEM: "System",
            ColorTheme.LIGHT: "Hell",
            ColorTheme.DARK: "Dunkel",
        }[self]


class VideoKind(Enum):
    """Which demonstration video a detail view offers."""

    SIGN = "sign"
    EXPLANATION = "explanation"
