"""
Gebärden Lexikon - core of a German Sign Language vocabulary app.

This package provides the non-visual parts of the app:
- Static vocabulary catalog with category browsing and search
- Favorites with persistence and JSON import/export
- Persisted display settings
"""

__version__ = "0.1.0"

# Make key components available at package level
from sign_lexicon.core import VocabularyEntry, UsageRegister, ColorTheme
from sign_lexicon.io import CatalogLoader

__all__ = [
    "VocabularyEntry",
    "UsageRegister",
    "ColorTheme",
    "CatalogLoader",
]
