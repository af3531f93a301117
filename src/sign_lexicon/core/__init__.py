"""Domain layer - Pure entities representing the vocabulary catalog."""

from .errors import DecodeError, ResourceError, SignLexiconError, StorageError
from .preferences import ColorTheme, VideoKind
from .usage_register import UsageRegister, parse_usage_register
from .vocabulary_entry import VocabularyEntry

__all__ = [
    "VocabularyEntry",
    "UsageRegister",
    "parse_usage_register",
    "ColorTheme",
    "VideoKind",
    "SignLexiconError",
    "DecodeError",
    "ResourceError",
    "StorageError",
]
