"""Error taxonomy shared by the persistence and transfer layers."""


class SignLexiconError(Exception):
    """Base class for all sign_lexicon errors."""


class DecodeError(SignLexiconError, ValueError):
    """Persisted or imported favorites data is malformed or mismatches the schema."""


class ResourceError(SignLexiconError, RuntimeError):
    """An import/export file could not be read or written."""


class StorageError(SignLexiconError, RuntimeError):
    """A key-value backend failed to read or write a slot."""
