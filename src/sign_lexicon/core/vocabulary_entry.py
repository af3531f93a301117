"""VocabularyEntry entity - one learnable sign with its explanation and video."""

import hashlib
from dataclasses import dataclass, field
from typing import Optional

from .usage_register import UsageRegister


@dataclass(frozen=True)
class VocabularyEntry:
    """A single catalog record.

    Identity is content-derived: two entries are the same favorite when their
    term and category match. Explanation, video and usage register are payload
    and take no part in equality or hashing, so an entry persisted in one
    session still matches the freshly loaded catalog record in the next.

    Attributes:
        term: The headword.
        explanation: Free-text description of meaning and usage.
        category: Browsing category label (open-ended set).
        video_reference: URI of the demonstration video.
        usage_register: Optional appropriateness tag.
    """

    term: str
    category: str
    explanation: str = field(default="", compare=False)
    video_reference: str = field(default="", compare=False)
    usage_register: Optional[UsageRegister] = field(default=None, compare=False)

    @property
    def id(self) -> str:
        """Stable identifier, identical across process restarts."""
        key = f"{self.category}\x1f{self.term}"
        return hashlib.sha1(key.encode("utf-8")).hexdigest()

    @property
    def sort_key(self) -> tuple:
        """Display ordering: lexicographic by term, category breaks ties."""
        return (self.term, self.category)
