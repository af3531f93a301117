"""Catalog Index - category browsing structure and term search over the catalog."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sign_lexicon.core import VideoKind, VocabularyEntry

FINGERSPELLING_CATEGORY = "Fingeralphabet"
NUMBERS_CATEGORY = "Zahlen"

FINGERSPELLING_ORDER: Tuple[str, ...] = (
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
    "Ä", "Ö", "Ü", "ß", "SCH",
)

NUMBERS_ORDER: Tuple[str, ...] = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "10", "11", "12", "13", "14", "15", "16", "17", "18", "19",
    "20", "21", "22", "23", "30", "40", "50", "60", "70", "80", "90",
    "100", "101", "105", "106", "110", "1000", "2000", "3000",
    "10.000", "20.000", "60.000", "100.000", "500.000",
    "1 Million", "1 Milliarden", "1 Billionen",
    "1980", "2025", "90er", "2000er", "60er",
)

# Categories whose detail view offers only one of the two videos
EXPLANATION_ONLY_CATEGORIES = frozenset({"Redewendungen", "Alltagssätze"})
SIGN_ONLY_CATEGORIES = frozenset({"Lebensmittel", FINGERSPELLING_CATEGORY, NUMBERS_CATEGORY})


@dataclass(frozen=True)
class SearchScope:
    """Restricts a search to one category, or to the whole catalog when category is None."""

    category: Optional[str] = None

    @classmethod
    def everywhere(cls) -> "SearchScope":
        return cls()

    @classmethod
    def within(cls, category: str) -> "SearchScope":
        return cls(category=category)

    @property
    def is_global(self) -> bool:
        return self.category is None


def _lexicographic(entries: Iterable[VocabularyEntry]) -> List[VocabularyEntry]:
    return sorted(entries, key=lambda e: e.sort_key)


def _fingerspelling_order(entries: Iterable[VocabularyEntry]) -> List[VocabularyEntry]:
    """Order by the fixed letter sequence; terms outside it are dropped."""
    positions = {letter: idx for idx, letter in enumerate(FINGERSPELLING_ORDER)}
    listed = [e for e in entries if e.term in positions]
    return sorted(listed, key=lambda e: positions[e.term])


def _numbers_order(entries: Iterable[VocabularyEntry]) -> List[VocabularyEntry]:
    """Order by the fixed numeral sequence; unlisted terms follow, lexicographically."""
    positions = {numeral: idx for idx, numeral in enumerate(NUMBERS_ORDER)}

    def key(entry: VocabularyEntry):
        if entry.term in positions:
            return (0, positions[entry.term], "")
        return (1, 0, entry.term)

    return sorted(entries, key=key)


_CATEGORY_ORDERINGS = {
    FINGERSPELLING_CATEGORY: _fingerspelling_order,
    NUMBERS_CATEGORY: _numbers_order,
}


class CatalogIndex:
    """Read-only queries over a static catalog.

    Nothing is cached: the catalog never changes, and every query is
    recomputed from it on demand. No query raises for a miss; an empty
    list is returned instead.
    """

    def __init__(self, entries: Sequence[VocabularyEntry]) -> None:
        if entries is None:
            raise ValueError("Catalog entries must not be None")
        self._entries: Tuple[VocabularyEntry, ...] = tuple(entries)
        self._by_id: Dict[str, VocabularyEntry] = {e.id: e for e in self._entries}

    @property
    def entries(self) -> Tuple[VocabularyEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def list_categories(self) -> List[str]:
        """Distinct category labels, sorted lexicographically."""
        return sorted({e.category for e in self._entries})

    def filter_by_category(self, category: str) -> List[VocabularyEntry]:
        """All entries of a category, in that category's display order.

        Fingerspelling follows the letter sequence and omits terms outside it.
        Numbers follow the numeral sequence with unlisted terms appended in
        lexicographic order. Everything else is lexicographic by term.
        """
        members = [e for e in self._entries if e.category == category]
        return self._order_for(category, members)

    def search(self, query: str, scope: SearchScope = SearchScope()) -> List[VocabularyEntry]:
        """Case-insensitive substring search on terms only.

        The query is matched as typed; surrounding whitespace is part of it.
        A global search with an empty or blank query returns nothing rather
        than the whole catalog. A category-scoped search with an empty query
        returns the whole category, ordered like filter_by_category.
        """
        query = query or ""
        needle = query.casefold()
        blank = not query.strip()

        if scope.is_global:
            if blank:
                return []
            return _lexicographic(e for e in self._entries if needle in e.term.casefold())

        members = self.filter_by_category(scope.category)
        if not query:
            return members
        return [e for e in members if needle in e.term.casefold()]

    def get_entry(self, entry_id: str) -> Optional[VocabularyEntry]:
        """Resolve a stable id to its catalog record."""
        return self._by_id.get(entry_id)

    def resolve(self, entry: VocabularyEntry) -> VocabularyEntry:
        """Return the catalog record matching entry, or entry itself if unknown."""
        return self._by_id.get(entry.id, entry)

    @staticmethod
    def video_kinds_for(entry: VocabularyEntry) -> Tuple[VideoKind, ...]:
        """Videos the detail view should offer for this entry's category."""
        kinds = []
        if entry.category not in EXPLANATION_ONLY_CATEGORIES:
            kinds.append(VideoKind.SIGN)
        if entry.category not in SIGN_ONLY_CATEGORIES:
            kinds.append(VideoKind.EXPLANATION)
        return tuple(kinds)

    @staticmethod
    def _order_for(category: str, entries: List[VocabularyEntry]) -> List[VocabularyEntry]:
        ordering = _CATEGORY_ORDERINGS.get(category, _lexicographic)
        return ordering(entries)
