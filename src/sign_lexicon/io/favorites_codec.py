"""JSON codec for favorites - shared by the persisted slot and import/export files.

Format (array of objects, one per entry):
[
    {
        "id": "<sha1 of category and term, informational only>",
        "term": "Hallo",
        "explanation": "Ein Gruß, um jemanden zu begrüßen.",
        "category": "Allgemein",
        "videoReference": "https://...",
        "usageRegister": "neutral-colloquial"
    }
]

Files written by the earlier iOS app use German keys (wort, erklaerung,
kategorie, videoURL, gebrauch); they decode to the same entries.
"""

import json
from typing import Any, Dict, Iterable, List, Union

from sign_lexicon.core import DecodeError, VocabularyEntry, parse_usage_register

_FIELD_ALIASES = {
    "term": ("term", "wort"),
    "explanation": ("explanation", "erklaerung"),
    "category": ("category", "kategorie"),
    "videoReference": ("videoReference", "videoURL"),
    "usageRegister": ("usageRegister", "gebrauch"),
}


def entry_to_dict(entry: VocabularyEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "term": entry.term,
        "explanation": entry.explanation,
        "category": entry.category,
        "videoReference": entry.video_reference,
        "usageRegister": entry.usage_register.value if entry.usage_register else None,
    }


def entry_from_dict(item: Any) -> VocabularyEntry:
    """Build an entry from one decoded JSON object.

    Raises:
        DecodeError: If a required field is missing or has the wrong type.
    """
    if not isinstance(item, dict):
        raise DecodeError(f"Expected an object per entry, got {type(item).__name__}")

    values = {}
    for field_name, aliases in _FIELD_ALIASES.items():
        value = next((item[a] for a in aliases if a in item), None)
        if field_name == "usageRegister":
            values[field_name] = value
            continue
        if not isinstance(value, str):
            raise DecodeError(f"Field '{field_name}' missing or not a string in {item!r}")
        values[field_name] = value

    register_raw = values["usageRegister"]
    if register_raw is not None and not isinstance(register_raw, str):
        raise DecodeError(f"Field 'usageRegister' must be a string, got {register_raw!r}")
    try:
        register = parse_usage_register(register_raw)
    except ValueError as e:
        raise DecodeError(f"Unknown usage register: {register_raw!r}") from e

    return VocabularyEntry(
        term=values["term"],
        category=values["category"],
        explanation=values["explanation"],
        video_reference=values["videoReference"],
        usage_register=register,
    )


def encode(entries: Iterable[VocabularyEntry]) -> bytes:
    """Serialize entries as a UTF-8 JSON array in display order."""
    ordered = sorted(set(entries), key=lambda e: e.sort_key)
    payload = [entry_to_dict(e) for e in ordered]
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def decode(data: Union[bytes, str]) -> List[VocabularyEntry]:
    """Parse a JSON array of entries.

    Raises:
        DecodeError: For invalid UTF-8, malformed JSON, or schema mismatch.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        payload = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise DecodeError(f"Favorites data is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array, got {type(payload).__name__}")

    return [entry_from_dict(item) for item in payload]
