"""Usage register - social appropriateness tag attached to a vocabulary entry."""

from enum import Enum
from typing import Optional


class UsageRegister(Enum):
    """How appropriate a term is to use, from polite to vulgar."""

    POLITE = "polite"
    NEUTRAL_COLLOQUIAL = "neutral-colloquial"
    OFFENSIVE_INSULT = "offensive-insult"
    VULGAR_COARSE = "vulgar-coarse"

    @property
    def label(self) -> str:
        """Short display label."""
        return _LABELS[self]

    @property
    def detail(self) -> str:
        """Longer explanation shown in the usage info popover."""
        return _DETAILS[self]

    @classmethod
    def from_value(cls, raw: str) -> "UsageRegister":
        """Parse a serialized value, accepting the legacy app's raw values.

        Raises:
            ValueError: If raw matches no register.
        """
        legacy = _LEGACY_VALUES.get(raw)
        if legacy is not None:
            return legacy
        return cls(raw)


def parse_usage_register(raw: Optional[str]) -> Optional[UsageRegister]:
    """Return None for a missing register, the parsed register otherwise."""
    if raw is None:
        return None
    return UsageRegister.from_value(raw)


_LABELS = {
    UsageRegister.POLITE: "Höflich",
    UsageRegister.NEUTRAL_COLLOQUIAL: "Neutral / Umgangssprachlich",
    UsageRegister.OFFENSIVE_INSULT: "Beleidigend / Schimpfwort",
    UsageRegister.VULGAR_COARSE: "Vulgär / Derb",
}

_DETAILS = {
    UsageRegister.POLITE: "Freundlich, respektvoll, für Alltag und formelle Situationen geeignet.",
    UsageRegister.NEUTRAL_COLLOQUIAL: "Alltagssprache, locker, nicht beleidigend, kann in Gesprächen benutzt werden.",
    UsageRegister.OFFENSIVE_INSULT: "Negativ, verletzend, sollte nur verstanden werden, nicht benutzen.",
    UsageRegister.VULGAR_COARSE: "Sehr starkes Schimpfwort, oft tabu, nur in extrem lockeren oder aggressiven Situationen.",
}

# Raw values written by the earlier iOS app
_LEGACY_VALUES = {
    "hoeflich": UsageRegister.POLITE,
    "neutralUmgangssprachlich": UsageRegister.NEUTRAL_COLLOQUIAL,
    "beleidigendSchimpfwort": UsageRegister.OFFENSIVE_INSULT,
    "vulgaerDerb": UsageRegister.VULGAR_COARSE,
}
