from __future__ import annotations

import enum

from textcase_core.errors import UnknownStyleError


class StyleGuide(str, enum.Enum):
    """Editorial style guides supported by the title-case engine."""

    AMA = "ama"
    AP = "ap"
    APA = "apa"
    BLUEBOOK = "bluebook"
    CHICAGO = "chicago"
    MLA = "mla"
    NYT = "nyt"
    WIKIPEDIA = "wikipedia"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def capitalizes_last_word(self) -> bool:
        return self in _LAST_WORD_CAPITALIZED

    @classmethod
    def parse(cls, name: str) -> StyleGuide:
        """
        Resolve a user-supplied style name.

        Accepts member values and names case-insensitively, plus a few
        common spellings of the newspaper styles.
        """
        key = " ".join(name.split()).lower()
        if key in _ALIASES:
            return _ALIASES[key]
        for member in cls:
            if key in (member.value, member.name.lower(), member.label.lower()):
                return member
        raise UnknownStyleError(name, [m.value for m in cls])


class WordClass(str, enum.Enum):
    ARTICLE = "article"
    COORDINATING_CONJUNCTION = "coordinating_conjunction"
    SHORT_PREPOSITION = "short_preposition"
    MEDIUM_PREPOSITION = "medium_preposition"
    OTHER = "other"


class CaseAction(str, enum.Enum):
    KEEP = "keep"
    CAPITALIZE = "capitalize"
    LOWERCASE = "lowercase"


_LABELS = {
    StyleGuide.AMA: "AMA",
    StyleGuide.AP: "AP",
    StyleGuide.APA: "APA",
    StyleGuide.BLUEBOOK: "Bluebook",
    StyleGuide.CHICAGO: "Chicago",
    StyleGuide.MLA: "MLA",
    StyleGuide.NYT: "NY Times",
    StyleGuide.WIKIPEDIA: "Wikipedia",
}

_LAST_WORD_CAPITALIZED = frozenset(
    {
        StyleGuide.AP,
        StyleGuide.CHICAGO,
        StyleGuide.MLA,
        StyleGuide.NYT,
        StyleGuide.WIKIPEDIA,
    }
)

_ALIASES = {
    "nytimes": StyleGuide.NYT,
    "new york times": StyleGuide.NYT,
    "chicago manual": StyleGuide.CHICAGO,
}
