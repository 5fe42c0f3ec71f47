from __future__ import annotations

from textcase_core.enums import WordClass
from textcase_core.lexicon import (
    ARTICLES,
    COORDINATING_CONJUNCTIONS,
    MEDIUM_PREPOSITIONS,
    SHORT_PREPOSITIONS,
)


def classify(word: str) -> WordClass:
    """
    Map a word to its lexical class by exact, case-insensitive lookup.

    No stemming and no punctuation stripping: `"of,"` is `OTHER`.
    """
    key = word.lower()
    if key in ARTICLES:
        return WordClass.ARTICLE
    if key in COORDINATING_CONJUNCTIONS:
        return WordClass.COORDINATING_CONJUNCTION
    if key in SHORT_PREPOSITIONS:
        return WordClass.SHORT_PREPOSITION
    if key in MEDIUM_PREPOSITIONS:
        return WordClass.MEDIUM_PREPOSITION
    return WordClass.OTHER
