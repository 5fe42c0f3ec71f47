from __future__ import annotations

from textcase_core.enums import StyleGuide

ARTICLES = frozenset({"a", "an", "the"})

COORDINATING_CONJUNCTIONS = frozenset({"and", "but", "or", "nor", "for", "yet", "so"})

# 2-3 letters.
SHORT_PREPOSITIONS = frozenset(
    {"at", "by", "in", "of", "on", "to", "up", "as", "if", "off", "out", "via"}
)

# 4-5 letters.
MEDIUM_PREPOSITIONS = frozenset({"from", "into", "like", "near", "over", "with", "upon"})

# Per-style words that escape the default lowercasing of their class.
CAPITALIZED_CONJUNCTIONS: dict[StyleGuide, frozenset[str]] = {
    StyleGuide.NYT: frozenset({"nor", "yet", "so"}),
    StyleGuide.CHICAGO: frozenset({"yet", "so"}),
}

CAPITALIZED_SHORT_PREPOSITIONS: dict[StyleGuide, frozenset[str]] = {
    StyleGuide.NYT: frozenset({"up", "off", "out"}),
}

# "if" and "as" are lowercased only under these styles, capitalized elsewhere.
LOWERCASE_IF_STYLES = frozenset({StyleGuide.AMA, StyleGuide.AP, StyleGuide.APA, StyleGuide.NYT})
LOWERCASE_AS_STYLES = frozenset({StyleGuide.AP, StyleGuide.APA, StyleGuide.NYT})

CAPITALIZED_MEDIUM_PREPOSITION_STYLES = frozenset(
    {StyleGuide.AMA, StyleGuide.AP, StyleGuide.APA, StyleGuide.NYT}
)

# Styles that do not force the last word but still capitalize a trailing preposition.
TRAILING_PREPOSITION_STYLES = frozenset({StyleGuide.AMA, StyleGuide.APA, StyleGuide.BLUEBOOK})
