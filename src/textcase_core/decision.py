"""
Per-token capitalization decision.

Rules are checked in order and the first match wins:

1. keep_all_caps and the token is all-uppercase with length > 1: keep as is
2. first token of the line: capitalize
3. last token of the line, for styles that force it: capitalize
4. articles: lowercase
5. coordinating conjunctions: lowercase, with per-style exceptions
6. short prepositions: lowercase, with per-style exceptions; a trailing one
   is capitalized under AMA, APA and Bluebook unless an earlier exception
   already lowercased it
7. medium prepositions: capitalized under AMA, AP, APA and NYT; a trailing
   one is also capitalized under Bluebook
8. everything else: capitalize

Lexical classes come from a fixed table, so "up" is treated as a preposition
whether or not it is one in context.
"""

from __future__ import annotations

from textcase_core.enums import CaseAction, StyleGuide, WordClass
from textcase_core.lexicon import (
    CAPITALIZED_CONJUNCTIONS,
    CAPITALIZED_MEDIUM_PREPOSITION_STYLES,
    CAPITALIZED_SHORT_PREPOSITIONS,
    LOWERCASE_AS_STYLES,
    LOWERCASE_IF_STYLES,
    TRAILING_PREPOSITION_STYLES,
)
from textcase_core.models import ConversionOptions


def is_kept_all_caps(token: str, options: ConversionOptions) -> bool:
    return options.keep_all_caps and len(token) > 1 and token == token.upper()


def should_capitalize(
    token: str,
    index: int,
    line_length: int,
    word_class: WordClass,
    style: StyleGuide,
) -> bool:
    """Rules 2-8: True capitalizes the token, False lowercases all of it."""
    if index == 0:
        return True
    if index == line_length - 1 and style.capitalizes_last_word:
        return True

    word = token.lower()
    is_last = index == line_length - 1
    if word_class is WordClass.ARTICLE:
        return False
    if word_class is WordClass.COORDINATING_CONJUNCTION:
        return word in CAPITALIZED_CONJUNCTIONS.get(style, frozenset())
    if word_class is WordClass.SHORT_PREPOSITION:
        return _short_preposition_capitalized(word, style, is_last)
    if word_class is WordClass.MEDIUM_PREPOSITION:
        if style in CAPITALIZED_MEDIUM_PREPOSITION_STYLES:
            return True
        if style is StyleGuide.MLA:
            return False
        return is_last and style in TRAILING_PREPOSITION_STYLES
    return True


def _short_preposition_capitalized(word: str, style: StyleGuide, is_last: bool) -> bool:
    if word in CAPITALIZED_SHORT_PREPOSITIONS.get(style, frozenset()):
        return True
    if style is StyleGuide.MLA:
        return False
    if word == "if":
        return style not in LOWERCASE_IF_STYLES
    if word == "as":
        return style not in LOWERCASE_AS_STYLES
    return is_last and style in TRAILING_PREPOSITION_STYLES


def decide(
    token: str,
    index: int,
    line_length: int,
    word_class: WordClass,
    style: StyleGuide,
    options: ConversionOptions,
) -> CaseAction:
    if is_kept_all_caps(token, options):
        return CaseAction.KEEP
    if should_capitalize(token, index, line_length, word_class, style):
        return CaseAction.CAPITALIZE
    return CaseAction.LOWERCASE


def capitalize_token(token: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return token[:1].upper() + token[1:].lower()


def apply_action(token: str, action: CaseAction) -> str:
    if action is CaseAction.CAPITALIZE:
        return capitalize_token(token)
    if action is CaseAction.LOWERCASE:
        return token.lower()
    return token
