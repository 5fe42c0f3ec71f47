"""Style-independent case views: sentence case, lowercase, uppercase."""

from __future__ import annotations

import re

from textcase_core.formatter import join_lines, split_lines

# Whitespace after a sentence terminator. Terminators stay with their sentence.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def sentence_case_line(text: str) -> str:
    if not text:
        return text

    sentences = []
    for fragment in _SENTENCE_BOUNDARY.split(text):
        stripped = fragment.strip()
        if not stripped:
            sentences.append(fragment)
            continue
        sentences.append(stripped[:1].upper() + stripped[1:].lower())
    return " ".join(sentences)


def sentence_case(text: str, multi_line: bool = False) -> str:
    """
    Capitalize the first character of each sentence and lowercase the rest.

    Sentences are rejoined with single spaces. With `multi_line`, each line is
    handled on its own and the original line breaks are kept.
    """
    if not multi_line:
        return sentence_case_line(text)
    lines, breaks = split_lines(text)
    return join_lines([sentence_case_line(line) for line in lines], breaks)


def lower_case(text: str) -> str:
    return text.lower()


def upper_case(text: str) -> str:
    return text.upper()
