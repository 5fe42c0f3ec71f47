"""
Straight-to-typographic punctuation.

A heuristic pass: quotes are decided by the whitespace around them, so nested
or unbalanced quotes can come out wrong.
"""

from __future__ import annotations

import re

EM_DASH = "—"
ELLIPSIS = "…"
LEFT_DOUBLE_QUOTE = "“"
RIGHT_DOUBLE_QUOTE = "”"
LEFT_SINGLE_QUOTE = "‘"
RIGHT_SINGLE_QUOTE = "’"

_OPENING_DOUBLE = re.compile(r'(\s|^)"(\S)')
_CLOSING_DOUBLE = re.compile(r'(\S)"(\s|$|[.,;!?])')
_OPENING_SINGLE = re.compile(r"(\s|^)'(\S)")
_CLOSING_SINGLE = re.compile(r"(\S)'(\s|$|[.,;!?])")
_SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,;:!?])")


def normalize(text: str) -> str:
    # Quotes not caught by the opening/closing patterns become closing quotes,
    # which makes every leftover single quote an apostrophe.
    text = _OPENING_DOUBLE.sub(rf"\1{LEFT_DOUBLE_QUOTE}\2", text)
    text = _CLOSING_DOUBLE.sub(rf"\1{RIGHT_DOUBLE_QUOTE}\2", text)
    text = text.replace('"', RIGHT_DOUBLE_QUOTE)
    text = _OPENING_SINGLE.sub(rf"\1{LEFT_SINGLE_QUOTE}\2", text)
    text = _CLOSING_SINGLE.sub(rf"\1{RIGHT_SINGLE_QUOTE}\2", text)
    text = text.replace("'", RIGHT_SINGLE_QUOTE)
    text = text.replace("--", EM_DASH)
    text = text.replace("...", ELLIPSIS)
    return _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
