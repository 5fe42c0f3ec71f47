"""
Public conversion surface.

Every call builds its own tokens and options; nothing is cached or shared
between calls, so these functions are safe to call from any number of
threads or request handlers.
"""

from __future__ import annotations

import logging

from textcase_core.derivations import lower_case, sentence_case, upper_case
from textcase_core.enums import StyleGuide
from textcase_core.formatter import title_case
from textcase_core.models import ConversionOptions, ConversionResult

logger = logging.getLogger(__name__)


def convert_title_case(
    text: str,
    style: StyleGuide = StyleGuide.CHICAGO,
    options: ConversionOptions | None = None,
) -> str:
    return title_case(text, style, options or ConversionOptions())


def convert_sentence_case(text: str, multi_line: bool = False) -> str:
    return sentence_case(text, multi_line)


def convert_lower_case(text: str) -> str:
    return lower_case(text)


def convert_upper_case(text: str) -> str:
    return upper_case(text)


def convert(
    text: str,
    style: StyleGuide = StyleGuide.CHICAGO,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Compute all four case views of `text`. Blank input gives four empty views."""
    options = options or ConversionOptions()
    if not text.strip():
        return ConversionResult.empty(style)

    logger.debug("convert: %d chars, style=%s, options=%s", len(text), style.value, options)
    return ConversionResult(
        style=style,
        title_case=convert_title_case(text, style, options),
        sentence_case=convert_sentence_case(text, options.multi_line),
        lower_case=convert_lower_case(text),
        upper_case=convert_upper_case(text),
    )
