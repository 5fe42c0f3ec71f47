from __future__ import annotations

import logging
import re

from textcase_core.classifier import classify
from textcase_core.decision import apply_action, decide
from textcase_core.enums import StyleGuide
from textcase_core.models import ConversionOptions
from textcase_core.typography import normalize

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """
    Split text into lines and the exact break sequences between them.

    `len(breaks) == len(lines) - 1`, so the input is rebuilt by interleaving.
    """
    parts = _LINE_BREAK.split(text)
    return parts[0::2], parts[1::2]


def join_lines(lines: list[str], breaks: list[str]) -> str:
    out = [lines[0]]
    for brk, line in zip(breaks, lines[1:]):
        out.append(brk)
        out.append(line)
    return "".join(out)


def title_case_line(line: str, style: StyleGuide, options: ConversionOptions) -> str:
    # Split on literal spaces only; empty tokens keep repeated spaces intact.
    tokens = line.split(" ")
    line_length = len(tokens)

    out: list[str] = []
    for index, token in enumerate(tokens):
        if not token:
            out.append(token)
            continue
        action = decide(token, index, line_length, classify(token), style, options)
        out.append(apply_action(token, action))

    result = " ".join(out)
    if options.use_smart_typography:
        result = normalize(result)
    return result


def title_case(text: str, style: StyleGuide, options: ConversionOptions) -> str:
    if not options.multi_line:
        logger.debug("title case: style=%s single line", style.value)
        return title_case_line(text, style, options)

    lines, breaks = split_lines(text)
    logger.debug("title case: style=%s lines=%d", style.value, len(lines))
    return join_lines([title_case_line(line, style, options) for line in lines], breaks)
