"""Multi-style title-case capitalization engine."""

from textcase_core.classifier import classify
from textcase_core.convert import (
    convert,
    convert_lower_case,
    convert_sentence_case,
    convert_title_case,
    convert_upper_case,
)
from textcase_core.decision import decide, should_capitalize
from textcase_core.derivations import lower_case, sentence_case, upper_case
from textcase_core.enums import CaseAction, StyleGuide, WordClass
from textcase_core.errors import InputTooLargeError, TextcaseError, UnknownStyleError
from textcase_core.formatter import split_lines, title_case, title_case_line
from textcase_core.models import ConversionOptions, ConversionResult
from textcase_core.typography import normalize

__version__ = "0.1.0"

__all__ = [
    "CaseAction",
    "ConversionOptions",
    "ConversionResult",
    "InputTooLargeError",
    "StyleGuide",
    "TextcaseError",
    "UnknownStyleError",
    "WordClass",
    "classify",
    "convert",
    "convert_lower_case",
    "convert_sentence_case",
    "convert_title_case",
    "convert_upper_case",
    "decide",
    "lower_case",
    "normalize",
    "sentence_case",
    "should_capitalize",
    "split_lines",
    "title_case",
    "title_case_line",
    "upper_case",
]
