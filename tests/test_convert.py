import pytest
from pydantic import ValidationError

from textcase_core import (
    ConversionOptions,
    StyleGuide,
    convert,
    convert_lower_case,
    convert_sentence_case,
    convert_title_case,
    convert_upper_case,
)

SAMPLES = [
    "a study of love and hope",
    "the lord of the rings",
    "up and down with love",
    "NASA launches the rocket",
    "what are you looking at",
    "don't stop -- believing...",
    "the  spacing   stays",
]


def test_convert_returns_four_views():
    result = convert("NASA launches the rocket", StyleGuide.CHICAGO)
    assert result.style is StyleGuide.CHICAGO
    assert result.title_case == "NASA Launches the Rocket"
    assert result.sentence_case == "Nasa launches the rocket"
    assert result.lower_case == "nasa launches the rocket"
    assert result.upper_case == "NASA LAUNCHES THE ROCKET"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_input_gives_empty_views(text):
    result = convert(text, StyleGuide.AP)
    assert result.title_case == result.sentence_case == result.lower_case == result.upper_case == ""


def test_empty_string_for_every_function():
    assert convert_title_case("") == ""
    assert convert_sentence_case("") == ""
    assert convert_lower_case("") == ""
    assert convert_upper_case("") == ""


def test_defaults():
    assert convert_title_case("lord of the rings") == "Lord of the Rings"
    assert convert_title_case("NASA rocket") == "NASA Rocket"


def test_convert_honors_multi_line_for_sentence_case():
    result = convert("one\ntwo", StyleGuide.CHICAGO, ConversionOptions(multi_line=True))
    assert result.sentence_case == "One\nTwo"
    assert result.title_case == "One\nTwo"


@pytest.mark.parametrize("style", list(StyleGuide))
@pytest.mark.parametrize("text", SAMPLES)
def test_title_case_is_a_fixed_point(style, text):
    options = ConversionOptions()
    once = convert_title_case(text, style, options)
    assert convert_title_case(once, style, options) == once


@pytest.mark.parametrize("style", list(StyleGuide))
def test_first_word_capitalized_in_every_style(style):
    for text in ("of mice and men", "the end", "as if", "with love"):
        assert convert_title_case(text, style)[0].isupper()


@pytest.mark.parametrize("style", [s for s in StyleGuide if s.capitalizes_last_word])
def test_last_word_capitalized(style):
    for text in ("where are you from", "the end of", "a cut above the"):
        assert convert_title_case(text, style).split(" ")[-1][0].isupper()


@pytest.mark.parametrize("style", list(StyleGuide))
def test_multi_line_matches_independent_calls(style):
    first, second = "the lord of the rings", "a study of love and hope"
    options = ConversionOptions(multi_line=True)
    combined = convert_title_case(f"{first}\n{second}", style, options)
    single = ConversionOptions()
    assert combined == f"{convert_title_case(first, style, single)}\n{convert_title_case(second, style, single)}"


def test_options_are_immutable():
    options = ConversionOptions()
    with pytest.raises(ValidationError):
        options.keep_all_caps = False
