"""Conversion options and results."""

from __future__ import annotations

from pydantic import BaseModel, Field

from textcase_core.enums import StyleGuide


class ConversionOptions(BaseModel):
    """Flags that modify title-case conversion."""

    keep_all_caps: bool = Field(
        default=True,
        description="Leave tokens that are entirely uppercase and longer than one character untouched",
    )
    multi_line: bool = Field(default=False, description="Convert each line independently")
    use_smart_typography: bool = Field(
        default=True, description="Curly quotes, em dashes and ellipses in the title-case view"
    )

    model_config = {"frozen": True}


class ConversionResult(BaseModel):
    """Four independently derived views of the same input."""

    style: StyleGuide
    title_case: str
    sentence_case: str
    lower_case: str
    upper_case: str

    model_config = {"frozen": True}

    @classmethod
    def empty(cls, style: StyleGuide) -> ConversionResult:
        return cls(style=style, title_case="", sentence_case="", lower_case="", upper_case="")
