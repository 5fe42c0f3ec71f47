"""Conversion endpoints."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from textcase_api.config import settings
from textcase_core.convert import convert, convert_title_case
from textcase_core.enums import StyleGuide
from textcase_core.errors import InputTooLargeError
from textcase_core.models import ConversionOptions, ConversionResult
from textcase_core.settings import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


class ConvertRequest(BaseModel):
    """Text to convert. Omitted fields fall back to the configured defaults."""

    text: str = Field(..., description="Input text; may be empty")
    style: StyleGuide | None = None
    keep_all_caps: bool | None = None
    multi_line: bool | None = None
    use_smart_typography: bool | None = None

    def resolve(self) -> tuple[StyleGuide, ConversionOptions]:
        core = get_settings()
        options = core.default_options().model_copy(
            update={
                name: value
                for name, value in (
                    ("keep_all_caps", self.keep_all_caps),
                    ("multi_line", self.multi_line),
                    ("use_smart_typography", self.use_smart_typography),
                )
                if value is not None
            }
        )
        return self.style or core.default_style, options


class TitleResponse(BaseModel):
    text: str


def _check_size(text: str) -> None:
    if len(text) > settings.max_input_chars:
        logger.warning("rejected %d-char input (limit %d)", len(text), settings.max_input_chars)
        raise InputTooLargeError(len(text), settings.max_input_chars)


@router.post("", response_model=ConversionResult)
def convert_text(body: ConvertRequest) -> ConversionResult:
    """Title case, sentence case, lowercase and uppercase views of the text."""
    _check_size(body.text)
    style, options = body.resolve()
    return convert(body.text, style, options)


@router.post("/title", response_model=TitleResponse)
def convert_title(body: ConvertRequest) -> TitleResponse:
    """Title case only."""
    _check_size(body.text)
    style, options = body.resolve()
    return TitleResponse(text=convert_title_case(body.text, style, options))
