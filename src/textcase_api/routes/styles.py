"""Style guide listing endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from textcase_core.enums import StyleGuide

router = APIRouter()


class StyleInfo(BaseModel):
    """A supported style guide."""

    value: StyleGuide
    label: str
    capitalizes_last_word: bool


@router.get("", response_model=list[StyleInfo])
def list_styles() -> list[StyleInfo]:
    """List every style guide the engine supports."""
    return [
        StyleInfo(value=guide, label=guide.label, capitalizes_last_word=guide.capitalizes_last_word)
        for guide in StyleGuide
    ]
