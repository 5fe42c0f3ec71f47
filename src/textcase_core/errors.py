"""
Error types raised at the edges of the engine.

The conversion functions themselves are total; these errors only come from
turning free-form input (style names, request bodies) into engine inputs.
"""

from __future__ import annotations


class TextcaseError(Exception):
    """Base class for textcase errors."""


class UnknownStyleError(TextcaseError, ValueError):
    """A style name that does not map to any supported style guide."""

    def __init__(self, name: str, accepted: list[str]) -> None:
        self.name = name
        self.accepted = accepted
        super().__init__(f"Unknown style {name!r}; expected one of: {', '.join(accepted)}")


class InputTooLargeError(TextcaseError):
    """Input text longer than the configured limit."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Input is {length} characters; the limit is {limit}")
