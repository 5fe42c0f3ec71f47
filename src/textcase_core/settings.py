"""
Configuration for the textcase engine surfaces.

Environment variables:
    TEXTCASE_DEFAULT_STYLE          Style guide used when none is given (chicago)
    TEXTCASE_KEEP_ALL_CAPS          Preserve all-caps words (true)
    TEXTCASE_MULTI_LINE             Convert line by line (false)
    TEXTCASE_USE_SMART_TYPOGRAPHY   Curly quotes and dashes in title case (true)
    TEXTCASE_LOG_LEVEL              Root log level for the CLI and API (WARNING)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from textcase_core.enums import StyleGuide
from textcase_core.models import ConversionOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TEXTCASE_", extra="ignore")

    default_style: StyleGuide = StyleGuide.CHICAGO
    keep_all_caps: bool = True
    multi_line: bool = False
    use_smart_typography: bool = True
    log_level: str = "WARNING"

    def default_options(self) -> ConversionOptions:
        return ConversionOptions(
            keep_all_caps=self.keep_all_caps,
            multi_line=self.multi_line,
            use_smart_typography=self.use_smart_typography,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
