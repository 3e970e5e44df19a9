"""
Runtime settings for mathnorm.

Values come from MATHNORM_* environment variables or a .env file in the
working directory.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .shortcuts import DEFAULT_SHORTCUTS, ShortcutTable, load_shortcuts


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATHNORM_",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8001

    # Conversion
    default_format: Literal["auto", "latex", "ascii-math"] = "auto"
    shortcuts_file: str | None = None  # JSON object of trigger -> template
    extend_default_shortcuts: bool = True
    max_input_length: int = 10_000

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None


settings = Settings()


@lru_cache(maxsize=1)
def configured_shortcuts() -> ShortcutTable:
    """Shortcut table selected by the settings, loaded once per process."""
    if not settings.shortcuts_file:
        return DEFAULT_SHORTCUTS
    return load_shortcuts(
        settings.shortcuts_file, extend_default=settings.extend_default_shortcuts
    )
