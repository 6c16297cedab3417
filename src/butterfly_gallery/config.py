"""
Application settings.

Values come from environment variables prefixed ``BUTTERFLY_GALLERY_``
(or a local ``.env`` file), e.g. ``BUTTERFLY_GALLERY_PAGE_SIZE=50``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for scanning and display."""

    model_config = SettingsConfigDict(
        env_prefix="BUTTERFLY_GALLERY_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "butterfly-gallery"
    app_env: str = "development"
    debug: bool = False

    # Scanning
    request_pause_seconds: float = Field(default=0.5, ge=0)
    cache_hours: int = Field(default=24, ge=0)
    data_dir: Path = Path("data")

    # Display
    recency_days: int = Field(default=365, ge=0)
    page_size: int = Field(default=100, ge=1)
    images_per_row: int = Field(default=6, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings()
