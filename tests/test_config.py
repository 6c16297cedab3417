"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from butterfly_gallery.config import Settings, get_settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.app_name == "butterfly-gallery"
        assert settings.request_pause_seconds == 0.5
        assert settings.cache_hours == 24
        assert settings.recency_days == 365
        assert settings.page_size == 100
        assert settings.images_per_row == 6
        assert settings.data_dir == Path("data")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BUTTERFLY_GALLERY_PAGE_SIZE", "50")
        monkeypatch.setenv("BUTTERFLY_GALLERY_DATA_DIR", str(tmp_path / "scans"))
        settings = Settings()
        assert settings.page_size == 50
        assert settings.data_dir == tmp_path / "scans"

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("BUTTERFLY_GALLERY_RECENCY_DAYS=30\n")
        assert Settings().recency_days == 30

    def test_rejects_zero_page_size(self) -> None:
        with pytest.raises(ValidationError):
            Settings(page_size=0)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
