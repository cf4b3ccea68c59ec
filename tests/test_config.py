"""Tests for harness settings."""

import pytest
from pydantic import ValidationError

from metadata_fvt.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment loading."""

    def test_defaults(self, monkeypatch):
        for name in ("FVT_PLATFORM_URL", "FVT_SERVERS", "FVT_USER_ID", "FVT_VERIFY_SSL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.platform_url == "https://localhost:9443"
        assert settings.server_names == ["serverinmem", "servergraph"]
        assert settings.user_id == "garygeeke"
        assert settings.verify_ssl is False

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("FVT_PLATFORM_URL", "https://platform:9443/")
        monkeypatch.setenv("FVT_SERVERS", " serverinmem , ,servergraph")
        monkeypatch.setenv("FVT_PAGE_SIZE", "25")
        settings = Settings(_env_file=None)
        assert settings.platform_url == "https://platform:9443"
        assert settings.server_names == ["serverinmem", "servergraph"]
        assert settings.page_size == 25

    def test_log_level_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_log_format_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_page_size_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, page_size=0)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
