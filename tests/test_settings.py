"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from src.config import LoggingSettings, Settings, StorageSettings, get_settings


class TestSettings:
    """Tests for the settings sections."""

    def test_defaults(self):
        settings = Settings()
        assert settings.storage.default_file is None
        assert settings.storage.encoding == "utf-8"
        assert settings.logging.level == "WARNING"
        assert settings.logging.renderer == "json"
        assert settings.app.debug_mode is False
        assert settings.effective_log_level == "WARNING"

    def test_storage_from_environment(self, monkeypatch):
        monkeypatch.setenv("LEDGER_STORAGE_DEFAULT_FILE", "/data/ledger.csv")
        monkeypatch.setenv("LEDGER_STORAGE_ENCODING", "latin-1")
        storage = StorageSettings()
        assert storage.default_file == "/data/ledger.csv"
        assert storage.encoding == "latin-1"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", " info ")
        assert LoggingSettings().level == "INFO"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            LoggingSettings()

    def test_unknown_renderer_rejected(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_RENDERER", "xml")
        with pytest.raises(ValidationError):
            LoggingSettings()

    def test_debug_mode_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("DEBUG_MODE", "true")
        assert Settings().effective_log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_unknown_app_variables_ignored(self, monkeypatch):
        """Test that unrelated environment variables do not become settings."""
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        assert not hasattr(Settings().app, "app_environment")
