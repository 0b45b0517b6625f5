"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from dash_summary.shared.config import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        """Test defaults match the documented limits."""
        settings = get_settings()

        assert settings.fetch_timeout_seconds == 30.0
        assert settings.max_manifest_size_bytes == 10 * 1024 * 1024
        assert settings.allowed_content_types == [
            "application/dash+xml",
            "application/xml",
            "text/xml",
        ]
        assert settings.json_indent == 4
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("MAX_MANIFEST_SIZE_MB", "2")
        monkeypatch.setenv("ALLOWED_CONTENT_TYPES", '["Application/Dash+XML"]')
        clear_settings_cache()

        settings = get_settings()

        assert settings.fetch_timeout_seconds == 5.0
        assert settings.max_manifest_size_bytes == 2 * 1024 * 1024
        assert settings.allowed_content_types == ["application/dash+xml"]

    def test_comma_separated_content_types(self, monkeypatch: pytest.MonkeyPatch):
        """Test ALLOWED_CONTENT_TYPES accepts a plain comma-separated list."""
        monkeypatch.setenv("ALLOWED_CONTENT_TYPES", "application/xml, Text/XML")
        clear_settings_cache()

        assert get_settings().allowed_content_types == ["application/xml", "text/xml"]

    def test_malformed_json_content_types(self, monkeypatch: pytest.MonkeyPatch):
        """Test a broken JSON array is a validation error."""
        monkeypatch.setenv("ALLOWED_CONTENT_TYPES", '["application/xml"')
        clear_settings_cache()

        with pytest.raises(ValidationError):
            get_settings()

    def test_settings_cached(self):
        """Test get_settings returns the same instance until cleared."""
        assert get_settings() is get_settings()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"fetch_timeout_seconds": 0},
            {"max_manifest_size_mb": 0},
            {"allowed_content_types": [" "]},
            {"log_level": "TRACE"},
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict):
        """Test out-of-range values fail fast."""
        with pytest.raises(ValidationError):
            Settings(**overrides)
