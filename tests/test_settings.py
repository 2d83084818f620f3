"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings, get_settings


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Settings().log_level == "INFO"

    @pytest.mark.parametrize("value,expected", [
        ("debug", "DEBUG"),
        ("Warning", "WARNING"),
        (" error ", "ERROR"),
        ("CRITICAL", "CRITICAL"),
    ])
    def test_case_insensitive(self, value, expected):
        assert Settings(log_level=value).log_level == expected

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            get_settings()
