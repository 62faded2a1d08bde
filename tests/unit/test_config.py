"""Test application settings"""

import pytest
from pydantic import ValidationError

from billsplit.config import Settings


class TestSettings:
    """Test settings validation"""

    def test_defaults(self, monkeypatch):
        """Defaults work without any environment"""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("DEFAULT_CURRENCY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api/v1"
        assert settings.log_level == "INFO"
        assert settings.default_currency == "USD"

    def test_values_from_environment(self, monkeypatch):
        """Environment variables override defaults"""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DEFAULT_CURRENCY", "eur")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.default_currency == "EUR"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_currency(self):
        with pytest.raises(ValidationError, match="DEFAULT_CURRENCY"):
            Settings(_env_file=None, default_currency="DOLLARS")
