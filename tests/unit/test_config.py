"""Unit tests for application settings."""

import pytest

from atelier.config import DEFAULT_JWT_SECRET, Settings
from atelier.util.error import ConfigurationError


class TestSettings:
    """Settings validation."""

    def test_production_requires_real_jwt_secret(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(environment="production", auth={"jwt_secret": DEFAULT_JWT_SECRET})

        assert exc_info.value.setting == "AUTH__JWT_SECRET"

    def test_production_with_secret(self):
        settings = Settings(
            environment="production",
            host="api.atelier.example",
            auth={"jwt_secret": "a-long-random-production-secret-value"},
        )

        assert settings.api.base_url == "https://api.atelier.example"

    def test_development_defaults(self):
        settings = Settings(environment="development", host="localhost", port=8000)

        assert settings.api.base_url == "http://localhost:8000"
        assert settings.ledger.initial_like_credit == 5
        assert settings.notifications.page_size == 50
