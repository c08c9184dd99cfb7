"""
Unit tests for application settings and fixtures.
"""

import pydantic
import pytest

from grubdash.core.config import IdStrategy, Settings, get_settings
from grubdash.services.fixtures import load_fixtures


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ["DEBUG", "ID_STRATEGY", "SEED_DATA", "API_PORT", "CORS_ORIGINS"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.debug is False
        assert settings.id_strategy == IdStrategy.UUID
        assert settings.seed_data is False
        assert settings.api_port == 5000
        assert settings.cors_origins_list == ["*"]

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ID_STRATEGY", "Counter")
        monkeypatch.setenv("SEED_DATA", "true")
        monkeypatch.setenv("API_PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.id_strategy == IdStrategy.COUNTER
        assert settings.seed_data is True
        assert settings.api_port == 8080

    def test_invalid_id_strategy(self):
        with pytest.raises(pydantic.ValidationError, match="id_strategy"):
            Settings(_env_file=None, id_strategy="sequential")

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestFixtures:
    """Tests for the bundled fixture data."""

    def test_load(self):
        dishes, orders = load_fixtures()

        assert len(dishes) == 4
        assert len(orders) == 2
        assert all(d.price > 0 for d in dishes)
        assert all(len(o.dishes) >= 1 for o in orders)

    def test_unique_ids(self):
        dishes, orders = load_fixtures()

        assert len({d.id for d in dishes}) == len(dishes)
        assert len({o.id for o in orders}) == len(orders)
