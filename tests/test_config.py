"""Tests for src/config.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.config import Config, get_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config should have sensible defaults."""
        for var in ("DOG_API_URL", "DOG_API_KEY", "CATALOG_PATH", "CACHE_TTL_SECONDS"):
            monkeypatch.delenv(var, raising=False)
        config = Config()
        assert config.dog_api_url == "https://api.thedogapi.com/v1"
        assert config.dog_api_key == ""
        assert config.catalog_path is None
        assert config.cache_ttl_seconds == 1800
        assert config.request_timeout == 30
        assert config.default_limit == 10

    def test_data_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Data dir should default to 'data'."""
        monkeypatch.delenv("DATA_DIR", raising=False)
        config = Config()
        assert config.data_dir == Path("data")

    def test_values_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """API key, catalog path and TTL should read from env vars."""
        monkeypatch.setenv("DOG_API_KEY", "secret")
        monkeypatch.setenv("CATALOG_PATH", "/tmp/breeds.json")
        monkeypatch.setenv("CACHE_TTL_SECONDS", "60")
        config = Config()
        assert config.dog_api_key == "secret"
        assert config.catalog_path == Path("/tmp/breeds.json")
        assert config.cache_ttl_seconds == 60

    def test_frozen_dataclass(self) -> None:
        """Config should be immutable (frozen)."""
        config = Config()
        with pytest.raises(AttributeError):
            config.dog_api_key = "other"  # type: ignore[misc]

    def test_get_config_returns_config(self) -> None:
        """get_config should return a Config instance."""
        config = get_config()
        assert isinstance(config, Config)
