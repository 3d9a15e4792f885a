"""
Tests for configuration loading, environment overrides and validation.
"""

import json

import pytest

from src.coastal_monitor.core.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test in an empty directory without configuration env vars."""
    for var in ("CONFIG_FILE", "COASTAL_PROVIDER", "COASTAL_API_BASE_URL",
                "COASTAL_RANDOM_SEED", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path, data):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.unit
class TestConfig:
    """Test cases for Config."""

    def test_defaults_without_file(self):
        config = Config()

        assert config.provider_type == "synthetic"
        assert config.random_seed is None
        assert config.bounding_box == (18.0, 72.0, 20.0, 75.0)
        assert config.summary_window_hours == 24
        assert config.fallback_timeout == 3.0
        assert config.max_workers == 5
        assert config.trend_days == 30
        assert config.log_level == "INFO"

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_file_merges_over_defaults(self, tmp_path):
        config = Config(write_config(tmp_path, {
            "monitoring": {"bounding_box": [10, 20, 11, 21], "fallback_timeout": 1.5},
            "logging": {"level": "DEBUG"},
        }))

        assert config.bounding_box == (10.0, 20.0, 11.0, 21.0)
        assert config.fallback_timeout == 1.5
        assert config.summary_window_hours == 24
        assert config.log_level == "DEBUG"

    def test_dot_notation_get(self, tmp_path):
        config = Config(write_config(tmp_path, {"api": {"timeout": 12}}))

        assert config.get("api.timeout") == 12
        assert config.api_timeout == 12
        assert config.get("api.nothing", "fallback") == "fallback"
        assert config.get("provider.type.deeper") is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("COASTAL_PROVIDER", "http")
        monkeypatch.setenv("COASTAL_API_BASE_URL", "https://ocean.example.org/api")
        monkeypatch.setenv("COASTAL_RANDOM_SEED", "99")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        config = Config()

        assert config.provider_type == "http"
        assert config.api_base_url == "https://ocean.example.org/api"
        assert config.random_seed == 99
        assert config.get("environment") == "staging"

    def test_config_file_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CONFIG_FILE", write_config(tmp_path, {"provider": {"random_seed": 5}}))
        assert Config().random_seed == 5

    def test_http_requires_base_url(self, tmp_path):
        with pytest.raises(ValueError, match="base_url"):
            Config(write_config(tmp_path, {"provider": {"type": "http"}}))

    def test_unknown_provider_type(self, tmp_path):
        with pytest.raises(ValueError, match="provider.type"):
            Config(write_config(tmp_path, {"provider": {"type": "ftp"}}))

    def test_bounding_box_needs_four_values(self, tmp_path):
        with pytest.raises(ValueError, match="bounding_box"):
            Config(write_config(tmp_path, {"monitoring": {"bounding_box": [1, 2, 3]}}))

    def test_fallback_timeout_must_be_positive(self, tmp_path):
        with pytest.raises(ValueError, match="fallback_timeout"):
            Config(write_config(tmp_path, {"monitoring": {"fallback_timeout": 0}}))
