"""Tests for configuration loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from breakwatch.config import AppConfig, load_config


class TestAppConfig:
    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.fetch.base_url == "https://clob.polymarket.com"
        assert cfg.fetch.max_markets == 200
        assert cfg.fetch.candle_limit == 60
        assert cfg.fetch.candle_resolution == "1m"
        assert cfg.thresholds.volume_spike_multiplier == 3
        assert cfg.thresholds.price_change_threshold == 0.01
        assert cfg.thresholds.min_spread == 0.02
        assert cfg.output.data_path == "data.json"
        assert cfg.logging.level == "INFO"
        assert cfg.logging.format == "json"
        assert cfg.credentials.complete is False

    def test_credentials_complete(self):
        cfg = AppConfig(credentials={"api_key": "k", "api_secret": "s", "api_passphrase": "p"})
        assert cfg.credentials.complete is True

    def test_rejects_non_positive_limits(self):
        with pytest.raises(ValidationError):
            AppConfig(fetch={"max_markets": 0})


class TestLoadConfig:
    def test_load_example_config(self):
        cfg = load_config("config.yaml.example")
        assert cfg.fetch.max_markets == 200
        assert cfg.fetch.candles_path == "/data/{market_id}/candles"
        assert cfg.thresholds.volume_spike_multiplier == 3
        assert cfg.output.html_path == "public/index.html"

    def test_load_nonexistent_file_returns_defaults(self):
        cfg = load_config("/tmp/nonexistent_config_12345.yaml")
        assert cfg.fetch.max_markets == 200

    def test_load_none_returns_defaults(self):
        cfg = load_config(None)
        assert cfg.thresholds.min_spread == 0.02

    def test_env_override_thresholds(self, monkeypatch):
        monkeypatch.setenv("BREAKWATCH_VOLUME_SPIKE_MULTIPLIER", "4.5")
        monkeypatch.setenv("BREAKWATCH_PRICE_CHANGE_THRESHOLD", "0.02")
        monkeypatch.setenv("BREAKWATCH_MIN_SPREAD", "0.05")
        cfg = load_config(None)
        assert cfg.thresholds.volume_spike_multiplier == 4.5
        assert cfg.thresholds.price_change_threshold == 0.02
        assert cfg.thresholds.min_spread == 0.05

    def test_env_credentials(self, monkeypatch):
        monkeypatch.setenv("POLYMARKET_API_KEY", "key")
        monkeypatch.setenv("POLYMARKET_API_SECRET", "c2VjcmV0")
        monkeypatch.setenv("POLYMARKET_API_PASSPHRASE", "pass")
        cfg = load_config(None)
        assert cfg.credentials.api_key == "key"
        assert cfg.credentials.complete is True

    def test_env_override_log_settings(self, monkeypatch):
        monkeypatch.setenv("BREAKWATCH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BREAKWATCH_LOG_FORMAT", "console")
        cfg = load_config(None)
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.format == "console"

    def test_env_overrides_yaml_values(self, monkeypatch):
        monkeypatch.setenv("BREAKWATCH_MAX_MARKETS", "25")
        cfg = load_config("config.yaml.example")
        assert cfg.fetch.max_markets == 25
        # Non-overridden values preserved
        assert cfg.fetch.candle_limit == 60

    def test_load_minimal_yaml(self, tmp_path):
        p = tmp_path / "minimal.yaml"
        p.write_text("thresholds:\n  min_spread: 0.1\n")
        cfg = load_config(p)
        assert cfg.thresholds.min_spread == 0.1
        # Defaults still apply for unspecified keys and sections
        assert cfg.thresholds.volume_spike_multiplier == 3
        assert cfg.fetch.max_markets == 200
