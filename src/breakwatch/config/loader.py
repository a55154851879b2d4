"""Config loader — reads YAML, applies BREAKWATCH_* / POLYMARKET_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from breakwatch.config.schema import AppConfig

# env var -> (section, key)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "BREAKWATCH_BASE_URL": ("fetch", "base_url"),
    "BREAKWATCH_MAX_MARKETS": ("fetch", "max_markets"),
    "BREAKWATCH_VOLUME_SPIKE_MULTIPLIER": ("thresholds", "volume_spike_multiplier"),
    "BREAKWATCH_PRICE_CHANGE_THRESHOLD": ("thresholds", "price_change_threshold"),
    "BREAKWATCH_MIN_SPREAD": ("thresholds", "min_spread"),
    "BREAKWATCH_OUTPUT_PATH": ("output", "data_path"),
    "BREAKWATCH_HTML_PATH": ("output", "html_path"),
    "BREAKWATCH_LOG_LEVEL": ("logging", "level"),
    "BREAKWATCH_LOG_FORMAT": ("logging", "format"),
    "POLYMARKET_API_KEY": ("credentials", "api_key"),
    "POLYMARKET_API_SECRET": ("credentials", "api_secret"),
    "POLYMARKET_API_PASSPHRASE": ("credentials", "api_passphrase"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        BREAKWATCH_BASE_URL                 -> fetch.base_url
        BREAKWATCH_MAX_MARKETS              -> fetch.max_markets
        BREAKWATCH_VOLUME_SPIKE_MULTIPLIER  -> thresholds.volume_spike_multiplier
        BREAKWATCH_PRICE_CHANGE_THRESHOLD   -> thresholds.price_change_threshold
        BREAKWATCH_MIN_SPREAD               -> thresholds.min_spread
        BREAKWATCH_OUTPUT_PATH              -> output.data_path
        BREAKWATCH_HTML_PATH                -> output.html_path
        BREAKWATCH_LOG_LEVEL                -> logging.level
        BREAKWATCH_LOG_FORMAT               -> logging.format
        POLYMARKET_API_KEY                  -> credentials.api_key
        POLYMARKET_API_SECRET               -> credentials.api_secret
        POLYMARKET_API_PASSPHRASE           -> credentials.api_passphrase
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data.setdefault(section, {})[key] = value

    return AppConfig.model_validate(data)
