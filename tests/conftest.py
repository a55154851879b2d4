"""Shared test fixtures."""

import pytest

_ENV_VARS = (
    "BREAKWATCH_BASE_URL",
    "BREAKWATCH_MAX_MARKETS",
    "BREAKWATCH_VOLUME_SPIKE_MULTIPLIER",
    "BREAKWATCH_PRICE_CHANGE_THRESHOLD",
    "BREAKWATCH_MIN_SPREAD",
    "BREAKWATCH_OUTPUT_PATH",
    "BREAKWATCH_HTML_PATH",
    "BREAKWATCH_LOG_LEVEL",
    "BREAKWATCH_LOG_FORMAT",
    "POLYMARKET_API_KEY",
    "POLYMARKET_API_SECRET",
    "POLYMARKET_API_PASSPHRASE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's shell credentials and overrides out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
