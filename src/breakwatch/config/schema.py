"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FetchConfig(BaseModel):
    base_url: str = "https://clob.polymarket.com"
    markets_path: str = "/data"
    candles_path: str = "/data/{market_id}/candles"
    market_url_base: str = "https://polymarket.com/market"
    max_markets: int = Field(default=200, gt=0)
    candle_limit: int = Field(default=60, gt=0)
    candle_resolution: str = "1m"
    timeout_s: float = 15.0


class BreakingThresholds(BaseModel):
    """All three must be strictly exceeded for a market to count as breaking."""

    volume_spike_multiplier: float = 3.0
    price_change_threshold: float = 0.01
    min_spread: float = 0.02


class Credentials(BaseModel):
    api_key: str | None = None
    api_secret: str | None = None
    api_passphrase: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.api_key and self.api_secret and self.api_passphrase)


class OutputConfig(BaseModel):
    data_path: str = "data.json"
    html_path: str = "public/index.html"
    # None means the template bundled with the package.
    template_path: str | None = None


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class AppConfig(BaseModel):
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    thresholds: BreakingThresholds = Field(default_factory=BreakingThresholds)
    credentials: Credentials = Field(default_factory=Credentials)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    example_seed: int = 42
