"""Configuration system."""

from breakwatch.config.loader import load_config
from breakwatch.config.schema import (
    AppConfig,
    BreakingThresholds,
    Credentials,
    FetchConfig,
)

__all__ = ["AppConfig", "BreakingThresholds", "Credentials", "FetchConfig", "load_config"]
