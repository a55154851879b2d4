"""Pydantic domain models."""

from breakwatch.models.analysis import (
    AnalyzedMarket,
    BreakingMetrics,
    Report,
    Signal,
    SignalCategory,
)
from breakwatch.models.market import Candle, MarketSnapshot, coerce_float

__all__ = [
    "AnalyzedMarket",
    "BreakingMetrics",
    "Candle",
    "MarketSnapshot",
    "Report",
    "Signal",
    "SignalCategory",
    "coerce_float",
]
