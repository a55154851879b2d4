"""Breaking-event detection and signal classification — pure functions."""

from breakwatch.analysis.breaking import (
    MIN_CANDLES,
    TRAILING_WINDOW,
    analyze_candles,
    is_breaking,
)
from breakwatch.analysis.signals import SIGNAL_RULES, SignalRule, classify_signal

__all__ = [
    "MIN_CANDLES",
    "SIGNAL_RULES",
    "SignalRule",
    "TRAILING_WINDOW",
    "analyze_candles",
    "classify_signal",
    "is_breaking",
]
