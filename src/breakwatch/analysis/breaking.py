"""Breaking analyzer — volume spike and price move over the last candle."""

from __future__ import annotations

from collections.abc import Sequence
from statistics import mean

from breakwatch.config.schema import BreakingThresholds
from breakwatch.models import BreakingMetrics, Candle, MarketSnapshot

TRAILING_WINDOW = 10
MIN_CANDLES = TRAILING_WINDOW + 1


def analyze_candles(candles: Sequence[Candle] | None) -> BreakingMetrics | None:
    """Compare the last candle against the ten before it.

    Returns None if there are fewer than ``MIN_CANDLES`` candles; callers
    must skip the market rather than treat it as quiet.
    """
    if not candles or len(candles) < MIN_CANDLES:
        return None

    last = candles[-1]
    prev = candles[-2]

    # candles[len-11 .. len-2], the current candle excluded
    window = candles[-MIN_CANDLES:-1]
    average_volume = mean(c.volume for c in window)

    if prev.close > 0:
        price_change = (last.close - prev.close) / prev.close
    else:
        price_change = 0.0

    return BreakingMetrics(
        current_volume=last.volume,
        average_volume=average_volume,
        volume_ratio=last.volume / (average_volume or 1),
        price_change=price_change,
    )


def is_breaking(
    snapshot: MarketSnapshot,
    metrics: BreakingMetrics,
    thresholds: BreakingThresholds | None = None,
) -> bool:
    """True when volume spike, price move and spread all exceed their thresholds."""
    t = thresholds or BreakingThresholds()
    return (
        metrics.volume_ratio > t.volume_spike_multiplier
        and abs(metrics.price_change) > t.price_change_threshold
        and snapshot.spread > t.min_spread
    )
