"""Ranking and assembly — joins snapshot, metrics and signal into report rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Literal

from breakwatch.analysis import analyze_candles, classify_signal, is_breaking
from breakwatch.config.schema import BreakingThresholds
from breakwatch.exchange.polymarket import PolymarketClient
from breakwatch.models import AnalyzedMarket, Candle, MarketSnapshot, Report

MAX_QUESTION_LENGTH = 80
DEFAULT_MARKET_URL_BASE = "https://polymarket.com/market"


def truncate_question(question: str, max_length: int = MAX_QUESTION_LENGTH) -> str:
    if len(question) <= max_length:
        return question
    return question[:max_length] + "..."


def snapshot_from_raw(market: dict) -> MarketSnapshot | None:
    """Resolve an upstream market dict to a snapshot.

    Returns None when the market has no id, no question, or fewer than two
    outcome prices.
    """
    if not isinstance(market, dict):
        return None
    normalized = PolymarketClient.normalize_market(market)
    prices = normalized["outcomePrices"]
    if not normalized["id"] or not normalized["question"] or len(prices) < 2:
        return None
    return MarketSnapshot(
        id=normalized["id"],
        question=normalized["question"],
        yes_price=prices[0],
        no_price=prices[1],
        volume_24h=normalized["volume24hr"],
    )


def analyze_market(
    snapshot: MarketSnapshot,
    candles: Sequence[Candle] | None,
    thresholds: BreakingThresholds | None = None,
    *,
    now: datetime | None = None,
    market_url_base: str = DEFAULT_MARKET_URL_BASE,
) -> AnalyzedMarket | None:
    """Build the report row for one market, or None if it must be skipped."""
    if not snapshot.analyzable:
        return None
    metrics = analyze_candles(candles)
    if metrics is None:
        return None

    signal = classify_signal(snapshot.yes_price, metrics.price_change)
    return AnalyzedMarket(
        id=snapshot.id,
        question=truncate_question(snapshot.question),
        yes=snapshot.yes_price,
        no=snapshot.no_price,
        spread=round(snapshot.spread, 6),
        volume_24h=snapshot.volume_24h,
        volume_now=metrics.current_volume,
        avg_volume=metrics.average_volume,
        volume_ratio=f"{metrics.volume_ratio:.2f}x",
        price_change=f"{metrics.price_change * 100:+.2f}%",
        signal=signal,
        is_breaking=is_breaking(snapshot, metrics, thresholds),
        last_update=now or datetime.now(timezone.utc),
        url=f"{market_url_base.rstrip('/')}/{snapshot.id}",
    )


def rank_markets(markets: Iterable[AnalyzedMarket]) -> list[AnalyzedMarket]:
    """Breaking markets first, then by current-minute volume, descending.

    Python's sort is stable, so ties keep fetch order.
    """
    return sorted(markets, key=lambda m: (not m.is_breaking, -m.volume_now))


def build_report(
    markets: Iterable[AnalyzedMarket],
    source: Literal["live", "example"] = "live",
    *,
    now: datetime | None = None,
) -> Report:
    ranked = rank_markets(markets)
    return Report(
        generated_at=now or datetime.now(timezone.utc),
        source=source,
        total_markets=len(ranked),
        breaking_count=sum(1 for m in ranked if m.is_breaking),
        markets=ranked,
    )
