"""Example dataset — used when the upstream API cannot be reached.

Synthetic markets are pushed through the same analyzer, classifier and
ranking as live data, so the fallback report is internally consistent.
Every row is labeled as example data and the report carries
``source="example"``.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from breakwatch.config.schema import BreakingThresholds
from breakwatch.models import Candle, MarketSnapshot, Report
from breakwatch.report.assembly import DEFAULT_MARKET_URL_BASE, analyze_market, build_report

EXAMPLE_PREFIX = "[Example] "
CANDLE_COUNT = 60

# (question, starting YES price, scenario)
_EXAMPLE_MARKETS: tuple[tuple[str, float, str], ...] = (
    ("Will Bitcoin close above $120k on Friday?", 0.41, "spike_up"),
    ("Will the Fed cut rates at the next FOMC meeting?", 0.63, "spike_down"),
    ("Will ETH flip $5,000 before the end of the month?", 0.33, "quiet"),
    ("Will the incumbent win the Senate runoff?", 0.71, "quiet"),
    ("Will a new Solana all-time high print this week?", 0.44, "drift_up"),
    ("Will the Champions League final go to penalties?", 0.57, "drift_down"),
    ("Will US CPI come in above consensus?", 0.50, "quiet"),
    ("Will the SpaceX launch happen on the scheduled date?", 0.82, "quiet"),
    ("Will the government shutdown last more than two weeks?", 0.27, "spike_up"),
    ("Will the box office opening weekend top $150M?", 0.49, "quiet"),
)


class ExampleDataError(RuntimeError):
    """The example dataset could not be produced."""


def _candles_for(rng: random.Random, start_price: float, scenario: str, now: datetime) -> list[Candle]:
    base_volume = rng.uniform(80, 400)
    start = now.replace(second=0, microsecond=0) - timedelta(minutes=CANDLE_COUNT - 1)

    candles: list[Candle] = []
    close = start_price
    for i in range(CANDLE_COUNT):
        is_last = i == CANDLE_COUNT - 1
        open_ = close
        volume = base_volume * rng.uniform(0.8, 1.2)
        step = rng.uniform(-0.001, 0.001)

        if is_last and scenario == "spike_up":
            volume = base_volume * rng.uniform(5, 9)
            step = close * rng.uniform(0.03, 0.06)
        elif is_last and scenario == "spike_down":
            volume = base_volume * rng.uniform(5, 9)
            step = -close * rng.uniform(0.03, 0.06)
        elif is_last and scenario == "drift_up":
            step = close * 0.008
        elif is_last and scenario == "drift_down":
            step = -close * 0.008

        close = min(max(round(open_ + step, 4), 0.01), 0.99)
        candles.append(
            Candle(
                timestamp=(start + timedelta(minutes=i)).timestamp(),
                open=open_,
                high=max(open_, close),
                low=min(open_, close),
                close=close,
                volume=round(volume, 2),
            )
        )
    return candles


def build_example_report(
    thresholds: BreakingThresholds | None = None,
    *,
    seed: int = 42,
    now: datetime | None = None,
    market_url_base: str = DEFAULT_MARKET_URL_BASE,
) -> Report:
    """Generate a deterministic, clearly labeled example report.

    Raises ExampleDataError if generation fails or produces no markets.
    """
    now = now or datetime.now(timezone.utc)
    rng = random.Random(seed)

    try:
        analyzed = []
        for n, (question, start_price, scenario) in enumerate(_EXAMPLE_MARKETS, start=1):
            candles = _candles_for(rng, start_price, scenario, now)
            yes = round(candles[-1].close, 3)
            # Quoted prices rarely sum to exactly 1.
            no = round(1 - yes + rng.uniform(0, 0.01), 3)
            snapshot = MarketSnapshot(
                id=f"example-{n}",
                question=EXAMPLE_PREFIX + question,
                yes_price=yes,
                no_price=no,
                volume_24h=round(sum(c.volume for c in candles) * rng.uniform(12, 30), 2),
            )
            row = analyze_market(
                snapshot, candles, thresholds, now=now, market_url_base=market_url_base
            )
            if row is not None:
                analyzed.append(row)
        report = build_report(analyzed, source="example", now=now)
    except Exception as exc:
        raise ExampleDataError(f"example dataset generation failed: {exc}") from exc

    if report.total_markets == 0:
        raise ExampleDataError("example dataset generation produced no markets")
    return report
