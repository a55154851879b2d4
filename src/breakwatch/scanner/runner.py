"""Scan runner — one stateless batch pass over the active markets.

Run: python -m breakwatch scan [--config config.yaml] [--output data.json] [--render]

Markets are processed one at a time with a single outstanding request.
Without credentials, or when the market list cannot be fetched, the run
falls back to the example dataset so the dashboard always has a
consistent artifact to render.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime, timezone

import httpx

from breakwatch.config import AppConfig, load_config
from breakwatch.exchange import PolymarketClient, RequestSigner
from breakwatch.logging import get_logger, setup_logging
from breakwatch.models import AnalyzedMarket, Report
from breakwatch.report import (
    ExampleDataError,
    analyze_market,
    build_example_report,
    build_report,
    snapshot_from_raw,
    write_report,
)

log = get_logger(__name__)


def _example_report(cfg: AppConfig, now: datetime) -> Report:
    report = build_example_report(
        cfg.thresholds,
        seed=cfg.example_seed,
        now=now,
        market_url_base=cfg.fetch.market_url_base,
    )
    log.warning(
        "example_report_built",
        total_markets=report.total_markets,
        breaking_count=report.breaking_count,
    )
    return report


async def collect_markets(
    client: PolymarketClient,
    cfg: AppConfig,
    now: datetime | None = None,
) -> list[AnalyzedMarket]:
    """Fetch the market list, then candles per market, and analyze each.

    Errors on the market list propagate. Any error while handling a
    single market only skips that market.
    """
    now = now or datetime.now(timezone.utc)
    raw_markets = await client.get_markets(limit=cfg.fetch.max_markets)
    log.info("markets_fetched", total_fetched=len(raw_markets))

    analyzed: list[AnalyzedMarket] = []
    for raw in raw_markets:
        market_id = raw.get("id") if isinstance(raw, dict) else None
        try:
            row = await _analyze_one(client, cfg, raw, now)
        except Exception as exc:
            log.warning("market_failed", market_id=market_id, reason=str(exc) or type(exc).__name__)
            continue
        if row is not None:
            analyzed.append(row)

    return analyzed


async def _analyze_one(
    client: PolymarketClient,
    cfg: AppConfig,
    raw: dict,
    now: datetime,
) -> AnalyzedMarket | None:
    snapshot = snapshot_from_raw(raw)
    if snapshot is None:
        log.debug("market_unresolved", market_id=raw.get("id") if isinstance(raw, dict) else None)
        return None
    if not snapshot.analyzable:
        log.debug("market_unpriced", market_id=snapshot.id)
        return None

    try:
        candles = await client.get_candles(
            snapshot.id,
            resolution=cfg.fetch.candle_resolution,
            limit=cfg.fetch.candle_limit,
        )
    except (httpx.HTTPError, ValueError) as exc:
        log.warning("candles_unavailable", market_id=snapshot.id, reason=str(exc) or type(exc).__name__)
        return None

    row = analyze_market(
        snapshot,
        candles,
        cfg.thresholds,
        now=now,
        market_url_base=cfg.fetch.market_url_base,
    )
    if row is None:
        log.info("candles_insufficient", market_id=snapshot.id, candles=len(candles))
    return row


async def scan(
    cfg: AppConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    now: datetime | None = None,
) -> Report:
    """Produce this run's report, live if possible, example data otherwise.

    Raises ExampleDataError only if the fallback itself cannot be built.
    """
    now = now or datetime.now(timezone.utc)

    if not cfg.credentials.complete:
        log.warning("credentials_missing", fallback="example")
        return _example_report(cfg, now)

    try:
        signer = RequestSigner(cfg.credentials)
    except ValueError as exc:
        log.error("credentials_invalid", reason=str(exc), fallback="example")
        return _example_report(cfg, now)

    client = PolymarketClient(
        base_url=cfg.fetch.base_url,
        signer=signer,
        markets_path=cfg.fetch.markets_path,
        candles_path=cfg.fetch.candles_path,
        timeout_s=cfg.fetch.timeout_s,
        transport=transport,
    )
    try:
        markets = await collect_markets(client, cfg, now)
    except Exception:
        log.exception("upstream_unavailable", base_url=cfg.fetch.base_url, fallback="example")
        return _example_report(cfg, now)
    finally:
        await client.close()

    report = build_report(markets, source="live", now=now)
    log.info(
        "scan_complete",
        total_markets=report.total_markets,
        breaking_count=report.breaking_count,
    )
    return report


async def run(cfg: AppConfig, output: str | None = None) -> Report:
    """Scan once and write the report artifact, replacing the previous one."""
    report = await scan(cfg)
    path = write_report(report, output or cfg.output.data_path)
    log.info("report_written", path=str(path), source=report.source)
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description="Breaking-markets scanner")
    parser.add_argument("--config", default="config.yaml", help="Path to config file")
    parser.add_argument("--output", default=None, help="Report JSON path (overrides config)")
    parser.add_argument("--render", action="store_true", help="Also render the HTML dashboard")
    args = parser.parse_args()

    cfg = load_config(args.config)
    setup_logging(level=cfg.logging.level, log_format=cfg.logging.format)
    data_path = args.output or cfg.output.data_path

    try:
        report = asyncio.run(run(cfg, data_path))
    except ExampleDataError:
        log.exception("scan_failed")
        sys.exit(1)
    except OSError:
        log.exception("report_write_failed", path=data_path)
        sys.exit(1)

    if args.render:
        from breakwatch.render import render_to_file

        try:
            render_to_file(data_path, cfg.output.html_path, cfg.output.template_path)
        except (OSError, ValueError):
            log.exception("render_failed")
            sys.exit(1)

    print(f"{report.total_markets} markets ({report.breaking_count} breaking, source={report.source})")


if __name__ == "__main__":
    main()
