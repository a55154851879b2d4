"""Placeholder substitution for the static dashboard.

The template carries these tokens:

    %TOTAL_MARKETS%   number of analyzed markets
    %BREAKING_COUNT%  number of breaking markets
    %GENERATED_AT%    report generation time (UTC, human readable)
    %SOURCE%          "live" or "example"
    %MARKETS_JSON%    the market list, embedded inside a <script> block
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from importlib import resources
from pathlib import Path

from breakwatch.config import load_config
from breakwatch.logging import get_logger, setup_logging
from breakwatch.report.writer import read_report

log = get_logger(__name__)

PLACEHOLDERS = (
    "%TOTAL_MARKETS%",
    "%BREAKING_COUNT%",
    "%GENERATED_AT%",
    "%SOURCE%",
    "%MARKETS_JSON%",
)


def load_template(path: str | Path | None = None) -> str:
    """Read the template at *path*, or the one bundled with the package."""
    if path is None:
        return resources.files("breakwatch.render").joinpath("templates/index.html").read_text(
            encoding="utf-8"
        )
    return Path(path).read_text(encoding="utf-8")


def _format_generated_at(raw: str | None) -> str:
    if not raw:
        return ""
    try:
        ts = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return raw
    return ts.strftime("%Y-%m-%d %H:%M UTC")


def _script_safe_json(value: object) -> str:
    # "</script>" inside a question would otherwise end the script block.
    return (
        json.dumps(value, ensure_ascii=False)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def render_dashboard(report: dict, template: str) -> str:
    """Substitute *report* (the data.json shape) into *template*."""
    markets = report.get("markets") or []
    values = {
        "%TOTAL_MARKETS%": str(report.get("totalMarkets", len(markets))),
        "%BREAKING_COUNT%": str(report.get("breakingCount", 0)),
        "%GENERATED_AT%": _format_generated_at(report.get("generatedAt")),
        "%SOURCE%": str(report.get("source", "live")),
        "%MARKETS_JSON%": _script_safe_json(markets),
    }
    html = template
    for token, value in values.items():
        html = html.replace(token, value)
    return html


def render_to_file(
    data_path: str | Path,
    html_path: str | Path,
    template_path: str | Path | None = None,
) -> Path:
    report = read_report(data_path)
    html = render_dashboard(report, load_template(template_path))
    out = Path(html_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    log.info(
        "dashboard_rendered",
        path=str(out),
        total_markets=report.get("totalMarkets"),
        breaking_count=report.get("breakingCount"),
    )
    return out


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the breaking-markets dashboard")
    parser.add_argument("--config", default="config.yaml", help="Path to config file")
    parser.add_argument("--data", default=None, help="Report JSON to read (overrides config)")
    parser.add_argument("--out", default=None, help="HTML file to write (overrides config)")
    parser.add_argument("--template", default=None, help="Template file (overrides config)")
    args = parser.parse_args()

    cfg = load_config(args.config)
    setup_logging(level=cfg.logging.level, log_format=cfg.logging.format)

    try:
        render_to_file(
            args.data or cfg.output.data_path,
            args.out or cfg.output.html_path,
            args.template or cfg.output.template_path,
        )
    except (OSError, ValueError):
        log.exception("render_failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
