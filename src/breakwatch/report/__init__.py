"""Report assembly, example dataset and artifact writing."""

from breakwatch.report.assembly import (
    analyze_market,
    build_report,
    rank_markets,
    snapshot_from_raw,
    truncate_question,
)
from breakwatch.report.example import ExampleDataError, build_example_report
from breakwatch.report.writer import read_report, write_report

__all__ = [
    "ExampleDataError",
    "analyze_market",
    "build_example_report",
    "build_report",
    "rank_markets",
    "read_report",
    "snapshot_from_raw",
    "truncate_question",
    "write_report",
]
