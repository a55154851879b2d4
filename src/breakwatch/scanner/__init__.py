"""Scan runner — fetch, analyze, rank and write one report."""

from breakwatch.scanner.runner import collect_markets, scan

__all__ = ["collect_markets", "scan"]
