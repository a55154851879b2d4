"""Artifact I/O — the report JSON consumed by the renderer."""

from __future__ import annotations

import json
from pathlib import Path

from breakwatch.models import Report


def write_report(report: Report, path: str | Path) -> Path:
    """Write *report* to *path*, replacing any previous artifact."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_name(p.name + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(report.to_json_dict(), f, indent=2, ensure_ascii=False)
    tmp.replace(p)
    return p


def read_report(path: str | Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)
