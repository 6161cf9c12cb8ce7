"""
Summary Writer — Persists an AggregationResult as JSON files.

summary.json          the SummaryRecord
summary-details.json  ranked groups, criterion views, compliance detail, scan window

Output is deterministic for a given result: keys keep model field order and
no run-specific data is added beyond the record's own generated_at.
"""

from __future__ import annotations

import json
from pathlib import Path

from a11yflash.models.summary_models import AggregationResult

SUMMARY_FILE = "summary.json"
DETAILS_FILE = "summary-details.json"


class SummaryWriteError(Exception):
    """Raised when summary outputs cannot be written."""


def render_summary(result: AggregationResult) -> str:
    return json.dumps(result.summary.model_dump(mode="json"), indent=2, ensure_ascii=False)


def render_details(result: AggregationResult) -> str:
    payload = {
        "compliance": result.compliance.model_dump(mode="json"),
        "scan_window": result.scan_window.model_dump(mode="json") if result.scan_window else None,
        "top_rules": result.render_groups(),
        "sources": {
            name: source.model_dump(mode="json") for name, source in result.sources.items()
        },
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_summary(result: AggregationResult, out_dir: str | Path) -> tuple[Path, Path]:
    """Write both output files. Raises SummaryWriteError on any filesystem failure."""
    out = Path(out_dir)
    summary_path = out / SUMMARY_FILE
    details_path = out / DETAILS_FILE
    try:
        out.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(render_summary(result) + "\n", encoding="utf-8")
        details_path.write_text(render_details(result) + "\n", encoding="utf-8")
    except OSError as e:
        raise SummaryWriteError(f"Could not write summary to {out}: {e}") from e
    return summary_path, details_path
