"""
Report Loaders — Native scanner JSON to normalized ToolReports.

Each input file is optional. A missing file, a file that is not valid JSON, or
a payload that does not have the scanner's shape all collapse to "no data for
that source". Nothing in here raises for bad input.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping

from a11yflash.core.scorer import lighthouse_accessibility_score
from a11yflash.models.report_models import Severity, SourceLoad, ToolReport, Violation

logger = logging.getLogger("a11yflash.loaders")

AXE_DESKTOP = "axe-desktop"
AXE_MOBILE = "axe-mobile"
PA11Y = "pa11y"
QUALWEB = "qualweb"

# source name -> file name inside the reports directory
REPORT_FILES: dict[str, str] = {
    AXE_DESKTOP: "axe-desktop.json",
    AXE_MOBILE: "axe-mobile.json",
    PA11Y: "pa11y.json",
    QUALWEB: "qualweb.json",
}

# profile -> Lighthouse file names, first readable score wins
LIGHTHOUSE_FILES: dict[str, tuple[str, ...]] = {
    "desktop": ("lighthouse-desktop.report.json",),
    "mobile": ("lighthouse-mobile.report.json", "lighthouse.report.json"),
}

AXE_IMPACT_SEVERITY: dict[str, Severity] = {
    "critical": Severity.ERROR,
    "serious": Severity.ERROR,
    "moderate": Severity.WARNING,
    "minor": Severity.NOTICE,
}

QUALWEB_LEVEL_TAGS: dict[str, str] = {
    "A": "wcag2a",
    "AA": "wcag2aa",
    "AAA": "wcag2aaa",
}


class MalformedReportError(ValueError):
    """Payload parsed as JSON but does not have the scanner's expected shape."""


@dataclass
class LoadedSnapshot:
    """Everything read from one reports directory."""

    reports: dict[str, ToolReport | None] = field(default_factory=dict)
    sub_scores: dict[str, int | None] = field(default_factory=dict)
    loads: list[SourceLoad] = field(default_factory=list)
    snapshot_times: list[datetime] = field(default_factory=list)


def read_json(path: str | Path, source: str) -> tuple[SourceLoad, Any]:
    """Read one JSON file, never raising. Returns (load outcome, payload or None)."""
    path = Path(path)
    if not path.exists():
        logger.info(f"[{source}] No input at {path}; treating as no data")
        return SourceLoad(source=source, path=str(path), status="missing"), None

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"[{source}] Unreadable input {path}: {e}")
        return SourceLoad(source=source, path=str(path), status="malformed", error=str(e)), None

    return SourceLoad(source=source, path=str(path), status="ok"), payload


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_tags(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [t for t in value if isinstance(t, str)]


def parse_axe(payload: Any, source: str, profile: str | None = None) -> ToolReport:
    """axe-core results: violations[] with id, help, impact, tags, nodes[]."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("violations"), list):
        raise MalformedReportError("axe report must contain a 'violations' array")

    violations: list[Violation] = []
    for item in payload["violations"]:
        if not isinstance(item, Mapping):
            continue
        nodes = item.get("nodes")
        count = len(nodes) if isinstance(nodes, list) and nodes else 1
        violations.append(
            Violation(
                rule_id=_as_str(item.get("id")) or "rule",
                severity=AXE_IMPACT_SEVERITY.get(_as_str(item.get("impact")).lower(), Severity.ERROR),
                occurrence_count=count,
                message=_as_str(item.get("help")) or _as_str(item.get("description")),
                conformance_tags=_as_tags(item.get("tags")),
            )
        )
    return ToolReport(source=source, profile=profile, violations=violations)


def parse_pa11y(payload: Any, source: str = PA11Y) -> ToolReport:
    """Pa11y results: issues[] with type, code, message. Notices are dropped."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("issues"), list):
        raise MalformedReportError("pa11y report must contain an 'issues' array")

    violations: list[Violation] = []
    for item in payload["issues"]:
        if not isinstance(item, Mapping):
            continue
        issue_type = _as_str(item.get("type")).lower()
        if issue_type not in (Severity.ERROR.value, Severity.WARNING.value):
            continue
        violations.append(
            Violation(
                rule_id=_as_str(item.get("code")) or "__unknown__",
                severity=Severity(issue_type),
                occurrence_count=1,
                message=_as_str(item.get("message")),
            )
        )
    return ToolReport(source=source, violations=violations)


def _qualweb_tags(metadata: Mapping[str, Any]) -> list[str]:
    criteria = metadata.get("success-criteria")
    if not isinstance(criteria, list):
        return []
    tags: list[str] = []
    for criterion in criteria:
        if not isinstance(criterion, Mapping):
            continue
        tag = QUALWEB_LEVEL_TAGS.get(_as_str(criterion.get("level")).upper())
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def parse_qualweb(payload: Any, source: str = QUALWEB) -> ToolReport:
    """QualWeb results: reports[].assertions{}; only failed assertions count."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("reports"), list):
        raise MalformedReportError("qualweb report must contain a 'reports' array")

    violations: list[Violation] = []
    for report in payload["reports"]:
        if not isinstance(report, Mapping):
            continue
        assertions = report.get("assertions")
        if isinstance(assertions, Mapping):
            assertions = list(assertions.values())
        if not isinstance(assertions, list):
            continue

        for assertion in assertions:
            if not isinstance(assertion, Mapping):
                continue
            metadata = assertion.get("metadata")
            metadata = metadata if isinstance(metadata, Mapping) else {}
            verdict = _as_str(metadata.get("verdict")) or _as_str(assertion.get("verdict"))
            if "fail" not in verdict.lower():
                continue
            rule_id = (
                _as_str(assertion.get("code"))
                or _as_str(assertion.get("rule"))
                or _as_str(assertion.get("name"))
            )
            violations.append(
                Violation(
                    rule_id=rule_id or "__unknown__",
                    severity=Severity.ERROR,
                    occurrence_count=1,
                    message=_as_str(assertion.get("name")) or _as_str(assertion.get("description")),
                    conformance_tags=_qualweb_tags(metadata),
                )
            )
    return ToolReport(source=source, violations=violations)


Parser = Callable[[Any, str], ToolReport]

PARSERS: dict[str, Parser] = {
    AXE_DESKTOP: lambda payload, source: parse_axe(payload, source, profile="desktop"),
    AXE_MOBILE: lambda payload, source: parse_axe(payload, source, profile="mobile"),
    PA11Y: parse_pa11y,
    QUALWEB: parse_qualweb,
}


def parse_report(source: str, payload: Any) -> ToolReport | None:
    """Parse an in-memory payload for a known source. Malformed -> None."""
    parser = PARSERS.get(source)
    if parser is None:
        logger.warning(f"[{source}] Unknown report source; ignored")
        return None
    if payload is None:
        return None
    try:
        return parser(payload, source)
    except MalformedReportError as e:
        logger.warning(f"[{source}] Malformed report: {e}")
        return None


def _file_times(path: Path) -> list[datetime]:
    try:
        stat = os.stat(path)
    except OSError:
        return []
    return [
        datetime.fromtimestamp(ts, tz=timezone.utc)
        for ts in (stat.st_ctime, stat.st_mtime)
        if ts
    ]


def load_reports_dir(reports_dir: str | Path) -> LoadedSnapshot:
    """Read every known input from a reports directory."""
    base = Path(reports_dir)
    snapshot = LoadedSnapshot()

    for source, file_name in REPORT_FILES.items():
        load, payload = read_json(base / file_name, source)
        if load.status != "missing":
            snapshot.snapshot_times.extend(_file_times(base / file_name))
        report = None
        if load.is_present:
            try:
                report = PARSERS[source](payload, source)
            except MalformedReportError as e:
                logger.warning(f"[{source}] Malformed report {load.path}: {e}")
                load = SourceLoad(source=source, path=load.path, status="malformed", error=str(e))
        snapshot.loads.append(load)
        snapshot.reports[source] = report

    for profile, file_names in LIGHTHOUSE_FILES.items():
        source = f"lighthouse-{profile}"
        score = None
        outcome: SourceLoad | None = None
        for file_name in file_names:
            load, payload = read_json(base / file_name, source)
            if load.status != "missing":
                snapshot.snapshot_times.extend(_file_times(base / file_name))
            if not load.is_present:
                # keep the first failure so a malformed primary file is reported
                outcome = outcome or load
                continue
            score = lighthouse_accessibility_score(payload)
            if score is None:
                logger.warning(f"[{source}] {load.path} has no accessibility score")
                outcome = outcome or SourceLoad(
                    source=source, path=load.path, status="malformed",
                    error="missing categories.accessibility.score",
                )
                continue
            outcome = load
            break
        snapshot.loads.append(outcome)
        snapshot.sub_scores[profile] = score

    return snapshot
