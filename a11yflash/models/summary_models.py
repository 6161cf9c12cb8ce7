"""
Summary Data Models — Ranked groups, criterion views and the summary record.

These are the public-facing models handed to renderers and returned by the
FastAPI endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from a11yflash.models.criteria_models import ComplianceLevel, CriterionBucket


class RankedRuleGroup(BaseModel):
    """All violations of one rule within one source, summed."""

    rule_id: str
    total_occurrences: int = Field(..., ge=0)
    representative_message: str = Field(default="", description="First message seen for the rule")
    conformance_tags: list[str] = Field(default_factory=list)
    bucket: CriterionBucket | None = None
    problem: str = Field(default="", description="Plain-language problem description")
    fix: str = Field(default="", description="Suggested fix")

    def to_render_dict(self) -> dict[str, Any]:
        """Shape consumed by the HTML/PDF templating collaborators."""
        return {
            "rule": self.rule_id,
            "occurrenceCount": self.total_occurrences,
            "problemDescription": self.problem,
            "suggestedFix": self.fix,
            "tags": list(self.conformance_tags),
        }


class CriterionView(BaseModel):
    """Classified groups of one source falling into a single criterion bucket."""

    bucket: CriterionBucket
    label: str
    total_occurrences: int = 0
    groups: list[RankedRuleGroup] = Field(default_factory=list)


class SourceSummary(BaseModel):
    """Per-source view: raw totals plus the ranked and bucketed groups."""

    source: str
    available: bool = False
    raw_entries: int = 0
    raw_occurrences: int = 0
    unclassified_occurrences: int = 0
    top_rules: list[RankedRuleGroup] = Field(default_factory=list)
    criteria: list[CriterionView] = Field(default_factory=list)


class ComplianceEstimate(BaseModel):
    """Heuristic WCAG level derived from conformance tags of detected violations."""

    level: ComplianceLevel
    conformance: str = Field(..., description="'none', 'A', 'AA' or 'AAA (estimated)'")
    detail: str = ""
    caveat: str = (
        "Estimate bounded by the coverage of the automated checkers that ran. "
        "This is not a conformance certification."
    )


class ScanWindow(BaseModel):
    """Time span covered by the input snapshot files. Diagnostic only."""

    started_at: datetime
    finished_at: datetime
    approx_duration_seconds: int = Field(..., ge=0)


class SummaryRecord(BaseModel):
    """Normalized summary written once per run."""

    target: str | None = None
    generated_at: datetime
    overall_score: int | None = Field(default=None, ge=0, le=100)
    per_profile_scores: dict[str, int | None] = Field(default_factory=dict)
    estimated_compliance_level: ComplianceLevel

    model_config = {"frozen": True}


class AggregationResult(BaseModel):
    """Everything one aggregation run produces."""

    summary: SummaryRecord
    sources: dict[str, SourceSummary] = Field(default_factory=dict)
    compliance: ComplianceEstimate
    scan_window: ScanWindow | None = None

    def render_groups(self) -> dict[str, list[dict[str, Any]]]:
        """Top rules per source in render shape."""
        return {
            name: [group.to_render_dict() for group in source.top_rules]
            for name, source in self.sources.items()
        }


class AuditEntry(BaseModel):
    """Audit metadata for a summary run."""

    run_id: str
    target: str | None = None
    sources_present: list[str] = Field(default_factory=list)
    sources_missing: list[str] = Field(default_factory=list)
    sources_malformed: list[str] = Field(default_factory=list)
    raw_occurrences: dict[str, int] = Field(default_factory=dict)
    overall_score: int | None = None
    compliance_level: str = ""
    duration_ms: float = 0.0
