"""
Report Data Models — Normalized violations and tool reports.

Every scanner writes its own native JSON; loaders turn each file into a
ToolReport made of Violations before anything is grouped or scored.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


class Violation(BaseModel):
    """A single rule violation as reported by one scanner."""

    rule_id: str = Field(..., description="Scanner-specific rule identifier, e.g. 'color-contrast'")
    severity: Severity = Severity.ERROR
    occurrence_count: int = Field(default=1, ge=0, description="Affected nodes for this rule")
    message: str = Field(default="", description="Scanner help text for the rule")
    conformance_tags: list[str] = Field(
        default_factory=list,
        description="Conformance tags attached by the scanner (wcag2a, wcag21aa, ...)",
    )

    model_config = {"frozen": True}


class ToolReport(BaseModel):
    """All violations produced by one scanner run."""

    source: str = Field(..., description="Report source, e.g. 'axe-desktop'")
    profile: str | None = Field(default=None, description="Device profile the scan ran under")
    violations: list[Violation] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def raw_occurrences(self) -> int:
        return sum(v.occurrence_count for v in self.violations)


class SourceLoad(BaseModel):
    """Outcome of reading one input file. Missing and malformed both mean 'no data'."""

    source: str
    path: str
    status: Literal["ok", "missing", "malformed"]
    error: str | None = None

    @property
    def is_present(self) -> bool:
        return self.status == "ok"
