"""
Aggregator — Groups, ranks, classifies and scores tool reports.

aggregate() is a pure function of its inputs: no I/O, no shared state. The
only non-deterministic field of its output is SummaryRecord.generated_at,
which callers can pin through `now`.

Per source:
    violations -> groups by rule_id (sum of occurrence counts, first message)
               -> ranked by total desc, stable on ties -> top N
               -> bucketed through the RuleClassifier
Across sources:
    sub-scores -> rounded mean -> overall score
    conformance tags -> compliance estimate
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Mapping, Sequence

from a11yflash.config import settings
from a11yflash.core.classifier import RuleClassifier
from a11yflash.core.compliance import estimate_compliance
from a11yflash.core.scorer import compute_overall_score
from a11yflash.models.criteria_models import CriterionBucket
from a11yflash.models.report_models import ToolReport
from a11yflash.models.summary_models import (
    AggregationResult,
    CriterionView,
    RankedRuleGroup,
    ScanWindow,
    SourceSummary,
    SummaryRecord,
)

logger = logging.getLogger("a11yflash.aggregator")

_default_classifier = RuleClassifier()


def group_by_rule(report: ToolReport | None) -> list[RankedRuleGroup]:
    """Group a report's violations by rule id, in first-encountered order."""
    if report is None:
        return []

    groups: dict[str, RankedRuleGroup] = {}
    for v in report.violations:
        group = groups.get(v.rule_id)
        if group is None:
            groups[v.rule_id] = RankedRuleGroup(
                rule_id=v.rule_id,
                total_occurrences=v.occurrence_count,
                representative_message=v.message,
                conformance_tags=list(dict.fromkeys(v.conformance_tags)),
            )
            continue
        group.total_occurrences += v.occurrence_count
        for tag in v.conformance_tags:
            if tag not in group.conformance_tags:
                group.conformance_tags.append(tag)
    return list(groups.values())


def rank_groups(groups: Sequence[RankedRuleGroup], top_n: int | None = None) -> list[RankedRuleGroup]:
    """Sort by total occurrences descending; sorted() keeps ties in input order."""
    ranked = sorted(groups, key=lambda g: g.total_occurrences, reverse=True)
    if top_n is not None:
        ranked = ranked[:top_n]
    return ranked


def classify_groups(
    groups: Iterable[RankedRuleGroup],
    classifier: RuleClassifier,
) -> list[RankedRuleGroup]:
    """Attach bucket, problem and fix to each group."""
    classified: list[RankedRuleGroup] = []
    for group in groups:
        explanation = classifier.explain(group.rule_id, group.representative_message)
        classified.append(
            group.model_copy(
                update={
                    "bucket": classifier.classify(group.rule_id, group.representative_message),
                    "problem": explanation.problem,
                    "fix": explanation.fix,
                }
            )
        )
    return classified


def build_criteria_views(
    groups: Sequence[RankedRuleGroup],
    classifier: RuleClassifier,
    top_n: int | None = None,
) -> list[CriterionView]:
    """One view per bucket, in enumeration order. Unclassified groups are skipped.

    Totals cover every member; the listed groups are capped at top_n.
    """
    views: list[CriterionView] = []
    for bucket in CriterionBucket:
        members = [g for g in groups if g.bucket == bucket]
        views.append(
            CriterionView(
                bucket=bucket,
                label=classifier.label(bucket),
                total_occurrences=sum(g.total_occurrences for g in members),
                groups=members[:top_n] if top_n is not None else members,
            )
        )
    return views


def summarize_source(
    source: str,
    report: ToolReport | None,
    classifier: RuleClassifier,
    top_n: int,
) -> tuple[SourceSummary, list[RankedRuleGroup]]:
    """Build the per-source summary. Also returns every group, before truncation."""
    all_groups = classify_groups(group_by_rule(report), classifier)
    ranked = rank_groups(all_groups)

    raw_occurrences = report.raw_occurrences if report is not None else 0
    unclassified = sum(g.total_occurrences for g in all_groups if g.bucket is None)

    summary = SourceSummary(
        source=source,
        available=report is not None,
        raw_entries=len(report.violations) if report is not None else 0,
        raw_occurrences=raw_occurrences,
        unclassified_occurrences=unclassified,
        top_rules=ranked[:top_n],
        criteria=build_criteria_views(ranked, classifier, top_n),
    )
    return summary, all_groups


def scan_window(snapshot_times: Sequence[datetime] | None) -> ScanWindow | None:
    """Min/max span of the input file timestamps."""
    if not snapshot_times:
        return None
    start, end = min(snapshot_times), max(snapshot_times)
    return ScanWindow(
        started_at=start,
        finished_at=end,
        approx_duration_seconds=max(0, round((end - start).total_seconds())),
    )


def _valid_sub_score(profile: str, score: object) -> int | None:
    """Sub-scores outside 0-100 or not integral count as no data."""
    if score is None:
        return None
    if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 100:
        logger.warning(f"[{profile}] Ignoring invalid sub-score {score!r}")
        return None
    return score


def aggregate(
    tool_reports: Mapping[str, ToolReport | None],
    sub_scores: Mapping[str, int | None] | None = None,
    target: str | None = None,
    snapshot_times: Sequence[datetime] | None = None,
    now: datetime | None = None,
    classifier: RuleClassifier | None = None,
    top_n: int | None = None,
    profiles: Sequence[str] | None = None,
) -> AggregationResult:
    """
    Aggregate tool reports into a summary.

    Args:
        tool_reports: source name -> ToolReport, or None when that source has no data.
        sub_scores: profile -> 0-100 accessibility score, or None.
        target: Audited URL, only used as a label.
        snapshot_times: Input file timestamps for the diagnostic scan window.
        now: Generation timestamp; defaults to the current UTC time.
        classifier: Rule classifier; defaults to the built-in pattern table.
        top_n: Ranked groups kept per source; defaults to settings.top_n.
        profiles: Profiles always listed in per-profile scores.

    Returns:
        AggregationResult. Never raises for missing or empty inputs.

    Raises:
        ValueError: when top_n is below 1.
    """
    classifier = classifier or _default_classifier
    top_n = top_n if top_n is not None else settings.top_n
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}")
    profiles = profiles if profiles is not None else settings.profiles

    sources: dict[str, SourceSummary] = {}
    tag_sets: list[list[str]] = []
    for source, report in tool_reports.items():
        summary, groups = summarize_source(source, report, classifier, top_n)
        sources[source] = summary
        tag_sets.extend(g.conformance_tags for g in groups)
        logger.debug(
            f"[{source}] {summary.raw_entries} entries, {summary.raw_occurrences} occurrences, "
            f"{len(groups)} rules ({summary.unclassified_occurrences} unclassified occurrences)"
        )

    per_profile: dict[str, int | None] = {profile: None for profile in profiles}
    for profile, score in (sub_scores or {}).items():
        per_profile[profile] = _valid_sub_score(profile, score)
    overall = compute_overall_score(per_profile)

    compliance = estimate_compliance(tag_sets)

    record = SummaryRecord(
        target=target or None,
        generated_at=now or datetime.now(timezone.utc),
        overall_score=overall,
        per_profile_scores=per_profile,
        estimated_compliance_level=compliance.level,
    )

    return AggregationResult(
        summary=record,
        sources=sources,
        compliance=compliance,
        scan_window=scan_window(snapshot_times),
    )
