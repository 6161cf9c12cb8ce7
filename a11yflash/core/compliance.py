"""
Compliance Estimator — Coarse WCAG level from conformance tags.

The presence of a failing criterion at a tier means that tier is not met.
Tiers are checked most severe first; the first hit decides the level. When no
tier is hit the result is only an estimate: automated checkers cover a subset
of WCAG, so "no violations detected" is not a certification.
"""

from __future__ import annotations

import re
from typing import Iterable

from a11yflash.models.criteria_models import ComplianceLevel, ConformanceTier
from a11yflash.models.summary_models import ComplianceEstimate

# wcag2a, wcag21aa, wcag22aa, wcag2aaa ... (criterion tags like wcag143 never match)
WCAG_TIER_TAG = re.compile(r"wcag(?:2|21|22)?(a{1,3})(?![a-z])", re.IGNORECASE)

_TIER_BY_LENGTH = {1: ConformanceTier.A, 2: ConformanceTier.AA, 3: ConformanceTier.AAA}


def tag_tier(tag: str) -> ConformanceTier | None:
    """Conformance tier a scanner tag refers to, or None for non-tier tags."""
    match = WCAG_TIER_TAG.search(tag or "")
    if not match:
        return None
    return _TIER_BY_LENGTH[len(match.group(1))]


def estimate_compliance(tag_sets: Iterable[Iterable[str]]) -> ComplianceEstimate:
    """Estimate the compliance level from the tags of every detected violation."""
    tiers: set[ConformanceTier] = set()
    for tags in tag_sets:
        for tag in tags:
            tier = tag_tier(tag)
            if tier is not None:
                tiers.add(tier)

    if ConformanceTier.A in tiers:
        return ComplianceEstimate(
            level=ComplianceLevel.BELOW_MINIMUM,
            conformance="none",
            detail="Level A criteria fail: the minimum level is not reached.",
        )
    if ConformanceTier.AA in tiers:
        return ComplianceEstimate(
            level=ComplianceLevel.MINIMUM_ONLY,
            conformance=ConformanceTier.A.value,
            detail="Level A criteria appear to pass, but level AA criteria fail.",
        )
    if ConformanceTier.AAA in tiers:
        return ComplianceEstimate(
            level=ComplianceLevel.MINIMUM_AND_MID,
            conformance=ConformanceTier.AA.value,
            detail="Levels A and AA appear to pass, but level AAA criteria fail.",
        )
    return ComplianceEstimate(
        level=ComplianceLevel.HIGHEST_ESTIMATED,
        conformance=f"{ConformanceTier.AAA.value} (estimated)",
        detail="No WCAG A/AA/AAA violation was detected by the available tools.",
    )
