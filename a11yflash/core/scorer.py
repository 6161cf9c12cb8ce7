"""
A11y Flash — Accessibility score calculator.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer, .5 going up (72.5 -> 73)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def lighthouse_accessibility_score(report: Mapping[str, Any] | None) -> int | None:
    """Extract the 0-1 accessibility category score of a Lighthouse report as 0-100.

    Returns None when the report or the score is missing or not numeric.
    """
    if not isinstance(report, Mapping):
        return None
    categories = report.get("categories")
    if not isinstance(categories, Mapping):
        return None
    accessibility = categories.get("accessibility")
    if not isinstance(accessibility, Mapping):
        return None
    score = accessibility.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return None
    return max(0, min(100, round_half_up(Decimal(str(score)) * 100)))


def compute_overall_score(sub_scores: Mapping[str, int | None]) -> int | None:
    """Rounded mean of all non-null sub-scores.

    {desktop: 80, mobile: 60} -> 70
    {desktop: 81, mobile: 64} -> 73
    {}                        -> None
    """
    parts = [s for s in sub_scores.values() if s is not None]
    if not parts:
        return None
    return round_half_up(sum(parts) / len(parts))
