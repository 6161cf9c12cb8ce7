"""
Criteria Data Models — Accessibility criterion buckets and compliance tiers.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CriterionBucket(str, Enum):
    """Fixed taxonomy every scanner rule is normalized into."""

    CONTRAST = "contrast"
    ALTERNATIVE_TEXT = "alternative-text"
    KEYBOARD_NAVIGATION = "keyboard-navigation"
    FOCUS_VISIBILITY = "focus-visibility"
    SEMANTIC_STRUCTURE = "semantic-structure"
    LINK_CLARITY = "link-clarity"
    FORM_LABELING = "form-labeling"
    DOCUMENT_LANGUAGE = "document-language"
    ARIA_CORRECTNESS = "aria-correctness"
    MEDIA_ACCESSIBILITY = "media-accessibility"


CRITERION_LABELS: Mapping[CriterionBucket, str] = MappingProxyType({
    CriterionBucket.CONTRAST: "Contrast",
    CriterionBucket.ALTERNATIVE_TEXT: "Text alternatives",
    CriterionBucket.KEYBOARD_NAVIGATION: "Keyboard navigation / focus order",
    CriterionBucket.FOCUS_VISIBILITY: "Focus visibility",
    CriterionBucket.SEMANTIC_STRUCTURE: "Semantic structure (headings, landmarks)",
    CriterionBucket.LINK_CLARITY: "Links (accessible name, context)",
    CriterionBucket.FORM_LABELING: "Forms (labels, errors, autocomplete)",
    CriterionBucket.DOCUMENT_LANGUAGE: "Document language",
    CriterionBucket.ARIA_CORRECTNESS: "ARIA (valid roles and attributes)",
    CriterionBucket.MEDIA_ACCESSIBILITY: "Media (captions, autoplay)",
})


class ConformanceTier(str, Enum):
    """WCAG conformance tiers, lowest first."""

    A = "A"
    AA = "AA"
    AAA = "AAA"


class ComplianceLevel(str, Enum):
    """Estimated compliance outcome, most severe first."""

    BELOW_MINIMUM = "does not meet minimum level"
    MINIMUM_ONLY = "meets minimum level only"
    MINIMUM_AND_MID = "meets minimum+mid level"
    HIGHEST_ESTIMATED = "estimated highest level: no violations detected by available checks"
