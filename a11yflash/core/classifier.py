"""
Rule Classifier — Maps scanner rule identifiers onto criterion buckets.

Each scanner names its rules its own way (axe 'color-contrast', Pa11y
'WCAG2AA.Principle1...', QualWeb 'QW-ACT-R37'), so classification is an ordered
table of case-insensitive patterns. The first matching pattern wins.
Unmatched rules yield None and are left out of bucketed views.

Matching is best effort: rule vocabularies change between scanner versions,
so bucket assignment is not guaranteed stable across upgrades.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from a11yflash.models.criteria_models import CRITERION_LABELS, CriterionBucket


@dataclass(frozen=True)
class ClassificationRule:
    """One (pattern, bucket) entry of the priority table."""

    pattern: re.Pattern[str]
    bucket: CriterionBucket


@dataclass(frozen=True)
class RuleExplanation:
    problem: str
    fix: str


def _rule(pattern: str, bucket: CriterionBucket) -> ClassificationRule:
    return ClassificationRule(re.compile(pattern, re.IGNORECASE), bucket)


# Priority order matters: 'aria-input-field-name' must land in
# alternative-text before the generic 'aria' pattern sees it.
RULE_ID_PATTERNS: tuple[ClassificationRule, ...] = (
    _rule(r"contrast", CriterionBucket.CONTRAST),
    _rule(r"image-alt|input-image-alt|aria-input-field-name", CriterionBucket.ALTERNATIVE_TEXT),
    _rule(r"focus-order|tabindex|focus-traps?", CriterionBucket.KEYBOARD_NAVIGATION),
    _rule(r"focus-visible|focus-styles", CriterionBucket.FOCUS_VISIBILITY),
    _rule(
        r"landmark|region|document-title|page-has-heading-one|heading-order",
        CriterionBucket.SEMANTIC_STRUCTURE,
    ),
    _rule(r"link-name|link-in-text-block", CriterionBucket.LINK_CLARITY),
    _rule(r"label|form-field|error|autocomplete", CriterionBucket.FORM_LABELING),
    _rule(r"html-has-lang|html-lang-valid", CriterionBucket.DOCUMENT_LANGUAGE),
    _rule(r"aria", CriterionBucket.ARIA_CORRECTNESS),
    _rule(r"video|audio|autoplay|media", CriterionBucket.MEDIA_ACCESSIBILITY),
)

MessagePredicate = Callable[[str], bool]

# Secondary mode, consulted only when the identifier matches nothing.
MESSAGE_PATTERNS: tuple[tuple[MessagePredicate, CriterionBucket], ...] = (
    (lambda m: "contrast" in m, CriterionBucket.CONTRAST),
    (lambda m: "image" in m and "alt" in m, CriterionBucket.ALTERNATIVE_TEXT),
    (lambda m: "link" in m and ("name" in m or "text" in m), CriterionBucket.LINK_CLARITY),
    (lambda m: "form" in m and "label" in m, CriterionBucket.FORM_LABELING),
    (lambda m: "lang attribute" in m, CriterionBucket.DOCUMENT_LANGUAGE),
    (lambda m: "focus" in m and "visible" in m, CriterionBucket.FOCUS_VISIBILITY),
    (
        lambda m: "heading" in m or "landmark" in m or "structure" in m,
        CriterionBucket.SEMANTIC_STRUCTURE,
    ),
    (lambda m: "aria" in m, CriterionBucket.ARIA_CORRECTNESS),
)

ExplanationPredicate = Callable[[str, str], bool]

EXPLANATIONS: tuple[tuple[ExplanationPredicate, RuleExplanation], ...] = (
    (
        lambda rid, msg: "color-contrast" in rid or "contrast" in msg,
        RuleExplanation(
            "Insufficient contrast",
            "Increase the contrast (darker text or lighter background) until it is readable.",
        ),
    ),
    (
        lambda rid, msg: "image-alt" in rid or ("image" in msg and "alt" in msg),
        RuleExplanation(
            "Image without description",
            'Add a short, descriptive alt text, or alt="" when the image is decorative.',
        ),
    ),
    (
        lambda rid, msg: "link-name" in rid or ("link" in msg and ("name" in msg or "text" in msg)),
        RuleExplanation(
            "Unclear link",
            'Give the link a clear label (or aria-label), e.g. "Download the guide".',
        ),
    ),
    (
        lambda rid, msg: "button" in msg and ("name" in msg or "text" in msg),
        RuleExplanation(
            "Button without a label",
            "Add visible text or an aria-label describing the action.",
        ),
    ),
    (
        lambda rid, msg: "label" in rid or ("form" in msg and "label" in msg),
        RuleExplanation(
            "Field without a label",
            "Associate a clear <label> (or aria-label when a visible label is impossible).",
        ),
    ),
    (
        lambda rid, msg: "document-title" in rid or "document title" in msg,
        RuleExplanation("Missing page title", "Add a short, descriptive title."),
    ),
    (
        lambda rid, msg: "html-has-lang" in rid or "lang attribute" in msg,
        RuleExplanation(
            "Page language not defined",
            'Declare the main language of the page (e.g. lang="en").',
        ),
    ),
    (
        lambda rid, msg: "focus-visible" in rid or ("focus" in msg and "visible" in msg),
        RuleExplanation(
            "Invisible focus indicator",
            "Show a clear outline when elements receive keyboard focus.",
        ),
    ),
    (
        lambda rid, msg: "heading" in rid or "landmark" in rid or "structure" in msg,
        RuleExplanation(
            "Confusing structure",
            "Use a logical heading hierarchy and regions (header, nav, main, footer).",
        ),
    ),
    (
        lambda rid, msg: "aria" in rid,
        RuleExplanation(
            "Incorrect ARIA",
            "Keep ARIA to what is needed and prefer valid semantic HTML.",
        ),
    ),
)

DEFAULT_EXPLANATION = RuleExplanation(
    "Accessibility problem",
    "Apply the good practice described by the rule.",
)


class RuleClassifier:
    """
    Pattern-table classifier.

    The tables and the criterion labels are injected so callers can extend
    the vocabulary without touching module state.
    """

    def __init__(
        self,
        rules: Sequence[ClassificationRule] = RULE_ID_PATTERNS,
        message_rules: Sequence[tuple[MessagePredicate, CriterionBucket]] = MESSAGE_PATTERNS,
        labels: Mapping[CriterionBucket, str] = CRITERION_LABELS,
    ) -> None:
        self.rules = tuple(rules)
        self.message_rules = tuple(message_rules)
        self.labels = labels

    def classify(self, rule_id: str | None, message: str | None = None) -> CriterionBucket | None:
        """Return the bucket for a rule, falling back to its message when given."""
        if rule_id:
            for rule in self.rules:
                if rule.pattern.search(rule_id):
                    return rule.bucket
        if message:
            return self.classify_message(message)
        return None

    def classify_message(self, message: str | None) -> CriterionBucket | None:
        if not message:
            return None
        lowered = message.lower()
        for predicate, bucket in self.message_rules:
            if predicate(lowered):
                return bucket
        return None

    def label(self, bucket: CriterionBucket) -> str:
        return self.labels.get(bucket, bucket.value)

    @staticmethod
    def explain(rule_id: str | None, message: str | None = None) -> RuleExplanation:
        """Plain-language problem and fix for a rule."""
        low_id = (rule_id or "").lower()
        low_msg = (message or "").lower()
        for predicate, explanation in EXPLANATIONS:
            if predicate(low_id, low_msg):
                return explanation
        return DEFAULT_EXPLANATION
