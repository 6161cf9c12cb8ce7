"""
Tests for Rule Classifier — pattern priority, message fallback, explanations.
"""

import re

import pytest

from a11yflash.core.classifier import ClassificationRule, RuleClassifier
from a11yflash.models.criteria_models import CRITERION_LABELS, CriterionBucket


classifier = RuleClassifier()


@pytest.mark.parametrize(
    "rule_id",
    ["color-contrast", "color-contrast-enhanced", "CONTRAST", "link-contrast-check"],
)
def test_contrast_identifiers(rule_id):
    assert classifier.classify(rule_id) is CriterionBucket.CONTRAST


@pytest.mark.parametrize(
    "rule_id, bucket",
    [
        ("image-alt", CriterionBucket.ALTERNATIVE_TEXT),
        ("input-image-alt", CriterionBucket.ALTERNATIVE_TEXT),
        ("aria-input-field-name", CriterionBucket.ALTERNATIVE_TEXT),
        ("tabindex", CriterionBucket.KEYBOARD_NAVIGATION),
        ("focus-trap", CriterionBucket.KEYBOARD_NAVIGATION),
        ("focus-visible", CriterionBucket.FOCUS_VISIBILITY),
        ("heading-order", CriterionBucket.SEMANTIC_STRUCTURE),
        ("landmark-one-main", CriterionBucket.SEMANTIC_STRUCTURE),
        ("document-title", CriterionBucket.SEMANTIC_STRUCTURE),
        ("link-name", CriterionBucket.LINK_CLARITY),
        ("label", CriterionBucket.FORM_LABELING),
        ("autocomplete-valid", CriterionBucket.FORM_LABELING),
        ("html-has-lang", CriterionBucket.DOCUMENT_LANGUAGE),
        ("aria-allowed-attr", CriterionBucket.ARIA_CORRECTNESS),
        ("video-caption", CriterionBucket.MEDIA_ACCESSIBILITY),
        ("no-autoplay-audio", CriterionBucket.MEDIA_ACCESSIBILITY),
    ],
)
def test_known_identifiers(rule_id, bucket):
    assert classifier.classify(rule_id) is bucket


def test_first_match_wins():
    # 'aria-input-field-name' also contains 'aria'; the earlier entry wins
    assert classifier.classify("aria-input-field-name") is CriterionBucket.ALTERNATIVE_TEXT
    # 'label-content-name-mismatch' would hit forms before anything later
    assert classifier.classify("label-content-name-mismatch") is CriterionBucket.FORM_LABELING


@pytest.mark.parametrize("rule_id", [None, "", "target-size", "meta-viewport", "QW-ACT-R5"])
def test_unmatched_identifiers_return_none(rule_id):
    assert classifier.classify(rule_id) is None


def test_message_fallback_only_when_identifier_misses():
    assert classifier.classify("QW-ACT-R5", "Validity of HTML Lang attribute") is (
        CriterionBucket.DOCUMENT_LANGUAGE
    )
    assert classifier.classify(
        "WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail",
        "This element has insufficient contrast.",
    ) is CriterionBucket.CONTRAST
    # identifier match takes precedence over the message
    assert classifier.classify("link-name", "insufficient contrast") is CriterionBucket.LINK_CLARITY


def test_classify_message_unmatched():
    assert classifier.classify_message("Touch targets are too small") is None
    assert classifier.classify_message(None) is None


def test_custom_table_injected():
    custom = RuleClassifier(
        rules=[ClassificationRule(re.compile("target-size", re.I), CriterionBucket.KEYBOARD_NAVIGATION)],
        message_rules=[],
    )
    assert custom.classify("target-size") is CriterionBucket.KEYBOARD_NAVIGATION
    assert custom.classify("color-contrast") is None


def test_labels_cover_every_bucket():
    assert set(CRITERION_LABELS) == set(CriterionBucket)
    assert classifier.label(CriterionBucket.CONTRAST) == "Contrast"


def test_explain_known_and_default():
    contrast = classifier.explain("color-contrast", "")
    assert contrast.problem == "Insufficient contrast"
    assert "contrast" in contrast.fix.lower()

    button = classifier.explain("button-name", "Buttons must have discernible text")
    assert button.problem == "Button without a label"

    fallback = classifier.explain("target-size", "Touch targets must be large enough")
    assert fallback.problem == "Accessibility problem"
