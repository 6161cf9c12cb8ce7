"""
Test fixtures shared across all A11y Flash tests.
"""

import json

import pytest


@pytest.fixture
def axe_desktop_payload():
    """axe-core result with three rules; color-contrast is the most frequent."""
    return {
        "violations": [
            {
                "id": "image-alt",
                "impact": "critical",
                "help": "Images must have alternate text",
                "tags": ["cat.text-alternatives", "wcag2a", "wcag111"],
                "nodes": [{"target": ["img.hero"]}, {"target": ["img.logo"]}],
            },
            {
                "id": "color-contrast",
                "impact": "serious",
                "help": "Elements must meet minimum color contrast ratio thresholds",
                "tags": ["cat.color", "wcag2aa", "wcag143"],
                "nodes": [{"target": [f"p:nth-child({i})"]} for i in range(5)],
            },
            {
                "id": "region",
                "impact": "moderate",
                "help": "All page content should be contained by landmarks",
                "tags": ["cat.keyboard", "best-practice"],
                "nodes": [],
            },
        ]
    }


@pytest.fixture
def axe_mobile_payload():
    """axe-core result with only AA failures."""
    return {
        "violations": [
            {
                "id": "color-contrast",
                "impact": "serious",
                "help": "Elements must meet minimum color contrast ratio thresholds",
                "tags": ["wcag2aa", "wcag143"],
                "nodes": [{"target": ["a.nav"]}],
            },
            {
                "id": "target-size",
                "impact": "serious",
                "help": "All touch targets must be 24px large",
                "tags": ["wcag22aa", "wcag258"],
                "nodes": [{"target": ["button.x"]}, {"target": ["button.y"]}],
            },
        ]
    }


@pytest.fixture
def pa11y_payload():
    """Pa11y result: two errors of one code, one warning, one notice."""
    code = "WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail"
    return {
        "issues": [
            {"type": "error", "code": code, "message": "This element has insufficient contrast."},
            {"type": "error", "code": code, "message": "This element has insufficient contrast."},
            {
                "type": "warning",
                "code": "WCAG2AA.Principle1.Guideline1_3.1_3_1.H49.I",
                "message": "Semantic markup should be used to mark emphasised text.",
            },
            {
                "type": "notice",
                "code": "WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.2",
                "message": "Check that the title element describes the document.",
            },
        ]
    }


@pytest.fixture
def qualweb_payload():
    """QualWeb result: one failed and one passed assertion."""
    return {
        "url": "https://example.com",
        "reports": [
            {
                "assertions": {
                    "QW-ACT-R5": {
                        "code": "QW-ACT-R5",
                        "name": "Validity of HTML Lang attribute",
                        "metadata": {
                            "verdict": "failed",
                            "success-criteria": [{"name": "3.1.1", "level": "A"}],
                        },
                    },
                    "QW-ACT-R1": {
                        "code": "QW-ACT-R1",
                        "name": "HTML Page has a title",
                        "metadata": {"verdict": "passed"},
                    },
                }
            }
        ],
    }


def lighthouse(score):
    return {"categories": {"accessibility": {"score": score}}}


@pytest.fixture
def lighthouse_desktop_payload():
    return lighthouse(0.81)


@pytest.fixture
def lighthouse_mobile_payload():
    return lighthouse(0.64)


@pytest.fixture
def reports_dir(
    tmp_path,
    axe_desktop_payload,
    axe_mobile_payload,
    pa11y_payload,
    qualweb_payload,
    lighthouse_desktop_payload,
    lighthouse_mobile_payload,
):
    """A reports directory populated the way the scanners leave it."""
    files = {
        "axe-desktop.json": axe_desktop_payload,
        "axe-mobile.json": axe_mobile_payload,
        "pa11y.json": pa11y_payload,
        "qualweb.json": qualweb_payload,
        "lighthouse-desktop.report.json": lighthouse_desktop_payload,
        "lighthouse-mobile.report.json": lighthouse_mobile_payload,
    }
    directory = tmp_path / "reports"
    directory.mkdir()
    for name, payload in files.items():
        (directory / name).write_text(json.dumps(payload), encoding="utf-8")
    return directory
