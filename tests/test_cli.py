"""
Tests for the a11yflash-summary CLI.
"""

import json

import pytest

from a11yflash.cli import run
from a11yflash.core.writer import DETAILS_FILE, SUMMARY_FILE


def test_cli_writes_summary(reports_dir, tmp_path, capsys):
    out_dir = tmp_path / "out"
    code = run([
        "--url=https://example.com",
        "--reports-dir", str(reports_dir),
        "--out-dir", str(out_dir),
        "--no-audit",
    ])
    assert code == 0
    summary = json.loads((out_dir / SUMMARY_FILE).read_text(encoding="utf-8"))
    assert summary["target"] == "https://example.com"
    printed = json.loads(capsys.readouterr().out)
    assert printed["overall_score"] == 73


def test_cli_without_url_still_summarizes(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("URL", raising=False)
    code = run(["--reports-dir", str(tmp_path), "--no-audit", "--print"])
    assert code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["overall_score"] is None


def test_cli_write_failure_exits_nonzero(reports_dir, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    code = run([
        "--reports-dir", str(reports_dir),
        "--out-dir", str(blocker / "out"),
        "--no-audit",
    ])
    assert code == 1
    assert "[summary]" in capsys.readouterr().err


@pytest.mark.parametrize("value", ["-1", "0", "ten"])
def test_cli_rejects_bad_top_n(tmp_path, value, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--reports-dir", str(tmp_path), "--no-audit", "--top-n", value])
    assert exc.value.code == 2
    assert "--top-n" in capsys.readouterr().err


def test_cli_top_n_limits_ranked_rules(tmp_path, capsys):
    issues = [
        {"type": "error", "code": "a", "message": "first"},
        {"type": "error", "code": "a", "message": "first"},
        {"type": "error", "code": "b", "message": "second"},
    ]
    (tmp_path / "pa11y.json").write_text(json.dumps({"issues": issues}), encoding="utf-8")
    code = run(["--reports-dir", str(tmp_path), "--no-audit", "--top-n", "1"])
    assert code == 0
    details = json.loads((tmp_path / DETAILS_FILE).read_text(encoding="utf-8"))
    assert [group["rule"] for group in details["top_rules"]["pa11y"]] == ["a"]
