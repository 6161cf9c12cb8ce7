"""
Tests for the JSON-lines audit trail.
"""

import pytest

from a11yflash.audit.logger import AuditLogger
from a11yflash.models.summary_models import AuditEntry


def test_log_and_read_back(tmp_path):
    audit = AuditLogger(str(tmp_path / "audit.jsonl"))
    for i in range(3):
        audit.log(AuditEntry(run_id=f"run{i}", overall_score=i))
    entries = audit.read_recent(count=2)
    assert [e["run_id"] for e in entries] == ["run1", "run2"]
    assert "timestamp" in entries[0]


def test_read_skips_garbage_lines(tmp_path):
    path = tmp_path / "audit.jsonl"
    path.write_text('{"run_id": "ok"}\nnot json\n\n', encoding="utf-8")
    assert AuditLogger(str(path)).read_recent() == [{"run_id": "ok"}]


def test_missing_log_reads_empty(tmp_path):
    assert AuditLogger(str(tmp_path / "none.jsonl")).read_recent() == []


def test_unwritable_log_does_not_raise(tmp_path):
    audit = AuditLogger(str(tmp_path / "missing-dir" / "audit.jsonl"))
    audit.log(AuditEntry(run_id="x"))
    assert audit.read_recent() == []


def test_read_recent_rejects_non_positive_count(tmp_path):
    with pytest.raises(ValueError):
        AuditLogger(str(tmp_path / "audit.jsonl")).read_recent(count=0)
