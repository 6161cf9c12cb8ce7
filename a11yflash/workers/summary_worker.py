"""
Summary Worker — Orchestrates one summary run.

Pipeline:
1. Load every known scanner file from the reports directory (tolerant)
2. Aggregate: group, rank, classify, score, estimate compliance
3. Write summary.json + summary-details.json
4. Append an audit entry
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Any, Mapping

from a11yflash.audit.logger import AuditLogger
from a11yflash.config import settings
from a11yflash.core.aggregator import aggregate
from a11yflash.core.classifier import RuleClassifier
from a11yflash.core.loaders import PARSERS, load_reports_dir, parse_report
from a11yflash.core.scorer import lighthouse_accessibility_score
from a11yflash.core.writer import write_summary
from a11yflash.models.report_models import SourceLoad, ToolReport
from a11yflash.models.summary_models import AggregationResult, AuditEntry

logger = logging.getLogger("a11yflash.worker")


class SummaryWorker:
    """Runs load → aggregate → write → audit for one target."""

    def __init__(
        self,
        classifier: RuleClassifier | None = None,
        audit_logger: AuditLogger | None = None,
        top_n: int | None = None,
    ) -> None:
        self.classifier = classifier or RuleClassifier()
        self.audit_logger = audit_logger
        self.top_n = top_n if top_n is not None else settings.top_n
        if self.top_n < 1:
            raise ValueError(f"top_n must be at least 1, got {self.top_n}")

    def run(
        self,
        reports_dir: str | Path | None = None,
        target: str | None = None,
        out_dir: str | Path | None = None,
        write: bool = True,
    ) -> AggregationResult:
        """
        Summarize a reports directory.

        Args:
            reports_dir: Where the scanners wrote their JSON. Defaults to settings.reports_dir.
            target: Audited URL label. Defaults to settings.url.
            out_dir: Output directory. Defaults to settings.out_dir, then reports_dir.
            write: When False, nothing is written to disk.

        Returns:
            The AggregationResult.

        Raises:
            SummaryWriteError: when write=True and the outputs cannot be written.
        """
        run_id = str(uuid.uuid4())[:8]
        start_time = time.monotonic()
        reports_dir = Path(reports_dir or settings.reports_dir)
        target = target or settings.url

        logger.info(f"[{run_id}] Summarizing {reports_dir} (target={target or '-'})")

        snapshot = load_reports_dir(reports_dir)
        present = [load.source for load in snapshot.loads if load.is_present]
        logger.info(f"[{run_id}] Sources with data: {', '.join(present) or 'none'}")

        result = aggregate(
            snapshot.reports,
            sub_scores=snapshot.sub_scores,
            target=target,
            snapshot_times=snapshot.snapshot_times,
            classifier=self.classifier,
            top_n=self.top_n,
        )
        logger.info(
            f"[{run_id}] Overall score: {result.summary.overall_score}, "
            f"level: {result.summary.estimated_compliance_level.value}"
        )

        if write:
            out = Path(out_dir or settings.out_dir or reports_dir)
            summary_path, details_path = write_summary(result, out)
            logger.info(f"[{run_id}] Wrote {summary_path} and {details_path}")

        self._audit(run_id, result, snapshot.loads, start_time)
        return result

    def summarize_payloads(
        self,
        reports: Mapping[str, Any],
        lighthouse: Mapping[str, Any] | None = None,
        target: str | None = None,
    ) -> AggregationResult:
        """Summarize native scanner payloads passed in memory (no file I/O)."""
        run_id = str(uuid.uuid4())[:8]
        start_time = time.monotonic()

        tool_reports: dict[str, ToolReport | None] = {}
        loads: list[SourceLoad] = []
        for source, payload in reports.items():
            if source not in PARSERS:
                logger.warning(f"[{run_id}] Unknown report source '{source}' ignored")
                continue
            report = parse_report(source, payload)
            if payload is None:
                status = "missing"
            elif report is None:
                status = "malformed"
            else:
                status = "ok"
            loads.append(SourceLoad(source=source, path="<inline>", status=status))
            tool_reports[source] = report

        sub_scores = {
            profile: lighthouse_accessibility_score(payload)
            for profile, payload in (lighthouse or {}).items()
        }

        logger.info(f"[{run_id}] Summarizing {len(tool_reports)} inline reports")
        result = aggregate(
            tool_reports,
            sub_scores=sub_scores,
            target=target,
            classifier=self.classifier,
            top_n=self.top_n,
        )
        self._audit(run_id, result, loads, start_time)
        return result

    def _audit(
        self,
        run_id: str,
        result: AggregationResult,
        loads: list[SourceLoad],
        start_time: float,
    ) -> None:
        if self.audit_logger is None:
            return
        elapsed = (time.monotonic() - start_time) * 1000
        self.audit_logger.log(
            AuditEntry(
                run_id=run_id,
                target=result.summary.target,
                sources_present=[l.source for l in loads if l.status == "ok"],
                sources_missing=[l.source for l in loads if l.status == "missing"],
                sources_malformed=[l.source for l in loads if l.status == "malformed"],
                raw_occurrences={
                    name: source.raw_occurrences for name, source in result.sources.items()
                },
                overall_score=result.summary.overall_score,
                compliance_level=result.summary.estimated_compliance_level.value,
                duration_ms=round(elapsed, 2),
            )
        )
