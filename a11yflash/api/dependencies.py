"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from a11yflash.audit.logger import AuditLogger
from a11yflash.workers.summary_worker import SummaryWorker


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Shared audit logger singleton."""
    return AuditLogger()


@lru_cache
def get_summary_worker() -> SummaryWorker:
    """Shared summary worker singleton."""
    return SummaryWorker(audit_logger=get_audit_logger())
