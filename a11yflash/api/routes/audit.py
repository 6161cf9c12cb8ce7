"""
Audit Trail Route — GET /audit
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query

from a11yflash.api.dependencies import get_audit_logger
from a11yflash.audit.logger import AuditLogger

router = APIRouter()


@router.get("/audit")
async def recent_runs(
    count: int = Query(default=50, ge=1, le=1000),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Most recent summary runs, oldest first."""
    return {"entries": await asyncio.to_thread(audit.read_recent, count)}
