"""
A11y Flash — /summary endpoints.

POST /summary        aggregates native scanner payloads sent inline
GET  /summary        aggregates the configured reports directory (read-only)
POST /summary/write  same, and writes summary.json + summary-details.json
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from a11yflash.api.dependencies import get_summary_worker
from a11yflash.core.writer import SummaryWriteError
from a11yflash.models.summary_models import AggregationResult
from a11yflash.workers.summary_worker import SummaryWorker

logger = logging.getLogger("a11yflash.api")
router = APIRouter()


class SummaryRequest(BaseModel):
    """Raw scanner outputs, keyed by source; null means no data for that source."""

    target: str | None = Field(default=None, description="Audited URL, label only")
    reports: dict[str, Any] = Field(
        default_factory=dict,
        description="Source ('axe-desktop', 'axe-mobile', 'pa11y', 'qualweb') -> native JSON",
    )
    lighthouse: dict[str, Any] = Field(
        default_factory=dict,
        description="Profile ('desktop', 'mobile') -> Lighthouse report JSON",
    )


@router.post("/summary", response_model=AggregationResult)
async def create_summary(
    req: SummaryRequest,
    worker: SummaryWorker = Depends(get_summary_worker),
):
    """Aggregate inline scanner payloads."""
    return await asyncio.to_thread(worker.summarize_payloads, req.reports, req.lighthouse, req.target)


@router.get("/summary", response_model=AggregationResult)
async def read_summary(
    target: str | None = None,
    worker: SummaryWorker = Depends(get_summary_worker),
):
    """Aggregate whatever the scanners left in the reports directory."""
    return await asyncio.to_thread(worker.run, target=target, write=False)


@router.post("/summary/write", response_model=AggregationResult)
async def write_summary_files(
    target: str | None = None,
    worker: SummaryWorker = Depends(get_summary_worker),
):
    """Aggregate the reports directory and write summary.json next to it."""
    try:
        return await asyncio.to_thread(worker.run, target=target, write=True)
    except SummaryWriteError as e:
        logger.error(f"Summary write failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
