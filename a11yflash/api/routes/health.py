"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from a11yflash import __version__

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "engine": "pattern-classifier",
    }
