"""
A11y Flash FastAPI Application.

Accessibility audit aggregator:
  POST /summary        → aggregate inline axe / Pa11y / QualWeb / Lighthouse payloads
  GET  /summary        → aggregate the configured reports directory
  POST /summary/write  → same, and write the summary files
  GET  /audit          → most recent audit trail entries
  GET  /health         → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from a11yflash import __version__
from a11yflash.api.routes.audit import router as audit_router
from a11yflash.api.routes.health import router as health_router
from a11yflash.api.routes.summary import router as summary_router
from a11yflash.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("a11yflash")

app = FastAPI(
    title="A11y Flash",
    description="Aggregates accessibility scanner results into a scored summary",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(summary_router)
app.include_router(audit_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(), "body": body.decode("utf-8")[:100]},
    )
