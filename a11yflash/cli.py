"""
A11y Flash CLI — summarize a reports directory.

    a11yflash-summary --url=https://example.com --reports-dir reports

Exit codes: 0 on success, 1 when the summary files cannot be written.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from a11yflash import __version__
from a11yflash.audit.logger import AuditLogger
from a11yflash.config import settings
from a11yflash.core.writer import SummaryWriteError, render_summary
from a11yflash.workers.summary_worker import SummaryWorker

logger = logging.getLogger("a11yflash.cli")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11yflash-summary",
        description="Aggregate accessibility scanner reports into a scored summary.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--url", help="Audited URL (label only). Falls back to the URL env var.")
    parser.add_argument("--reports-dir", help="Directory holding the scanner JSON files.")
    parser.add_argument("--out-dir", help="Where to write summary files. Defaults to the reports dir.")
    parser.add_argument("--top-n", type=positive_int, help="Ranked rule groups kept per source.")
    parser.add_argument("--no-audit", action="store_true", help="Do not append to the audit log.")
    parser.add_argument("--print", dest="print_summary", action="store_true",
                        help="Also print summary.json to stdout.")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    worker = SummaryWorker(
        audit_logger=None if args.no_audit else AuditLogger(),
        top_n=args.top_n,
    )
    try:
        result = worker.run(
            reports_dir=args.reports_dir,
            target=args.url,
            out_dir=args.out_dir,
        )
    except SummaryWriteError as e:
        logger.error(f"Summary write failed: {e}")
        print(f"[summary] {e}", file=sys.stderr)
        return 1

    if args.print_summary:
        print(render_summary(result))
    else:
        print(json.dumps({
            "overall_score": result.summary.overall_score,
            "estimated_compliance_level": result.summary.estimated_compliance_level.value,
        }))
    return 0


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    raise SystemExit(run())
