"""
A11y Flash Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Nothing is required: the target URL only labels the report.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Target ──
    url: str | None = Field(
        default=None, description="Audited page URL, used for report labelling only"
    )

    # ── Inputs / Outputs ──
    reports_dir: str = Field(
        default="reports", description="Directory the scanners write their JSON into"
    )
    out_dir: str | None = Field(
        default=None,
        description="Directory for summary outputs. Defaults to reports_dir.",
    )

    # ── Aggregation ──
    top_n: int = Field(
        default=10, ge=1, description="Ranked rule groups kept per source"
    )
    profiles: list[str] = Field(
        default=["desktop", "mobile"],
        description=(
            "Device profiles that always appear in per-profile scores. "
            "Set from the environment as JSON, e.g. PROFILES='[\"desktop\",\"tablet\"]'"
        ),
    )

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Logging / Audit ──
    log_level: str = Field(default="INFO", description="Root logging level")
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
