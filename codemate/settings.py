from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - ANALYSIS_DELAY_SECONDS: simulated latency before each result (0 disables it)
    # - ANALYSIS_SEED (optional): seeds filler issues/metric noise for reproducible output
    # - REPORT_PAGE_LINES: lines per page in the text report
    # - LOG_LEVEL
    analysis_delay_seconds: float = Field(default=2.0, ge=0.0, validation_alias="ANALYSIS_DELAY_SECONDS")
    analysis_seed: int | None = Field(default=None, validation_alias="ANALYSIS_SEED")
    report_page_lines: int = Field(default=60, ge=10, validation_alias="REPORT_PAGE_LINES")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
