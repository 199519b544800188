"""
Configuration settings for tablebench.

Uses Pydantic Settings to load environment variables for the template source,
logging, and benchmark defaults. Values left as ``None`` fall back to the
selected variant's defaults (see `tablebench.variants`).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Template source
    template_path: str = Field("templates/List.html", alias="BENCHMARK_TEMPLATE_PATH")
    sub_template: str = Field("table", alias="BENCHMARK_SUB_TEMPLATE")

    # Benchmark defaults
    benchmark_variant: str = Field("table", alias="BENCHMARK_VARIANT")
    benchmark_items: Optional[int] = Field(None, ge=0, alias="BENCHMARK_ITEMS")
    benchmark_runs: Optional[int] = Field(None, ge=1, alias="BENCHMARK_RUNS")
    benchmark_warmup_runs: int = Field(0, ge=0, alias="BENCHMARK_WARMUP_RUNS")
    results_dir: str = Field("results", alias="BENCHMARK_RESULTS_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
