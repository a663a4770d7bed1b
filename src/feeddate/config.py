"""Configuration via pydantic-settings — 12-factor app style."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Feeddate configuration — loaded from env vars / .env file."""

    max_age_seconds: int = Field(default=7 * 24 * 3600, description="Oldest acceptable article age")
    future_tolerance_seconds: int = Field(default=3600, description="Clock-skew allowance for future dates")
    max_input_length: int = Field(default=255, description="Date strings are truncated to this length")
    recent_windows: list[int] = Field(default=[2, 6, 12, 24], description="Hour windows tried by select_recent")
    min_recent_items: int = Field(default=5, description="Items a window must yield to be accepted")
    metrics_buffer_size: int = Field(default=1000, description="Measurements kept by the performance monitor")
    log_level: str = Field(default="WARNING", description="Log level applied by the CLI")

    class Config:
        env_prefix = "FEEDDATE_"
        env_file = ".env"


settings = Settings()
