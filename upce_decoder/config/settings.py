"""
Decoder settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Decoder configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UPCE_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pattern matching tolerances, relative to the unit module width
    max_avg_variance: float = Field(
        0.48, gt=0.0, le=1.0, description="Max average variance for a pattern match"
    )
    max_individual_variance: float = Field(
        0.7, gt=0.0, le=1.0, description="Max variance of a single bar or space"
    )

    # Orientation
    try_reversed: bool = Field(True, description="Also decode the row read right-to-left")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached decoder settings."""
    return Settings()
